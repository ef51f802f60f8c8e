"""Admin table column configuration."""
from dataclasses import dataclass


@dataclass
class ColumnConfig:
    """A column of the admin attendee table."""

    field: str
    header_name: str
    selected: bool = True

    def __post_init__(self):
        """Validate column data after initialization."""
        if not self.field or not self.field.strip():
            raise ValueError("Column field cannot be empty")

        if not self.header_name or not self.header_name.strip():
            raise ValueError("Column header cannot be empty")
