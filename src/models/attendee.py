"""Attendee data models for event registration."""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from src.utils.date_utils import format_timestamp, parse_timestamp

# Persisted key -> attribute name
FIELD_MAP = {
    "id": "id",
    "fullName": "full_name",
    "contactNumber": "contact_number",
    "companyName": "company_name",
    "currentPosition": "current_position",
    "batch": "batch",
    "studentId": "student_id",
    "email": "email",
    "profilePicture": "profile_picture",
    "address": "address",
    "registrationDate": "registration_date",
}

EXPORTABLE_FIELDS = list(FIELD_MAP.keys())

STRING_FIELDS = [attr for attr in FIELD_MAP.values() if attr != "registration_date"]


@dataclass(frozen=True)
class ProfileImage:
    """Raw uploaded image as received from the form."""

    filename: str
    mime_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class RegistrationDraft:
    """Validated, trimmed form input that has not been stored yet."""

    full_name: str
    contact_number: str
    company_name: str
    current_position: str
    batch: str
    email: str
    student_id: str = ""
    address: str = ""
    profile_picture: Optional[ProfileImage] = None


@dataclass(frozen=True)
class Attendee:
    """Registered attendee. Never mutated after creation."""

    id: str
    full_name: str
    contact_number: str
    company_name: str
    current_position: str
    batch: str
    student_id: str
    email: str
    address: str
    registration_date: datetime
    profile_picture: str = ""

    def __post_init__(self):
        """Validate attendee data."""
        for name in STRING_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"Attendee {name} must be a string, got {type(value).__name__}")
        if not self.id.strip():
            raise ValueError("Attendee ID cannot be empty")
        if not isinstance(self.registration_date, datetime):
            raise ValueError(f"Invalid registration date: {self.registration_date!r}")

    def get(self, field: str) -> Any:
        """Read a value by its persisted (camelCase) field name."""
        if field not in FIELD_MAP:
            raise ValueError(f"Unknown attendee field: {field}")
        return getattr(self, FIELD_MAP[field])

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted JSON shape."""
        data = {key: getattr(self, attr) for key, attr in FIELD_MAP.items()}
        data["registrationDate"] = format_timestamp(self.registration_date)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Attendee":
        """
        Build an attendee from its persisted JSON shape.

        Raises:
            KeyError: If a required key is missing
            ValueError: If the registration date can't be parsed
        """
        return cls(
            id=data["id"],
            full_name=data["fullName"],
            contact_number=data["contactNumber"],
            company_name=data["companyName"],
            current_position=data["currentPosition"],
            batch=data["batch"],
            student_id=data.get("studentId") or "",
            email=data["email"],
            address=data.get("address") or "",
            registration_date=parse_timestamp(data["registrationDate"]),
            profile_picture=data.get("profilePicture") or "",
        )


@dataclass(frozen=True)
class RegistrationForm:
    """Raw, untrimmed values submitted through the registration form."""

    full_name: str = ""
    contact_number: str = ""
    company_name: str = ""
    current_position: str = ""
    batch: str = ""
    student_id: str = ""
    email: str = ""
    address: str = ""
    profile_picture: Optional[ProfileImage] = None
