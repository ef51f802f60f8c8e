"""Admin view helpers: column selection, search and summary statistics."""
from dataclasses import dataclass
from typing import List, Sequence

from src.models.attendee import Attendee
from src.models.column import ColumnConfig


@dataclass(frozen=True)
class AttendeeStats:
    """Summary numbers shown above the admin table."""

    total: int
    batches: int
    companies: int
    with_photos: int


def default_columns() -> List[ColumnConfig]:
    """Admin table columns in display order; address is hidden by default."""
    return [
        ColumnConfig("fullName", "Full Name"),
        ColumnConfig("contactNumber", "Contact Number"),
        ColumnConfig("companyName", "Company Name"),
        ColumnConfig("currentPosition", "Current Position"),
        ColumnConfig("batch", "Batch"),
        ColumnConfig("studentId", "Student ID"),
        ColumnConfig("email", "Email"),
        ColumnConfig("address", "Address", selected=False),
        ColumnConfig("registrationDate", "Registration Date"),
        ColumnConfig("profilePicture", "Profile"),
    ]


def selected_fields(columns: Sequence[ColumnConfig]) -> List[str]:
    """Field names of the selected columns, in column order."""
    return [column.field for column in columns if column.selected]


def search_attendees(attendees: Sequence[Attendee], term: str) -> List[Attendee]:
    """
    Filter attendees by a case-insensitive search term.

    Args:
        attendees: All attendees
        term: Search text; blank returns everyone

    Returns:
        Attendees whose name, email, student ID, batch or contact number
        contains the term

    Behavior:
        - Example: "jane" matches "Jane Doe" and "mary@jane.io"
    """
    term = (term or "").strip().lower()
    if not term:
        return list(attendees)

    return [
        attendee for attendee in attendees
        if term in attendee.full_name.lower()
        or term in attendee.email.lower()
        or term in attendee.student_id.lower()
        or term in attendee.batch.lower()
        or term in attendee.contact_number.lower()
    ]


def export_candidates(attendees: Sequence[Attendee], term: str) -> List[Attendee]:
    """Records to export: the search result when a term is active, otherwise all."""
    if term and term.strip():
        return search_attendees(attendees, term)
    return list(attendees)


def compute_stats(attendees: Sequence[Attendee]) -> AttendeeStats:
    return AttendeeStats(
        total=len(attendees),
        batches=len({attendee.batch for attendee in attendees}),
        companies=len({attendee.company_name for attendee in attendees}),
        with_photos=sum(1 for attendee in attendees if attendee.profile_picture),
    )
