"""Registration service: turns validated drafts into stored attendees."""
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from src.models.attendee import Attendee, RegistrationDraft, RegistrationForm
from src.services.record_store import RecordStore
from src.utils.async_utils import run_async
from src.utils.date_utils import now as current_time
from src.utils.exceptions import AttendeeNotFoundError, EncodingError
from src.utils.image_utils import encode_data_uri
from src.utils.validation import validate_registration

logger = logging.getLogger(__name__)


@dataclass
class RegistrationOutcome:
    """Result of a form submission as seen by the UI."""

    success: bool
    message: str
    attendee: Optional[Attendee] = None
    errors: Dict[str, str] = field(default_factory=dict)


async def add_attendee(
    draft: RegistrationDraft,
    store: RecordStore,
    now: Optional[datetime] = None,
) -> Attendee:
    """
    Create an attendee from a validated draft and append it to the store.

    Args:
        draft: Validated registration draft
        store: Record store to append to
        now: Registration instant (defaults to the current time)

    Returns:
        The stored Attendee, including its generated id

    Raises:
        EncodingError: If the profile picture can't be encoded; nothing is saved

    Behavior:
        - Generates a uuid4 id
        - Encodes the profile picture to a data URI before touching the store
        - Loads the full list, appends, and saves the full list back
    """
    attendee_id = str(uuid.uuid4())

    profile_picture = ""
    if draft.profile_picture is not None:
        profile_picture = await encode_data_uri(draft.profile_picture)

    attendee = Attendee(
        id=attendee_id,
        full_name=draft.full_name,
        contact_number=draft.contact_number,
        company_name=draft.company_name,
        current_position=draft.current_position,
        batch=draft.batch,
        student_id=draft.student_id,
        email=draft.email,
        address=draft.address,
        registration_date=now or current_time(),
        profile_picture=profile_picture,
    )

    attendees = store.load()
    attendees.append(attendee)
    store.save(attendees)

    logger.info(f"Registered attendee {attendee.id} (batch {attendee.batch})")
    return attendee


def register_attendee(
    form: RegistrationForm,
    store: RecordStore,
    require_picture: bool = True,
) -> RegistrationOutcome:
    """
    Validate a submitted form and, if valid, store the attendee.

    Args:
        form: Raw form values
        store: Record store to append to
        require_picture: Whether a profile picture is mandatory

    Returns:
        RegistrationOutcome
        - success with the new attendee
        - failure with every field error when validation fails
        - failure with a single message when encoding or saving fails
    """
    result = validate_registration(form, require_picture=require_picture)
    if not result.is_valid:
        return RegistrationOutcome(
            success=False,
            message="Please fix the highlighted fields",
            errors=result.errors,
        )

    draft = result.unwrap()
    try:
        attendee = run_async(lambda: add_attendee(draft, store))
    except EncodingError as e:
        return RegistrationOutcome(success=False, message=str(e))
    except IOError as e:
        logger.error(f"File operation failed during registration: {e}")
        return RegistrationOutcome(success=False, message="Registration failed. Please try again.")

    return RegistrationOutcome(success=True, message="Registration successful", attendee=attendee)


def get_attendees(store: RecordStore) -> List[Attendee]:
    """All stored attendees in registration order."""
    return store.load()


def get_attendee_by_id(attendee_id: str, store: RecordStore) -> Attendee:
    """
    Look up an attendee by id.

    Raises:
        AttendeeNotFoundError: If the id is empty or not in the store
    """
    if not attendee_id:
        raise AttendeeNotFoundError("Invalid registration ID")

    for attendee in store.load():
        if attendee.id == attendee_id:
            return attendee

    raise AttendeeNotFoundError(f"Registration not found: {attendee_id}")
