"""Registration form validation utilities."""
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from src.models.attendee import ProfileImage, RegistrationDraft, RegistrationForm
from src.utils.exceptions import ValidationError

CONTACT_NUMBER_PATTERN = re.compile(r"^[0-9+-]+$")
EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)
STUDENT_ID_PATTERN = re.compile(r"^\d+$")

MAX_PICTURE_BYTES = 2 * 1024 * 1024
FIRST_BATCH = 11
LAST_BATCH = 76


@dataclass(frozen=True)
class ValidationResult:
    """Either a validated draft or a map of field errors, never both."""

    draft: Optional[RegistrationDraft] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def ok(cls, draft: RegistrationDraft) -> "ValidationResult":
        return cls(draft=draft)

    @classmethod
    def err(cls, errors: Dict[str, str]) -> "ValidationResult":
        return cls(errors=dict(errors))

    @property
    def is_valid(self) -> bool:
        return self.draft is not None and not self.errors

    def unwrap(self) -> RegistrationDraft:
        """Return the draft or raise ValidationError with every field error."""
        if not self.is_valid:
            raise ValidationError(self.errors)
        return self.draft


def batch_options() -> List[str]:
    """Batch codes offered by the form: "011" through "076"."""
    return [f"{number:03d}" for number in range(FIRST_BATCH, LAST_BATCH + 1)]


def _required(value: str, message: str) -> Tuple[bool, str]:
    if not value or not value.strip():
        return False, message
    return True, ""


def validate_full_name(name: str) -> Tuple[bool, str]:
    """
    Validate attendee full name.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Full name is required") if empty
    """
    return _required(name, "Full name is required")


def validate_contact_number(number: str) -> Tuple[bool, str]:
    """
    Validate contact number: digits, "+" and "-" only.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (False, "Contact number is required") if empty
        - (False, "Please enter a valid phone number") if it has other characters
    """
    is_valid, message = _required(number, "Contact number is required")
    if not is_valid:
        return is_valid, message
    if not CONTACT_NUMBER_PATTERN.match(number.strip()):
        return False, "Please enter a valid phone number"
    return True, ""


def validate_email(email: str) -> Tuple[bool, str]:
    """
    Validate email address in local@domain.tld shape.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (False, "Email is required") if empty
        - (False, "Please enter a valid email address") if malformed
    """
    is_valid, message = _required(email, "Email is required")
    if not is_valid:
        return is_valid, message
    if not EMAIL_PATTERN.match(email.strip()):
        return False, "Please enter a valid email address"
    return True, ""


def validate_company_name(company: str) -> Tuple[bool, str]:
    return _required(company, "Company name is required")


def validate_current_position(position: str) -> Tuple[bool, str]:
    return _required(position, "Current position is required")


def validate_batch(batch: str) -> Tuple[bool, str]:
    """Batch is free-form but required."""
    return _required(batch, "Batch is required")


def validate_student_id(student_id: str) -> Tuple[bool, str]:
    """
    Validate optional student ID.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if empty or numeric
        - (False, "Please enter a valid student ID (numbers only)") otherwise
    """
    if not student_id or not student_id.strip():
        return True, ""
    if not STUDENT_ID_PATTERN.match(student_id.strip()):
        return False, "Please enter a valid student ID (numbers only)"
    return True, ""


def validate_profile_picture(image: Optional[ProfileImage], required: bool = True) -> Tuple[bool, str]:
    """
    Validate uploaded profile picture.

    Args:
        image: Uploaded image, or None
        required: Whether a picture must be supplied

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (False, "Profile picture is required") if missing and required
        - (False, "Please upload an image file") if MIME type isn't image/*
        - (False, "Image size should be less than 2MB") if larger than 2 MiB
    """
    if image is None:
        if required:
            return False, "Profile picture is required"
        return True, ""

    if not (image.mime_type or "").lower().startswith("image/"):
        return False, "Please upload an image file"

    if image.size > MAX_PICTURE_BYTES:
        return False, "Image size should be less than 2MB"

    return True, ""


def validate_registration(form: RegistrationForm, require_picture: bool = True) -> ValidationResult:
    """
    Validate every field of a registration form.

    Errors are accumulated per field so they can be shown together.

    Args:
        form: Raw form values
        require_picture: Whether the profile picture is mandatory

    Returns:
        ValidationResult holding a trimmed RegistrationDraft, or the
        {field: message} map keyed by persisted field names
    """
    checks = {
        "fullName": validate_full_name(form.full_name),
        "contactNumber": validate_contact_number(form.contact_number),
        "email": validate_email(form.email),
        "companyName": validate_company_name(form.company_name),
        "currentPosition": validate_current_position(form.current_position),
        "batch": validate_batch(form.batch),
        "studentId": validate_student_id(form.student_id),
        "profilePicture": validate_profile_picture(form.profile_picture, required=require_picture),
    }

    errors = {name: message for name, (is_valid, message) in checks.items() if not is_valid}
    if errors:
        return ValidationResult.err(errors)

    return ValidationResult.ok(
        RegistrationDraft(
            full_name=form.full_name.strip(),
            contact_number=form.contact_number.strip(),
            company_name=form.company_name.strip(),
            current_position=form.current_position.strip(),
            batch=form.batch.strip(),
            email=form.email.strip(),
            student_id=(form.student_id or "").strip(),
            address=(form.address or "").strip(),
            profile_picture=form.profile_picture,
        )
    )
