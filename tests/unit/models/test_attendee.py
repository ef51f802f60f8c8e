"""Tests for Attendee model."""
import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

from src.models.attendee import Attendee, ProfileImage
from src.models.column import ColumnConfig
from src.models.ticket import TicketPayload


class TestAttendeeValidation:
    """Tests for attendee construction."""

    def test_create_valid_attendee(self, make_attendee):
        """Valid attendee should be created successfully."""
        attendee = make_attendee()
        assert attendee.full_name == "Jane Doe"
        assert attendee.profile_picture == ""

    def test_empty_id_raises_error(self, make_attendee):
        """Empty id should raise ValueError."""
        with pytest.raises(ValueError, match="Attendee ID cannot be empty"):
            make_attendee(id="  ")

    def test_numeric_id_raises_error(self, make_attendee):
        with pytest.raises(ValueError, match="id must be a string"):
            make_attendee(id=5)

    def test_none_name_raises_error(self, make_attendee):
        """Stored nulls in text fields are rejected, not carried as None."""
        with pytest.raises(ValueError, match="full_name must be a string"):
            make_attendee(full_name=None)

    def test_string_registration_date_raises_error(self, make_attendee):
        """Registration date must be a datetime, not a string."""
        with pytest.raises(ValueError, match="Invalid registration date"):
            make_attendee(registration_date="2025-07-01T10:30:00Z")

    def test_attendee_is_immutable(self, make_attendee):
        """Attendees can't be modified in place."""
        attendee = make_attendee()
        with pytest.raises(FrozenInstanceError):
            attendee.full_name = "Someone Else"


class TestAttendeeSerialization:
    """Tests for the persisted JSON shape."""

    def test_to_dict_uses_camel_case_keys(self, make_attendee):
        """Persisted keys match the stored blob layout."""
        data = make_attendee().to_dict()
        assert set(data) == {
            "id", "fullName", "contactNumber", "companyName", "currentPosition",
            "batch", "studentId", "email", "profilePicture", "address", "registrationDate",
        }

    def test_registration_date_serialized_as_iso_8601(self, make_attendee):
        """Dates are stored as ISO 8601 strings."""
        data = make_attendee().to_dict()
        assert data["registrationDate"] == "2025-07-01T10:30:00+00:00"

    def test_from_dict_restores_datetime(self, make_attendee):
        """Loading turns the ISO string back into a datetime."""
        original = make_attendee()
        restored = Attendee.from_dict(original.to_dict())

        assert isinstance(restored.registration_date, datetime)
        assert restored == original

    def test_from_dict_accepts_z_suffix(self, make_attendee):
        """Timestamps written by browsers end with Z."""
        data = make_attendee().to_dict()
        data["registrationDate"] = "2025-07-01T10:30:00.000Z"

        restored = Attendee.from_dict(data)
        assert restored.registration_date == datetime(2025, 7, 1, 10, 30, tzinfo=timezone.utc)

    def test_from_dict_defaults_optional_fields(self, make_attendee):
        """Missing optional fields become empty strings."""
        data = make_attendee().to_dict()
        del data["studentId"]
        del data["address"]
        del data["profilePicture"]

        restored = Attendee.from_dict(data)
        assert restored.student_id == ""
        assert restored.address == ""
        assert restored.profile_picture == ""

    def test_from_dict_missing_required_key_raises(self, make_attendee):
        """Missing required keys raise KeyError."""
        data = make_attendee().to_dict()
        del data["email"]
        with pytest.raises(KeyError):
            Attendee.from_dict(data)

    def test_get_by_persisted_name(self, make_attendee):
        """get() reads values by camelCase field name."""
        attendee = make_attendee()
        assert attendee.get("fullName") == "Jane Doe"
        assert attendee.get("studentId") == "08514"

    def test_get_unknown_field_raises(self, make_attendee):
        """Unknown field names are rejected."""
        with pytest.raises(ValueError, match="Unknown attendee field"):
            make_attendee().get("password")


class TestProfileImage:
    """Tests for uploaded image wrapper."""

    def test_size_is_byte_length(self):
        image = ProfileImage(filename="a.png", mime_type="image/png", data=b"12345")
        assert image.size == 5


class TestTicketPayload:
    """Tests for QR payload encoding."""

    def test_qr_string_is_compact_json(self):
        """No whitespace between separators."""
        payload = TicketPayload(
            id="abc", name="Jane Doe", student_id="08514", batch="033", ticket_number="TG-2025-ABC"
        )
        assert payload.to_qr_string() == (
            '{"id":"abc","name":"Jane Doe","studentId":"08514","batch":"033","ticketNumber":"TG-2025-ABC"}'
        )


class TestColumnConfig:
    """Tests for admin column configuration."""

    def test_empty_field_raises_error(self):
        with pytest.raises(ValueError, match="Column field cannot be empty"):
            ColumnConfig(field="", header_name="Name")

    def test_empty_header_raises_error(self):
        with pytest.raises(ValueError, match="Column header cannot be empty"):
            ColumnConfig(field="fullName", header_name=" ")

    def test_selected_by_default(self):
        assert ColumnConfig("fullName", "Full Name").selected is True
