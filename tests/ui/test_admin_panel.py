"""Tests for admin panel table helpers."""
from src.ui.admin_panel import _table_rows
from src.utils.date_utils import format_locale_datetime


class TestTableRows:
    """Tests for _table_rows."""

    def test_selected_fields_only(self, make_attendee):
        rows = _table_rows([make_attendee()], ["fullName", "batch"])
        assert rows == [{"fullName": "Jane Doe", "batch": "033"}]

    def test_registration_date_includes_time(self, make_attendee):
        attendee = make_attendee()
        rows = _table_rows([attendee], ["registrationDate"])
        assert rows[0]["registrationDate"] == format_locale_datetime(attendee.registration_date)

    def test_profile_picture_kept_as_data_uri(self, make_attendee):
        attendee = make_attendee(profile_picture="data:image/png;base64,AA==")
        rows = _table_rows([attendee], ["profilePicture"])
        assert rows[0]["profilePicture"] == "data:image/png;base64,AA=="
