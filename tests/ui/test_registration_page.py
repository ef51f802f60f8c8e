"""Tests for the registration page submission steps."""
from dataclasses import replace
from unittest.mock import patch

import pytest

from src.services.record_store import InMemoryRecordStore
from src.services.registration_service import RegistrationOutcome
from src.ui.registration_page import (
    ERRORS_KEY,
    MESSAGE_KEY,
    PENDING_KEY,
    _process_pending_submission,
    _queue_submission,
)


class SessionState(dict):
    """dict with attribute access, like st.session_state."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name, value):
        self[name] = value


@pytest.fixture
def mock_st():
    with patch("src.ui.registration_page.st") as st:
        st.session_state = SessionState()
        st.query_params = {}
        yield st


class TestQueueSubmission:
    """Tests for _queue_submission."""

    def test_parks_form_and_reruns(self, mock_st, jane_form):
        """The form is processed on the next run, with the button disabled."""
        _queue_submission(jane_form)

        assert mock_st.session_state[PENDING_KEY] == jane_form
        mock_st.rerun.assert_called_once()


class TestProcessPendingSubmission:
    """Tests for _process_pending_submission."""

    def test_nothing_pending_does_nothing(self, mock_st):
        store = InMemoryRecordStore()

        _process_pending_submission(store)

        assert store.load() == []
        mock_st.rerun.assert_not_called()

    def test_success_goes_to_confirmation(self, mock_st, jane_form):
        store = InMemoryRecordStore()
        mock_st.session_state[PENDING_KEY] = jane_form

        _process_pending_submission(store)

        attendee = store.load()[0]
        assert PENDING_KEY not in mock_st.session_state
        assert mock_st.session_state.current_page == "confirmation"
        assert mock_st.session_state.attendee_id == attendee.id
        assert mock_st.query_params["attendee_id"] == attendee.id

    def test_field_errors_kept_for_next_run(self, mock_st, jane_form):
        store = InMemoryRecordStore()
        mock_st.session_state[PENDING_KEY] = replace(jane_form, email="not-an-email")

        _process_pending_submission(store)

        assert store.load() == []
        assert "email" in mock_st.session_state[ERRORS_KEY]
        assert PENDING_KEY not in mock_st.session_state
        mock_st.rerun.assert_called_once()

    def test_failure_message_kept_for_next_run(self, mock_st, jane_form):
        mock_st.session_state[PENDING_KEY] = jane_form
        outcome = RegistrationOutcome(success=False, message="Registration failed. Please try again.")

        with patch("src.ui.registration_page.register_attendee", return_value=outcome):
            _process_pending_submission(InMemoryRecordStore())

        assert mock_st.session_state[MESSAGE_KEY] == "Registration failed. Please try again."
        assert PENDING_KEY not in mock_st.session_state

    def test_pending_cleared_when_registration_raises(self, mock_st, jane_form):
        """A crash mid-submission doesn't leave the button disabled."""
        mock_st.session_state[PENDING_KEY] = jane_form

        with patch("src.ui.registration_page.register_attendee", side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError):
                _process_pending_submission(InMemoryRecordStore())

        assert PENDING_KEY not in mock_st.session_state
