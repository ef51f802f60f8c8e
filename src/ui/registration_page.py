"""Landing and registration form UI component."""
import logging
from typing import Dict, Optional

import streamlit as st

from src.models.attendee import ProfileImage, RegistrationForm
from src.services.record_store import RecordStore
from src.services.registration_service import register_attendee
from src.ui.html_utils import html_block
from src.utils.config import EVENT_DATE_LINE, EVENT_NAME, EVENT_VENUE
from src.utils.validation import batch_options

logger = logging.getLogger(__name__)

PENDING_KEY = "registration_pending"
MESSAGE_KEY = "registration_message"
ERRORS_KEY = "registration_errors"
ALLOWED_PICTURE_TYPES = ["png", "jpg", "jpeg", "gif", "webp"]

FIELD_LABELS = {
    "fullName": "Full Name",
    "contactNumber": "Contact Number",
    "email": "Email Address",
    "companyName": "Company Name",
    "currentPosition": "Current Position",
    "batch": "Batch",
    "studentId": "Student ID",
    "profilePicture": "Profile Picture",
}


def _to_profile_image(uploaded_file: Optional[object]) -> Optional[ProfileImage]:
    """Wrap a Streamlit UploadedFile as a ProfileImage."""
    if uploaded_file is None:
        return None
    return ProfileImage(
        filename=uploaded_file.name,
        mime_type=uploaded_file.type or "",
        data=uploaded_file.getvalue(),
    )


def _render_landing_header() -> None:
    st.markdown(
        html_block(
            f"""
            <div class="landing-hero">
                <h1 class="landing-title">{EVENT_NAME}</h1>
                <p class="landing-subtitle">{EVENT_DATE_LINE} · {EVENT_VENUE}</p>
                <p class="landing-copy">Reconnect with fellow alumni over tea. Register below to receive your ticket.</p>
            </div>
            """
        ),
        unsafe_allow_html=True,
    )


def _render_errors(errors: Dict[str, str]) -> None:
    """Show every field error at once."""
    if not errors:
        return
    lines = "\n".join(f"- **{FIELD_LABELS.get(name, name)}**: {message}" for name, message in errors.items())
    st.error(f"Please fix the following before submitting:\n\n{lines}")


def _go_to_confirmation(attendee_id: str) -> None:
    st.session_state.current_page = "confirmation"
    st.session_state.attendee_id = attendee_id
    st.query_params["attendee_id"] = attendee_id
    st.rerun()


def _queue_submission(form: RegistrationForm) -> None:
    """Park the form and rerun so the button is drawn disabled while it is processed."""
    st.session_state[PENDING_KEY] = form
    st.session_state[MESSAGE_KEY] = ""
    st.rerun()


def _process_pending_submission(store: RecordStore) -> None:
    """Register the parked form, then route to the ticket or back to the form."""
    form = st.session_state.get(PENDING_KEY)
    if form is None:
        return

    try:
        with st.spinner("Submitting your registration..."):
            outcome = register_attendee(form, store)
    finally:
        st.session_state.pop(PENDING_KEY, None)

    st.session_state[ERRORS_KEY] = outcome.errors
    if outcome.success:
        _go_to_confirmation(outcome.attendee.id)
        return

    if not outcome.errors:
        st.session_state[MESSAGE_KEY] = outcome.message
    st.rerun()


def render_registration_page(store: RecordStore) -> None:
    """Render the landing header and the registration form."""
    _render_landing_header()

    if ERRORS_KEY not in st.session_state:
        st.session_state[ERRORS_KEY] = {}
    submitting = st.session_state.get(PENDING_KEY) is not None

    st.markdown("### 📝 Registration")
    _render_errors(st.session_state[ERRORS_KEY])
    if st.session_state.get(MESSAGE_KEY):
        st.error(st.session_state[MESSAGE_KEY])

    with st.form("registration_form", clear_on_submit=False):
        col1, col2 = st.columns(2)
        with col1:
            full_name = st.text_input("Full Name *", placeholder="e.g: Jane Doe")
            email = st.text_input("Email Address *", placeholder="your.email@example.com")
            current_position = st.text_input("Current Position *")
            student_id = st.text_input("Student ID", placeholder="e.g: 08514")
        with col2:
            contact_number = st.text_input("Contact Number *", placeholder="e.g: +8801234567891")
            company_name = st.text_input("Company Name *")
            batch = st.selectbox("Batch *", options=batch_options(), index=None, placeholder="Select your batch")
            address = st.text_input("Address")

        uploaded = st.file_uploader(
            "Profile Picture *",
            type=ALLOWED_PICTURE_TYPES,
            help="Image files only, up to 2MB",
        )

        submit = st.form_submit_button(
            "Registering..." if submitting else "🎫 Register",
            type="primary",
            disabled=submitting,
            use_container_width=True,
        )

    if submitting:
        _process_pending_submission(store)
        return

    if not submit:
        return

    _queue_submission(RegistrationForm(
        full_name=full_name,
        contact_number=contact_number,
        company_name=company_name,
        current_position=current_position,
        batch=batch or "",
        student_id=student_id,
        email=email,
        address=address,
        profile_picture=_to_profile_image(uploaded),
    ))
