"""Confirmation page UI component showing the attendee's ticket."""
import logging

import streamlit as st

from src.models.attendee import Attendee
from src.services.record_store import RecordStore
from src.services.registration_service import get_attendee_by_id
from src.services.ticket_service import (
    build_ticket_payload,
    generate_ticket_document,
    render_ticket_visual,
    ticket_filename,
)
from src.ui.html_utils import escape_text, html_block
from src.utils.config import CONTACT_EMAIL
from src.utils.exceptions import AttendeeNotFoundError, TicketGenerationError

logger = logging.getLogger(__name__)

PDF_CACHE_KEY = "ticket_pdf_cache"


def _back_to_registration() -> None:
    st.session_state.current_page = "register"
    st.session_state.attendee_id = None
    st.query_params.clear()
    st.rerun()


def _render_not_found(message: str) -> None:
    st.error(f"### {message}\n\nWe couldn't find your registration. Please try registering again.")
    if st.button("← Back to Registration", key="confirmation_not_found_back"):
        _back_to_registration()


def _ticket_pdf(attendee: Attendee) -> bytes:
    """PDF bytes for the attendee, generated once per session."""
    cache = st.session_state.setdefault(PDF_CACHE_KEY, {})
    if attendee.id not in cache:
        cache[attendee.id] = generate_ticket_document(attendee)
    return cache[attendee.id]


def render_confirmation_page(attendee_id: str, store: RecordStore) -> None:
    """Render the ticket for ``attendee_id`` or the not-found state."""
    try:
        attendee = get_attendee_by_id(attendee_id, store)
    except AttendeeNotFoundError as e:
        logger.info(f"Ticket requested for unknown attendee: {e}")
        _render_not_found("Registration not found" if attendee_id else "Invalid registration ID")
        return

    st.markdown(
        html_block(
            f"""
            <div class="confirmation-header">
                <h2>🎉 Registration Successful!</h2>
                <p>Thank you, {escape_text(attendee.full_name)}. Your ticket is ready.</p>
                <p class="confirmation-note">Please keep this ticket safe - you'll need to present it at the entrance.</p>
            </div>
            """
        ),
        unsafe_allow_html=True,
    )

    payload = build_ticket_payload(attendee)
    try:
        st.image(render_ticket_visual(attendee, payload, scale=1), use_container_width=True)
    except Exception as error:
        logger.exception("Ticket preview failed")
        st.warning(f"Ticket preview unavailable: {error}")

    col1, col2 = st.columns(2)
    with col1:
        try:
            with st.spinner("Generating PDF ticket..."):
                pdf_bytes = _ticket_pdf(attendee)
        except TicketGenerationError as error:
            st.error(str(error))
            if st.button("🔄 Retry", key="ticket_retry", use_container_width=True):
                st.rerun()
        else:
            st.download_button(
                "⬇️ Download PDF Ticket",
                data=pdf_bytes,
                file_name=ticket_filename(attendee),
                mime="application/pdf",
                type="primary",
                use_container_width=True,
            )
    with col2:
        if st.button("← Register Another Attendee", key="confirmation_back", use_container_width=True):
            _back_to_registration()

    st.caption(f"For any queries, please contact the organizers at {CONTACT_EMAIL}")
