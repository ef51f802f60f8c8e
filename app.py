"""
Tea Gathering registration application
Attendee registration, tickets and admin export
"""
import logging

import streamlit as st

from src.services.record_store import get_default_store
from src.ui.admin_panel import render_admin_panel
from src.ui.confirmation_page import render_confirmation_page
from src.ui.registration_page import render_registration_page
from src.utils.config import get_log_level

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


st.set_page_config(
    page_title="Tea Gathering",
    page_icon="🍵",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def initialize_session_state():
    """Set session state defaults and honor ?attendee_id= links."""
    if "current_page" not in st.session_state:
        st.session_state.current_page = "register"

    if "attendee_id" not in st.session_state:
        st.session_state.attendee_id = None

    if "url_params_processed" not in st.session_state:
        query_params = st.query_params
        if "attendee_id" in query_params:
            st.session_state.attendee_id = query_params["attendee_id"]
            st.session_state.current_page = "confirmation"
        elif query_params.get("page") == "admin":
            st.session_state.current_page = "admin"
        st.session_state.url_params_processed = True


def apply_custom_css():
    """Apply the event palette."""
    st.markdown("""
        <style>
        .stApp {
            background: #f9f9fd;
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        .stButton > button {
            border-radius: 12px;
            font-weight: 600;
        }

        .stButton > button[kind="primary"], .stDownloadButton > button[kind="primary"] {
            background: #252265;
            color: white;
        }

        .landing-hero {
            text-align: center;
            padding: 32px 16px 16px;
        }
        .landing-title {
            color: #252265;
            font-size: 48px;
            font-weight: 800;
            margin: 0;
        }
        .landing-subtitle {
            color: #1c1a4c;
            font-size: 18px;
            font-weight: 600;
        }
        .landing-copy, .confirmation-note {
            color: #5a5a6e;
        }
        .confirmation-header {
            text-align: center;
            color: #252265;
        }

        [data-testid="stMetric"] {
            background: white;
            border: 1px solid #bbbacf;
            border-radius: 12px;
            padding: 12px 16px;
        }
        </style>
    """, unsafe_allow_html=True)


def render_navigation():
    """Render the top navigation buttons."""
    nav_col1, _, nav_col3 = st.columns([1, 3, 1], gap="small")

    with nav_col1:
        if st.button("🏠 Register", use_container_width=True, key="nav_register"):
            st.session_state.current_page = "register"
            st.session_state.attendee_id = None
            st.query_params.clear()

    with nav_col3:
        if st.button("👤 Admin", use_container_width=True, key="nav_admin"):
            st.session_state.current_page = "admin"
            st.query_params.clear()


def _reset_to_registration():
    st.session_state.current_page = "register"
    st.session_state.attendee_id = None
    st.query_params.clear()
    st.rerun()


def render_current_page():
    """Render the page selected in session state."""
    store = get_default_store()
    try:
        if st.session_state.current_page == "register":
            render_registration_page(store)

        elif st.session_state.current_page == "confirmation":
            render_confirmation_page(st.session_state.attendee_id, store)

        elif st.session_state.current_page == "admin":
            render_admin_panel(store)

        else:
            st.error(f"Unknown page: {st.session_state.current_page}")
            if st.button("Back to Registration"):
                _reset_to_registration()

    except Exception as e:
        # Error boundary
        logger.exception("Unhandled exception while rendering page")
        st.error("Something went wrong. Please try again.")

        with st.expander("🔍 Error details"):
            st.code(str(e))

        if st.button("Back to Registration"):
            _reset_to_registration()


def main():
    """Application entry point."""
    try:
        initialize_session_state()
        apply_custom_css()
        render_navigation()
        render_current_page()
    except Exception as e:
        logger.exception("Unhandled exception during app execution")
        st.error("The application hit an error, please refresh the page")
        st.code(str(e))

        if st.button("🔄 Reload"):
            st.session_state.clear()
            st.rerun()


if __name__ == "__main__":
    main()
