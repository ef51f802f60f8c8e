"""Admin panel UI component for reviewing and exporting registrations."""
import logging
from typing import Any, Dict, List, Sequence

import streamlit as st

from src.models.attendee import Attendee
from src.models.column import ColumnConfig
from src.services.admin_service import (
    compute_stats,
    default_columns,
    export_candidates,
    search_attendees,
    selected_fields,
)
from src.services.export_service import XLSX_MIME, build_workbook, export_filename
from src.services.record_store import RecordStore
from src.services.registration_service import get_attendees
from src.utils.date_utils import format_locale_datetime
from src.utils.exceptions import ExportError

logger = logging.getLogger(__name__)

COLUMNS_KEY = "admin_columns"
SEARCH_KEY = "admin_search"


def _get_columns() -> List[ColumnConfig]:
    if COLUMNS_KEY not in st.session_state:
        st.session_state[COLUMNS_KEY] = default_columns()
    return st.session_state[COLUMNS_KEY]


def _table_rows(attendees: Sequence[Attendee], fields: Sequence[str]) -> List[Dict[str, Any]]:
    """Rows for st.dataframe; dates keep their time, pictures stay data URIs."""
    rows = []
    for attendee in attendees:
        row = {}
        for name in fields:
            if name == "registrationDate":
                row[name] = format_locale_datetime(attendee.registration_date)
            else:
                row[name] = attendee.get(name)
        rows.append(row)
    return rows


def _render_stats(attendees: Sequence[Attendee]) -> None:
    stats = compute_stats(attendees)
    cols = st.columns(4)
    cols[0].metric("Total Attendees", stats.total)
    cols[1].metric("Batches", stats.batches)
    cols[2].metric("Companies", stats.companies)
    cols[3].metric("With Photos", stats.with_photos)


def _render_column_toggles(columns: List[ColumnConfig]) -> None:
    with st.expander("🧰 Select columns to display and export", expanded=False):
        toggle_cols = st.columns(3)
        for index, column in enumerate(columns):
            with toggle_cols[index % 3]:
                column.selected = st.checkbox(
                    column.header_name,
                    value=column.selected,
                    key=f"admin_column_{column.field}",
                )


def _render_export_button(attendees: Sequence[Attendee], fields: Sequence[str], term: str) -> None:
    try:
        data = build_workbook(export_candidates(attendees, term), fields)
    except ExportError as error:
        st.error(str(error))
        return

    st.download_button(
        "📊 Export to Excel",
        data=data,
        file_name=export_filename(),
        mime=XLSX_MIME,
        disabled=len(attendees) == 0,
        use_container_width=True,
    )


def render_admin_panel(store: RecordStore) -> None:
    """Render stats, search, column selection, the attendee table and export."""
    st.markdown("## 👤 Attendee Management")

    attendees = get_attendees(store)
    columns = _get_columns()

    _render_stats(attendees)

    search_col, export_col = st.columns([3, 1])
    with search_col:
        term = st.text_input(
            "Search",
            key=SEARCH_KEY,
            placeholder="Search by name, email, student ID, batch or contact",
            label_visibility="collapsed",
        )

    _render_column_toggles(columns)
    fields = selected_fields(columns)

    with export_col:
        _render_export_button(attendees, fields, term)

    filtered = search_attendees(attendees, term)
    if len(filtered) != len(attendees):
        st.caption(f"{len(filtered)} of {len(attendees)}")

    if not attendees:
        st.info("No registrations yet.")
        return

    if not filtered:
        st.warning(f'No attendees match your search for "{term}". Try different keywords.')
        return

    headers = {column.field: column.header_name for column in columns}
    column_config = {name: headers[name] for name in fields}
    if "profilePicture" in fields:
        column_config["profilePicture"] = st.column_config.ImageColumn(headers["profilePicture"])

    st.dataframe(
        _table_rows(filtered, fields),
        column_config=column_config,
        column_order=fields,
        hide_index=True,
        use_container_width=True,
    )
