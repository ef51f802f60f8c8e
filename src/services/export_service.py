"""Spreadsheet export of attendee records."""
import io
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from src.models.attendee import EXPORTABLE_FIELDS, Attendee
from src.utils.date_utils import format_locale_date, iso_date
from src.utils.exceptions import ExportError

logger = logging.getLogger(__name__)

SHEET_TITLE = "Attendees"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def project_attendees(attendees: Sequence[Attendee], fields: Sequence[str]) -> List[Dict[str, Any]]:
    """
    Keep only the selected fields of each attendee, in the given order.

    Args:
        attendees: Records to project
        fields: Persisted field names (e.g. "fullName", "registrationDate")

    Returns:
        One dict per attendee; "registrationDate" is rendered as a
        locale date string, every other value is copied as stored

    Raises:
        ValueError: If a field name is unknown
    """
    unknown = [name for name in fields if name not in EXPORTABLE_FIELDS]
    if unknown:
        raise ValueError(f"Unknown export fields: {', '.join(unknown)}")

    rows = []
    for attendee in attendees:
        row = {}
        for name in fields:
            if name == "registrationDate":
                row[name] = format_locale_date(attendee.registration_date)
            else:
                row[name] = attendee.get(name)
        rows.append(row)
    return rows


def build_workbook(attendees: Sequence[Attendee], fields: Sequence[str]) -> bytes:
    """
    Write the projected attendees to an .xlsx workbook.

    The single "Attendees" sheet has a header row of field names followed by
    one row per attendee. With no fields selected the sheet is empty.

    Raises:
        ExportError: If the workbook can't be produced
    """
    try:
        rows = project_attendees(attendees, fields)

        wb = Workbook()
        ws = wb.active
        ws.title = SHEET_TITLE

        if fields:
            ws.append(list(fields))
            for cell in ws[1]:
                cell.font = Font(bold=True)
            for row in rows:
                ws.append([row[name] for name in fields])
                # Values starting with "=" stay text, never formulas
                for cell in ws[ws.max_row]:
                    if isinstance(cell.value, str):
                        cell.data_type = "s"

            for index, name in enumerate(fields, 1):
                longest = max([len(name)] + [len(str(row[name] or "")) for row in rows])
                ws.column_dimensions[get_column_letter(index)].width = min(longest + 2, 60)

        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()
    except Exception as e:
        logger.exception("Error exporting attendees to Excel")
        raise ExportError("Failed to export attendees. Please try again.") from e


def export_filename(today: Optional[date] = None) -> str:
    """Download name of the export, e.g. tea-gathering-attendees-2025-07-19.xlsx."""
    return f"tea-gathering-attendees-{iso_date(today)}.xlsx"
