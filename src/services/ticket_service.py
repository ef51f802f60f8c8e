"""Ticket generation: QR payload, ticket image and printable PDF."""
import io
import logging
from datetime import datetime
from typing import List, Optional, Tuple

import qrcode
from PIL import Image, ImageDraw, ImageFont
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas as pdf_canvas

from src.models.attendee import Attendee
from src.models.ticket import TicketPayload
from src.utils.config import (
    CONTACT_EMAIL,
    EVENT_DATE_LINE,
    EVENT_NAME,
    EVENT_VENUE,
    TICKET_PREFIX,
)
from src.utils.date_utils import format_long_date
from src.utils.exceptions import TicketGenerationError

logger = logging.getLogger(__name__)

PDF_TITLE = f"{EVENT_NAME} - Event Ticket"

# Palette shared with the web theme
COLOR_LIGHT = (233, 233, 240)
COLOR_LIGHT_ACTIVE = (187, 186, 207)
COLOR_NORMAL = (37, 34, 101)
COLOR_DARK = (28, 26, 76)
COLOR_MUTED = (90, 90, 110)

# Ticket layout at 1x density
TICKET_WIDTH = 600
TICKET_PADDING = 32
QR_SIZE = 170

FONT_CANDIDATES = {
    True: ["DejaVuSans-Bold.ttf", "arialbd.ttf", "Arial Bold.ttf"],
    False: ["DejaVuSans.ttf", "arial.ttf", "Arial.ttf"],
}


def generate_ticket_number(attendee_id: str) -> str:
    """
    Derive the human ticket number from an attendee id.

    Example: "3f2a9c1e-..." -> "TG-2025-3F2A9C1E"

    Only the first 8 characters of the id are used, so two ids sharing a
    prefix would share a ticket number.
    """
    return f"{TICKET_PREFIX}-{attendee_id[:8].upper()}"


def build_ticket_payload(attendee: Attendee) -> TicketPayload:
    """Build the data embedded into the ticket QR code."""
    return TicketPayload(
        id=attendee.id,
        name=attendee.full_name,
        student_id=attendee.student_id,
        batch=attendee.batch,
        ticket_number=generate_ticket_number(attendee.id),
    )


def ticket_filename(attendee: Attendee) -> str:
    """Download name of the ticket PDF."""
    return f"tea-gathering-ticket-{attendee.student_id}.pdf"


def qr_code_png(payload: TicketPayload, box_size: int = 10) -> bytes:
    """Render the payload as a high error-correction QR code PNG."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_H,
        box_size=box_size,
        border=4,
    )
    qr.add_data(payload.to_qr_string())
    qr.make(fit=True)

    buf = io.BytesIO()
    qr.make_image(fill_color="#1c1a4c", back_color="white").save(buf, format="PNG")
    return buf.getvalue()


def _font(size: int, bold: bool = False) -> ImageFont.ImageFont:
    for candidate in FONT_CANDIDATES[bold]:
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            continue
    try:
        return ImageFont.load_default(size=size)
    except TypeError:
        # Pillow < 10.1 has a single fixed-size bitmap font
        return ImageFont.load_default()


def _text_width(draw: ImageDraw.ImageDraw, text: str, font: ImageFont.ImageFont) -> int:
    left, _, right, _ = draw.textbbox((0, 0), text, font=font)
    return right - left


def _fit_text(draw: ImageDraw.ImageDraw, text: str, font: ImageFont.ImageFont, max_width: int) -> str:
    """Truncate text with an ellipsis so it fits in max_width pixels."""
    if _text_width(draw, text, font) <= max_width:
        return text
    while text and _text_width(draw, text + "…", font) > max_width:
        text = text[:-1]
    return text + "…"


def _centered(draw: ImageDraw.ImageDraw, y: int, text: str, font, fill, width: int) -> None:
    x = (width - _text_width(draw, text, font)) // 2
    draw.text((x, y), text, font=font, fill=fill)


def render_ticket_visual(
    attendee: Attendee,
    payload: Optional[TicketPayload] = None,
    scale: int = 2,
    generated_at: Optional[datetime] = None,
) -> Image.Image:
    """
    Draw the ticket as an image.

    Args:
        attendee: Ticket holder
        payload: QR payload (built from the attendee when omitted)
        scale: Pixel density multiplier; 2 gives print-quality output
        generated_at: Date printed as "Generated on ..." (defaults to now)

    Returns:
        RGB PIL image
    """
    if scale < 1:
        raise ValueError("Scale must be at least 1")

    payload = payload or build_ticket_payload(attendee)

    def s(value: int) -> int:
        return int(value * scale)

    width = s(TICKET_WIDTH)
    padding = s(TICKET_PADDING)
    header_height = s(130)
    details: List[Tuple[str, str]] = [
        ("Student ID", attendee.student_id or "-"),
        ("Batch", attendee.batch),
        ("Contact", attendee.contact_number),
        ("Email", attendee.email),
    ]
    height = header_height + s(QR_SIZE) + s(90) + s(60) + s(56) * len(details) + s(110)

    image = Image.new("RGB", (width, height), "white")
    draw = ImageDraw.Draw(image)

    # Header band
    draw.rectangle([0, 0, width, header_height], fill=COLOR_NORMAL)
    _centered(draw, s(22), EVENT_NAME, _font(s(36), bold=True), "white", width)
    _centered(draw, s(72), EVENT_DATE_LINE, _font(s(16)), COLOR_LIGHT, width)
    _centered(draw, s(96), EVENT_VENUE, _font(s(16)), COLOR_LIGHT, width)

    # QR code
    y = header_height + s(20)
    qr_image = Image.open(io.BytesIO(qr_code_png(payload))).convert("RGB")
    qr_image = qr_image.resize((s(QR_SIZE), s(QR_SIZE)), Image.NEAREST)
    image.paste(qr_image, ((width - s(QR_SIZE)) // 2, y))
    y += s(QR_SIZE) + s(12)

    ticket_font = _font(s(18), bold=True)
    ticket_text = f"Ticket #{payload.ticket_number}"
    ticket_width = _text_width(draw, ticket_text, ticket_font)
    pill_x = (width - ticket_width) // 2 - s(14)
    draw.rounded_rectangle(
        [pill_x, y - s(4), pill_x + ticket_width + s(28), y + s(28)],
        radius=s(14),
        fill=COLOR_LIGHT,
    )
    _centered(draw, y, ticket_text, ticket_font, COLOR_NORMAL, width)
    y += s(38)
    _centered(
        draw, y, f"Generated on {format_long_date(generated_at)}", _font(s(12)), COLOR_MUTED, width
    )
    y += s(40)

    # Attendee
    name_font = _font(s(28), bold=True)
    name = _fit_text(draw, attendee.full_name, name_font, width - 2 * padding)
    _centered(draw, y, name, name_font, COLOR_NORMAL, width)
    y += s(56)

    label_font = _font(s(12))
    value_font = _font(s(16), bold=True)
    for label, value in details:
        draw.text((padding, y), label, font=label_font, fill=COLOR_MUTED)
        value = _fit_text(draw, value, value_font, width - 2 * padding)
        draw.text((padding, y + s(18)), value, font=value_font, fill=COLOR_DARK)
        y += s(56)

    # Entrance note
    box_top = y + s(8)
    draw.rounded_rectangle(
        [padding, box_top, width - padding, box_top + s(72)],
        radius=s(10),
        fill=COLOR_LIGHT,
        outline=COLOR_LIGHT_ACTIVE,
        width=max(1, scale),
    )
    note_font = _font(s(12))
    _centered(draw, box_top + s(16), "This ticket must be presented at the entrance.", note_font, COLOR_MUTED, width)
    _centered(
        draw,
        box_top + s(38),
        "Please keep it safe on your phone or as a printout.",
        note_font,
        COLOR_MUTED,
        width,
    )

    return image


def export_ticket_pdf(visual: Image.Image, generated_at: Optional[datetime] = None) -> bytes:
    """
    Place a rendered ticket on a single A4 page.

    Args:
        visual: Ticket image from render_ticket_visual
        generated_at: Date written in the footer (defaults to now)

    Returns:
        PDF file content
    """
    page_width, page_height = A4
    buf = io.BytesIO()
    pdf = pdf_canvas.Canvas(buf, pagesize=A4)
    pdf.setTitle(PDF_TITLE)

    pdf.setFont("Helvetica-Bold", 24)
    pdf.setFillColorRGB(*(c / 255 for c in COLOR_NORMAL))
    pdf.drawCentredString(page_width / 2, page_height - 15 * mm, PDF_TITLE)

    pdf.setStrokeColorRGB(*(c / 255 for c in COLOR_LIGHT_ACTIVE))
    pdf.line(20 * mm, page_height - 20 * mm, 190 * mm, page_height - 20 * mm)

    # Fit to 190mm wide, leaving room for the footer
    image_width, image_height = visual.size
    draw_width = 190 * mm
    draw_height = image_height * (draw_width / image_width)
    max_height = page_height - 25 * mm - 25 * mm
    if draw_height > max_height:
        draw_width *= max_height / draw_height
        draw_height = max_height
    x = (page_width - draw_width) / 2
    top = page_height - 25 * mm

    png = io.BytesIO()
    visual.convert("RGB").save(png, format="PNG")
    png.seek(0)
    pdf.drawImage(ImageReader(png), x, top - draw_height, draw_width, draw_height)

    footer_y = top - draw_height - 10 * mm
    pdf.setFont("Helvetica", 10)
    pdf.setFillColorRGB(70 / 255, 70 / 255, 70 / 255)
    pdf.drawCentredString(
        page_width / 2,
        footer_y,
        f"This ticket was generated on {format_long_date(generated_at)} for the {EVENT_NAME} event.",
    )
    pdf.drawCentredString(
        page_width / 2,
        footer_y - 5 * mm,
        f"For any inquiries, please contact: {CONTACT_EMAIL}",
    )

    pdf.showPage()
    pdf.save()
    return buf.getvalue()


def generate_ticket_document(attendee: Attendee) -> bytes:
    """
    Build payload, render the ticket and paginate it into a PDF.

    Read-only and safe to retry.

    Raises:
        TicketGenerationError: If rendering or PDF assembly fails
    """
    try:
        payload = build_ticket_payload(attendee)
        visual = render_ticket_visual(attendee, payload)
        return export_ticket_pdf(visual)
    except Exception as e:
        logger.exception(f"Error generating PDF ticket for {attendee.id}")
        raise TicketGenerationError("Failed to generate PDF ticket. Please try again.") from e
