"""Shared fixtures."""
import io
from datetime import datetime, timezone

import pytest
from PIL import Image

from src.models.attendee import Attendee, ProfileImage, RegistrationForm


def make_png(size=(32, 32), color=(37, 34, 101)) -> bytes:
    """Small valid PNG image."""
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_bytes():
    return make_png()


@pytest.fixture
def profile_image(png_bytes):
    return ProfileImage(filename="jane.png", mime_type="image/png", data=png_bytes)


@pytest.fixture
def jane_form(profile_image):
    """Valid registration form for Jane Doe."""
    return RegistrationForm(
        full_name="Jane Doe",
        contact_number="+8801111111111",
        company_name="Acme",
        current_position="Engineer",
        batch="033",
        student_id="08514",
        email="jane@x.com",
        address="",
        profile_picture=profile_image,
    )


@pytest.fixture
def make_attendee():
    """Factory for stored attendees."""
    def _make(**overrides):
        values = dict(
            id="3f2a9c1e-7b4d-4e2a-9c1e-7b4d4e2a9c1e",
            full_name="Jane Doe",
            contact_number="+8801111111111",
            company_name="Acme",
            current_position="Engineer",
            batch="033",
            student_id="08514",
            email="jane@x.com",
            address="12 Tea Street",
            registration_date=datetime(2025, 7, 1, 10, 30, tzinfo=timezone.utc),
            profile_picture="",
        )
        values.update(overrides)
        return Attendee(**values)

    return _make
