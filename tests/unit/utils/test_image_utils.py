"""Tests for profile image encoding."""
import asyncio
import base64

import pytest
from PIL import Image

from src.models.attendee import ProfileImage
from src.utils.exceptions import EncodingError
from src.utils.image_utils import encode_data_uri
from src.utils.validation import MAX_PICTURE_BYTES


class TestEncodeDataUri:
    """Tests for encode_data_uri."""

    def test_png_encoded_as_data_uri(self, profile_image, png_bytes):
        data_uri = asyncio.run(encode_data_uri(profile_image))

        assert data_uri.startswith("data:image/png;base64,")
        assert base64.b64decode(data_uri.split(",", 1)[1]) == png_bytes

    def test_mime_type_lowercased(self, png_bytes):
        image = ProfileImage(filename="a.PNG", mime_type="IMAGE/PNG", data=png_bytes)
        assert asyncio.run(encode_data_uri(image)).startswith("data:image/png;base64,")

    def test_unreadable_bytes_raise(self):
        image = ProfileImage(filename="broken.png", mime_type="image/png", data=b"not an image")
        with pytest.raises(EncodingError, match="Cannot read image file"):
            asyncio.run(encode_data_uri(image))

    def test_empty_file_raises(self):
        image = ProfileImage(filename="empty.png", mime_type="image/png", data=b"")
        with pytest.raises(EncodingError):
            asyncio.run(encode_data_uri(image))

    def test_wrong_type_raises(self, png_bytes):
        image = ProfileImage(filename="a.txt", mime_type="text/plain", data=png_bytes)
        with pytest.raises(EncodingError, match="Please upload an image file"):
            asyncio.run(encode_data_uri(image))

    def test_oversize_raises(self):
        image = ProfileImage(filename="big.png", mime_type="image/png", data=b"0" * (MAX_PICTURE_BYTES + 1))
        with pytest.raises(EncodingError, match="less than 2MB"):
            asyncio.run(encode_data_uri(image))

    def test_decompression_bomb_raises_encoding_error(self, monkeypatch, profile_image):
        """Images whose pixel count exceeds Pillow's limit are rejected cleanly."""
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

        with pytest.raises(EncodingError, match="too large"):
            asyncio.run(encode_data_uri(profile_image))
