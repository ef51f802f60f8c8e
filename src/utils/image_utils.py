"""Profile image encoding helpers."""
import asyncio
import base64
import io
import logging

from PIL import Image, UnidentifiedImageError

from src.models.attendee import ProfileImage
from src.utils.exceptions import EncodingError
from src.utils.validation import MAX_PICTURE_BYTES

logger = logging.getLogger(__name__)


def _encode(image: ProfileImage) -> str:
    mime_type = (image.mime_type or "").lower()
    if not mime_type.startswith("image/"):
        raise EncodingError("Please upload an image file")
    if image.size > MAX_PICTURE_BYTES:
        raise EncodingError("Image size should be less than 2MB")
    if not image.data:
        raise EncodingError(f"Cannot read image file: {image.filename}")

    try:
        with Image.open(io.BytesIO(image.data)) as probe:
            probe.verify()
    except Image.DecompressionBombError as e:
        raise EncodingError(f"Image dimensions are too large: {image.filename}") from e
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise EncodingError(f"Cannot read image file: {image.filename}") from e

    b64_data = base64.b64encode(image.data).decode("utf-8")
    return f"data:{mime_type};base64,{b64_data}"


async def encode_data_uri(image: ProfileImage) -> str:
    """
    Encode an uploaded image as a self-contained data URI.

    The bytes are checked and encoded off the event loop.

    Args:
        image: Uploaded profile image

    Returns:
        "data:<mime>;base64,<payload>"

    Raises:
        EncodingError: If the image is not an image, too large, or unreadable
    """
    try:
        return await asyncio.to_thread(_encode, image)
    except EncodingError as e:
        logger.error(f"Profile image encoding failed for {image.filename}: {e}")
        raise
