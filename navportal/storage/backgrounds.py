"""Background images, stored inside the site config as data URLs.

Images have no ids. They are addressed by their position in the list and
served at /background-image/{position}. Deleting an image shifts every later
image down one position, so callers must re-read the config afterwards to
learn the new URLs.
"""

import base64
import binascii
import logging

from navportal import auth
from navportal.errors import Outcome, UpstreamError

from .config import background_url, load_site_config, save_site_config

logger = logging.getLogger(__name__)


def encode_data_url(data: bytes, mime_type: str) -> str:
    """Build a data:<mime>;base64,<body> URL."""
    body = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{body}"


def decode_data_url(data_url: str) -> tuple[bytes, str]:
    """Split a data URL back into raw bytes and its declared MIME type."""
    header, sep, body = data_url.partition(",")
    if not sep or not header.startswith("data:"):
        raise ValueError("Not a data URL")
    mime_type = header[len("data:"):].split(";", 1)[0]
    try:
        data = base64.b64decode(body, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Bad base64 body: {e}") from e
    return data, mime_type


async def append_background(token: str | None, data: bytes, mime_type: str) -> Outcome:
    """Add an image at the end of the list. Admin only.

    The outcome value is the new image's position.
    """
    if not auth.require_admin(token):
        return Outcome.forbidden()
    if not mime_type or not mime_type.startswith("image/"):
        return Outcome.invalid("Only image files are supported")
    if not data:
        return Outcome.invalid("Empty file")
    config = await load_site_config()
    config.background_images.append(encode_data_url(data, mime_type))
    await save_site_config(config)
    position = len(config.background_images) - 1
    logger.info("added background image at %s (%d bytes, %s)",
                background_url(position), len(data), mime_type)
    return Outcome.success(position)


async def fetch_background(position: int) -> tuple[bytes, str] | None:
    """Raw bytes and MIME type of the image at position, or None."""
    config = await load_site_config()
    if position < 0 or position >= len(config.background_images):
        return None
    try:
        return decode_data_url(config.background_images[position])
    except ValueError as e:
        raise UpstreamError(f"Stored background image {position} is corrupt: {e}") from e


async def delete_background(token: str | None, position: int) -> Outcome:
    """Remove the image at position; later images move down one. Admin only."""
    if not auth.require_admin(token):
        return Outcome.forbidden()
    config = await load_site_config()
    if position < 0 or position >= len(config.background_images):
        return Outcome.not_found("Image not found")
    config.background_images.pop(position)
    await save_site_config(config)
    logger.info("deleted background image %d, %d left", position, len(config.background_images))
    return Outcome.success()
