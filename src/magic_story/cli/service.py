"""Stateless helpers for CLI commands - photo loading and illustration saving."""

from __future__ import annotations

import base64
import binascii
from io import BytesIO
from pathlib import Path
from typing import Any

from PIL import Image, UnidentifiedImageError

PIL_FORMAT_MIME_TYPES = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
}

MIME_TYPE_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
}


def detect_mime_type(data: bytes) -> str:
    """Detect an image MIME type from its bytes.

    Unknown or unsupported formats map to ``application/octet-stream`` so the
    request validator rejects them with its usual message.
    """
    try:
        with Image.open(BytesIO(data)) as image:
            image_format = image.format or ""
    except (UnidentifiedImageError, OSError):
        image_format = ""

    return PIL_FORMAT_MIME_TYPES.get(image_format, "application/octet-stream")


def load_photo_payload(photo_path: Path) -> dict[str, Any]:
    """Read a photo from disk into the ``childPhoto`` wire shape."""
    data = photo_path.read_bytes()
    return {
        "base64Data": base64.b64encode(data).decode("ascii"),
        "mimeType": detect_mime_type(data),
        "fileName": photo_path.name,
    }


def build_request_payload(
    photo_path: Path,
    age_group: str,
    favorite_character: str,
    story_style: str,
) -> dict[str, Any]:
    """Assemble the request body exactly as the web form would send it."""
    return {
        "ageGroup": age_group,
        "favoriteCharacter": favorite_character,
        "storyStyle": story_style,
        "childPhoto": load_photo_payload(photo_path),
    }


def decode_data_uri(data_uri: str) -> tuple[str, bytes]:
    """Split a ``data:<mime>;base64,<data>`` URI into mime type and bytes.

    Raises:
        ValueError: The URI is not a base64 data URI.
    """
    header, sep, encoded = data_uri.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Not a base64 data URI")

    mime_type = header[len("data:"):-len(";base64")]
    try:
        return mime_type, base64.b64decode(encoded, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e


def save_illustration(image_url: str, output_path: Path) -> Path:
    """Write the illustration to disk.

    When ``output_path`` has no suffix, one is chosen from the image's
    MIME type.
    """
    mime_type, image_bytes = decode_data_uri(image_url)

    if not output_path.suffix:
        output_path = output_path.with_suffix(MIME_TYPE_EXTENSIONS.get(mime_type, ".img"))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(image_bytes)
    return output_path
