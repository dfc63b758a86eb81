"""Grayscale PNG encoding for avatars. Set pixels are white, unset are black."""

from __future__ import annotations

import io

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..core.errors import EncodingError
from ..core.grid import Avatar

WHITE = 255
BLACK = 0

# Decoded intensities at or above this read as set
THRESHOLD = 128


def to_raster(avatar: Avatar) -> np.ndarray:
    """(height, width) uint8 array of WHITE/BLACK values."""
    return np.where(avatar.to_array(), WHITE, BLACK).astype(np.uint8)


def render_image(avatar: Avatar) -> Image.Image:
    """Single-channel ("L" mode) PIL image of the avatar."""
    return Image.fromarray(to_raster(avatar))


def render_png(avatar: Avatar) -> bytes:
    """Encode the avatar as PNG bytes."""
    buf = io.BytesIO()
    try:
        render_image(avatar).save(buf, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodingError(f"PNG encoding failed: {e}") from e
    return buf.getvalue()


def decode_png(data: bytes) -> Avatar:
    """Decode PNG bytes back into an avatar."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            gray = np.asarray(img.convert("L"))
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise EncodingError(f"PNG decoding failed: {e}") from e
    return Avatar.from_array(gray >= THRESHOLD)
