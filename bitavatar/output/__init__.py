"""Avatar output - PNG encoding, file storage, and HTML markup."""

from .png import render_png, render_image, decode_png, to_raster
from .storage import (
    get_avatar_path,
    save_avatar,
    load_avatar,
    avatar_exists,
    delete_avatar,
)
from .markup import get_avatar_html, is_safe_key

__all__ = [
    # PNG
    "render_png",
    "render_image",
    "decode_png",
    "to_raster",
    # Storage
    "get_avatar_path",
    "save_avatar",
    "load_avatar",
    "avatar_exists",
    "delete_avatar",
    # Markup
    "get_avatar_html",
    "is_safe_key",
]
