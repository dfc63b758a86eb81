"""HTML snippets for serving saved avatars."""

import re

# Keys that are safe to use as a filename stem and inside an HTML attribute
_SAFE_KEY = re.compile(r"[A-Za-z0-9._-]+")


def get_avatar_html(base_url: str, key: str, width: int, height: int) -> str:
    """
    <img> tag pointing at {base_url}{key}.png.

    Neither base_url nor key is escaped. Check untrusted keys with
    is_safe_key() first.
    """
    return (
        f'<img src="{base_url}{key}.png" width="{width}" height="{height}" '
        f'alt="Avatar {key}">'
    )


def is_safe_key(key: str) -> bool:
    """True if key has no path separators, traversal, or markup characters."""
    if not key or key in (".", ".."):
        return False
    return _SAFE_KEY.fullmatch(key) is not None
