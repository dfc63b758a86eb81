"""Key-addressed avatar files: one PNG per key at <folder>/<key>.png."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from ..core.errors import AvatarNotFound
from ..core.keyed import KeyAvatar
from .png import decode_png, render_png

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

EXTENSION = ".png"


def get_avatar_path(folder: PathLike, key: str) -> Path:
    """Path of the avatar file for key. Does not touch the filesystem."""
    return Path(folder) / f"{key}{EXTENSION}"


def save_avatar(folder: PathLike, key_avatar: KeyAvatar) -> Path:
    """
    Render and write the avatar, replacing any existing file.

    The folder is created if missing. Returns the written path.
    """
    data = render_png(key_avatar.avatar)
    Path(folder).mkdir(parents=True, exist_ok=True)
    path = get_avatar_path(folder, key_avatar.key)
    path.write_bytes(data)
    logger.debug("Saved avatar %s (%d bytes)", path, len(data))
    return path


def load_avatar(folder: PathLike, key: str) -> KeyAvatar:
    """Read a saved avatar back from disk."""
    path = get_avatar_path(folder, key)
    try:
        data = path.read_bytes()
    except FileNotFoundError as e:
        raise AvatarNotFound(path) from e
    return KeyAvatar(key=key, avatar=decode_png(data))


def avatar_exists(folder: PathLike, key: str) -> bool:
    """True if a saved avatar file exists for key."""
    return get_avatar_path(folder, key).is_file()


def delete_avatar(folder: PathLike, key: str) -> None:
    """Remove the avatar file for key."""
    path = get_avatar_path(folder, key)
    try:
        path.unlink()
    except FileNotFoundError as e:
        raise AvatarNotFound(path) from e
    logger.debug("Deleted avatar %s", path)
