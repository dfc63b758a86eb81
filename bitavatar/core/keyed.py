"""Avatars associated with a string key."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .grid import Avatar, EntropySource, generate_avatar, generate_symmetric

logger = logging.getLogger(__name__)


class GenerationMethod(str, Enum):
    """Recognised fill methods. Anything else falls back to NONE."""
    NONE = "none"
    SYMMETRIC = "symmetric"


@dataclass
class KeyAvatar:
    """An avatar paired with the key it is stored under."""
    key: str
    avatar: Avatar


def resolve_method(method: Union[str, GenerationMethod, None]) -> GenerationMethod:
    """Map a method name to a GenerationMethod, defaulting to NONE."""
    if isinstance(method, GenerationMethod):
        return method
    if method == GenerationMethod.SYMMETRIC.value:
        return GenerationMethod.SYMMETRIC
    if method not in (None, "", GenerationMethod.NONE.value):
        logger.debug("Unknown generation method %r, using random fill", method)
    return GenerationMethod.NONE


def generate_key_avatar(
    key: str,
    width: int,
    height: int,
    method: Union[str, GenerationMethod, None] = GenerationMethod.NONE,
    entropy: Optional[EntropySource] = None,
) -> KeyAvatar:
    """Generate an avatar with the given method and wrap it with key."""
    if resolve_method(method) is GenerationMethod.SYMMETRIC:
        avatar = generate_symmetric(width, height, entropy)
    else:
        avatar = generate_avatar(width, height, entropy)
    return KeyAvatar(key=key, avatar=avatar)
