"""Core avatar model - bit-packed grid, fill algorithms, and errors."""

from .errors import (
    AvatarError,
    InvalidDimensions,
    RandomSourceError,
    EncodingError,
    AvatarNotFound,
)
from .grid import (
    Avatar,
    EntropySource,
    DEFAULT_ENTROPY,
    packed_length,
    generate_avatar,
    generate_symmetric,
)
from .keyed import GenerationMethod, KeyAvatar, generate_key_avatar, resolve_method

__all__ = [
    # Errors
    "AvatarError",
    "InvalidDimensions",
    "RandomSourceError",
    "EncodingError",
    "AvatarNotFound",
    # Grid
    "Avatar",
    "EntropySource",
    "DEFAULT_ENTROPY",
    "packed_length",
    "generate_avatar",
    "generate_symmetric",
    # Keyed
    "GenerationMethod",
    "KeyAvatar",
    "generate_key_avatar",
    "resolve_method",
]
