"""Random bitmap avatars - generation, PNG output, storage, and HTML markup."""

from .core import (
    AvatarError,
    InvalidDimensions,
    RandomSourceError,
    EncodingError,
    AvatarNotFound,
    Avatar,
    generate_avatar,
    generate_symmetric,
    GenerationMethod,
    KeyAvatar,
    generate_key_avatar,
)
from .output import (
    render_png,
    decode_png,
    get_avatar_path,
    save_avatar,
    load_avatar,
    avatar_exists,
    delete_avatar,
    get_avatar_html,
    is_safe_key,
)
from .config import AvatarConfig, get_config, set_config

__all__ = [
    # Errors
    "AvatarError",
    "InvalidDimensions",
    "RandomSourceError",
    "EncodingError",
    "AvatarNotFound",
    # Generation
    "Avatar",
    "generate_avatar",
    "generate_symmetric",
    "GenerationMethod",
    "KeyAvatar",
    "generate_key_avatar",
    # Output
    "render_png",
    "decode_png",
    "get_avatar_path",
    "save_avatar",
    "load_avatar",
    "avatar_exists",
    "delete_avatar",
    "get_avatar_html",
    "is_safe_key",
    # Config
    "AvatarConfig",
    "get_config",
    "set_config",
]
