"""Avatar defaults loaded from a JSON config file."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

from .core.keyed import GenerationMethod

CONFIG_ENV = "BITAVATAR_CONFIG"
DEFAULT_CONFIG_NAME = "bitavatar.json"


def default_config_path() -> Path:
    return Path(os.environ.get(CONFIG_ENV, DEFAULT_CONFIG_NAME))


@dataclass
class AvatarConfig:
    """Where avatars are stored, how they are served, and how they are generated."""
    folder: str = "avatars"
    base_url: str = "/avatars/"
    width: int = 8
    height: int = 8
    method: str = GenerationMethod.SYMMETRIC.value

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "AvatarConfig":
        if not isinstance(d, dict):
            return cls()
        known = {f.name for f in fields(cls)}
        config = cls(**{k: v for k, v in d.items() if k in known})

        # Non-positive or non-integer sizes fall back to defaults
        defaults = cls()
        for name in ("width", "height"):
            value = getattr(config, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                setattr(config, name, getattr(defaults, name))
        return config

    def save(self, path: Optional[Path] = None):
        path = Path(path) if path is not None else default_config_path()
        temp = path.with_suffix(".tmp")
        temp.write_text(json.dumps(self.to_dict(), indent=2))
        temp.replace(path)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "AvatarConfig":
        path = Path(path) if path is not None else default_config_path()
        try:
            if path.exists():
                return cls.from_dict(json.loads(path.read_text()))
        except (json.JSONDecodeError, OSError):
            pass
        return cls()


# Global instance
_config: Optional[AvatarConfig] = None


def get_config() -> AvatarConfig:
    """Get current config."""
    global _config
    if _config is None:
        _config = AvatarConfig.load()
    return _config


def set_config(config: AvatarConfig, path: Optional[Path] = None):
    """Set and save config."""
    global _config
    _config = config
    config.save(path)


def reset_config():
    """Drop the cached config so the next get_config() reloads it."""
    global _config
    _config = None
