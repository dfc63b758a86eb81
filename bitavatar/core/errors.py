"""Exception types raised by avatar generation, encoding, and storage."""


class AvatarError(Exception):
    """Base class for all avatar errors."""


class InvalidDimensions(AvatarError, ValueError):
    """Width or height is not a positive integer."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"Invalid dimensions: {width}x{height}")


class RandomSourceError(AvatarError):
    """The entropy source could not supply the requested bytes."""


class EncodingError(AvatarError):
    """A raster could not be encoded to (or decoded from) PNG."""


class AvatarNotFound(AvatarError, FileNotFoundError):
    """No saved avatar exists for the requested key."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Avatar not found: {path}")
