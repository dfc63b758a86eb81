"""
Bit-packed pixel grid and the random fill algorithms.

Pixel layout:
  index = y * width + x            (row-major)
  byte  = pixels[index // 8]
  bit   = 1 << (index % 8)         (least-significant bit first)
"""

from __future__ import annotations

import os
from typing import Callable, Optional

import numpy as np

from .errors import InvalidDimensions, RandomSourceError

# Entropy source signature: entropy(n) -> n random bytes
EntropySource = Callable[[int], bytes]

DEFAULT_ENTROPY: EntropySource = os.urandom


def packed_length(width: int, height: int) -> int:
    """Number of bytes needed to hold width*height bits."""
    return (width * height + 7) // 8


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)


def _read_entropy(entropy: EntropySource, n: int) -> bytes:
    """Read exactly n bytes from the entropy source."""
    try:
        data = entropy(n)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError(f"Random generation failed: {e}") from e
    if len(data) < n:
        raise RandomSourceError(f"Random source returned {len(data)} of {n} bytes")
    return bytes(data[:n])


class Avatar:
    """A width x height binary image stored one bit per pixel."""

    def __init__(self, width: int, height: int, pixels: Optional[bytearray] = None):
        _check_dimensions(width, height)
        self.width = width
        self.height = height
        size = packed_length(width, height)
        if pixels is None:
            self.pixels = bytearray(size)
        else:
            if len(pixels) != size:
                raise ValueError(f"Expected {size} pixel bytes, got {len(pixels)}")
            self.pixels = bytearray(pixels)
            # Bits past the last pixel are always zero
            tail = (width * height) % 8
            if tail:
                self.pixels[-1] &= (1 << tail) - 1

    @classmethod
    def blank(cls, width: int, height: int) -> "Avatar":
        """All-black grid."""
        return cls(width, height)

    @classmethod
    def from_array(cls, array) -> "Avatar":
        """Build a grid from a 2D (height, width) array of truthy values."""
        arr = np.asarray(array, dtype=bool)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {arr.ndim}D")
        height, width = arr.shape
        _check_dimensions(width, height)
        packed = np.packbits(arr.ravel(), bitorder="little")
        return cls(width, height, bytearray(packed.tobytes()))

    def _bit(self, x: int, y: int) -> tuple[int, int] | None:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return None
        idx = y * self.width + x
        return idx // 8, 1 << (idx % 8)

    def get_pixel(self, x: int, y: int) -> bool:
        """Pixel value at (x, y). Out of bounds reads as False."""
        pos = self._bit(x, y)
        if pos is None:
            return False
        byte_idx, mask = pos
        return (self.pixels[byte_idx] & mask) != 0

    def set_pixel(self, x: int, y: int, value: bool) -> None:
        """Set or clear the pixel at (x, y). Out of bounds is ignored."""
        pos = self._bit(x, y)
        if pos is None:
            return
        byte_idx, mask = pos
        if value:
            self.pixels[byte_idx] |= mask
        else:
            self.pixels[byte_idx] &= ~mask & 0xFF

    def to_array(self) -> np.ndarray:
        """Unpack to a (height, width) bool array."""
        bits = np.unpackbits(
            np.frombuffer(bytes(self.pixels), dtype=np.uint8),
            count=self.width * self.height,
            bitorder="little",
        )
        return bits.reshape(self.height, self.width).astype(bool)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Avatar):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.pixels == other.pixels
        )

    def __repr__(self) -> str:
        return f"Avatar(width={self.width}, height={self.height})"


def generate_avatar(width: int, height: int, entropy: Optional[EntropySource] = None) -> Avatar:
    """Avatar with every pixel drawn from the entropy source."""
    _check_dimensions(width, height)
    entropy = entropy or DEFAULT_ENTROPY
    pixels = _read_entropy(entropy, packed_length(width, height))
    return Avatar(width, height, bytearray(pixels))


def generate_symmetric(width: int, height: int, entropy: Optional[EntropySource] = None) -> Avatar:
    """
    Avatar whose left half is random and mirrored onto the right half.

    One byte is read per left-half pixel and its low bit used. For odd
    widths the center column gets a single random bit.
    """
    _check_dimensions(width, height)
    entropy = entropy or DEFAULT_ENTROPY
    avatar = Avatar(width, height)
    half_width = (width + 1) // 2

    for y in range(height):
        for x in range(half_width):
            value = (_read_entropy(entropy, 1)[0] & 1) == 1
            avatar.set_pixel(x, y, value)
            mirror_x = width - 1 - x
            if mirror_x != x:
                avatar.set_pixel(mirror_x, y, value)

    return avatar
