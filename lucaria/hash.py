"""Hash functions for small vectors and sequences of paths."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from os import PathLike
from pathlib import PurePosixPath

_MASK64 = (1 << 64) - 1
_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_GOLDEN = 0x9E3779B9


def _fnv1a(data: bytes) -> int:
    value = _FNV_OFFSET
    for byte in data:
        value = ((value ^ byte) * _FNV_PRIME) & _MASK64
    return value


def _float_hash(value: float) -> int:
    # Positive and negative zero compare equal, so they must hash equal.
    if value == 0.0:
        return 0
    return _fnv1a(struct.pack("<f", value))


def _path_hash(path: str | PathLike[str]) -> int:
    parts = PurePosixPath(path).parts
    return _fnv1a("/".join(parts).encode("utf-8"))


def uvec2_hash(vec: Sequence[int]) -> int:
    """Hash an unsigned two-component integer vector."""
    x, y = vec
    h1 = x & 0xFFFFFFFF
    h2 = y & 0xFFFFFFFF
    return (h1 ^ (h2 << 1)) & _MASK64


def vec3_hash(vec: Sequence[float]) -> int:
    """Hash a three-component float vector."""
    x, y, z = vec
    h1 = _float_hash(x)
    h2 = _float_hash(y)
    h3 = _float_hash(z)
    return (h1 ^ (h2 << 1) ^ (h3 << 2)) & _MASK64


def path_vector_hash(paths: Iterable[str | PathLike[str]]) -> int:
    """Combine the hashes of an ordered sequence of paths into one value."""
    seed = 0
    for path in paths:
        seed ^= (_path_hash(path) + _GOLDEN + (seed << 6) + (seed >> 2)) & _MASK64
        seed &= _MASK64
    return seed