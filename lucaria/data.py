"""Asset records and their portable binary encoding.

An encoded record starts with one byte telling the byte order of what
follows (non-zero for little endian). Integers are 32-bit, floats are
32-bit, sequence and string lengths are 64-bit unsigned prefixes.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, Iterable

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]
IVec4 = tuple[int, int, int, int]
UVec3 = tuple[int, int, int]
Mat4 = tuple[Vec4, Vec4, Vec4, Vec4]


class DataFormatError(ValueError):
    """Raised when encoded asset data is malformed or truncated."""


class _Reader:
    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._view = memoryview(bytes(data))
        if not self._view:
            raise DataFormatError("missing byte order marker")
        self._order = "<" if self._view[0] else ">"
        self._pos = 1

    def _take(self, count: int) -> memoryview:
        end = self._pos + count
        if end > len(self._view):
            raise DataFormatError(f"unexpected end of data at offset {self._pos}")
        chunk = self._view[self._pos:end]
        self._pos = end
        return chunk

    def unpack(self, fmt: str) -> tuple[Any, ...]:
        layout = struct.Struct(self._order + fmt)
        return layout.unpack(self._take(layout.size))

    def scalar(self, fmt: str) -> Any:
        return self.unpack(fmt)[0]

    def length(self) -> int:
        return self.scalar("Q")

    def records(self, fmt: str) -> list[tuple[Any, ...]]:
        count = self.length()
        layout = struct.Struct(self._order + fmt)
        return list(layout.iter_unpack(self._take(count * layout.size)))

    def scalars(self, fmt: str) -> list[Any]:
        return [item for (item,) in self.records(fmt)]

    def raw(self) -> bytes:
        return bytes(self._take(self.length()))


class _Writer:
    def __init__(self) -> None:
        self._parts: list[bytes] = [b"\x01"]

    def pack(self, fmt: str, *values: Any) -> None:
        self._parts.append(struct.pack("<" + fmt, *values))

    def length(self, count: int) -> None:
        self.pack("Q", count)

    def records(self, fmt: str, items: Iterable[Iterable[Any]]) -> None:
        items = [tuple(item) for item in items]
        self.length(len(items))
        for item in items:
            self.pack(fmt, *item)

    def scalars(self, fmt: str, items: Iterable[Any]) -> None:
        self.records(fmt, ((item,) for item in items))

    def raw(self, data: bytes) -> None:
        self.length(len(data))
        self._parts.append(bytes(data))

    def getvalue(self) -> bytes:
        return b"".join(self._parts)


def _columns(flat: tuple[float, ...]) -> Mat4:
    return tuple(tuple(flat[start:start + 4]) for start in range(0, 16, 4))  # type: ignore[return-value]


def _flatten(matrix: Iterable[Iterable[float]]) -> tuple[float, ...]:
    flat = tuple(value for column in matrix for value in column)
    if len(flat) != 16:
        raise ValueError("a matrix needs four columns of four values")
    return flat


@dataclass
class AudioData:
    """Mono audio samples at a given sample rate."""

    sample_rate: int = 0
    samples: list[float] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> AudioData:
        reader = _Reader(data)
        sample_rate = reader.scalar("I")
        samples = reader.scalars("f")
        return cls(sample_rate=sample_rate, samples=samples)

    def to_bytes(self) -> bytes:
        writer = _Writer()
        writer.pack("I", self.sample_rate)
        writer.scalars("f", self.samples)
        return writer.getvalue()


@dataclass
class GeometryData:
    """Vertex attributes, triangle indices and inverse bind poses of a mesh."""

    count: int = 0
    positions: list[Vec3] = field(default_factory=list)
    colors: list[Vec4] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    tangents: list[Vec3] = field(default_factory=list)
    bitangents: list[Vec3] = field(default_factory=list)
    texcoords: list[Vec2] = field(default_factory=list)
    bones: list[IVec4] = field(default_factory=list)
    weights: list[Vec4] = field(default_factory=list)
    indices: list[UVec3] = field(default_factory=list)
    invposes: list[Mat4] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> GeometryData:
        reader = _Reader(data)
        return cls(
            count=reader.scalar("I"),
            positions=reader.records("3f"),
            colors=reader.records("4f"),
            normals=reader.records("3f"),
            tangents=reader.records("3f"),
            bitangents=reader.records("3f"),
            texcoords=reader.records("2f"),
            bones=reader.records("4i"),
            weights=reader.records("4f"),
            indices=reader.records("3I"),
            invposes=[_columns(flat) for flat in reader.records("16f")],
        )

    def to_bytes(self) -> bytes:
        writer = _Writer()
        writer.pack("I", self.count)
        writer.records("3f", self.positions)
        writer.records("4f", self.colors)
        writer.records("3f", self.normals)
        writer.records("3f", self.tangents)
        writer.records("3f", self.bitangents)
        writer.records("2f", self.texcoords)
        writer.records("4i", self.bones)
        writer.records("4f", self.weights)
        writer.records("3I", self.indices)
        writer.records("16f", (_flatten(matrix) for matrix in self.invposes))
        return writer.getvalue()


@dataclass
class ImageData:
    """Pixel data of an image, raw or block-compressed.

    The compression flags are not part of the encoding.
    """

    channels: int = 0
    width: int = 0
    height: int = 0
    pixels: bytes = b""
    is_compressed_etc: bool = False
    is_compressed_s3tc: bool = False

    @classmethod
    def from_bytes(cls, data: bytes) -> ImageData:
        reader = _Reader(data)
        channels = reader.scalar("I")
        width = reader.scalar("I")
        height = reader.scalar("I")
        pixels = reader.raw()
        return cls(channels=channels, width=width, height=height, pixels=pixels)

    def to_bytes(self) -> bytes:
        writer = _Writer()
        writer.pack("III", self.channels, self.width, self.height)
        writer.raw(bytes(self.pixels))
        return writer.getvalue()


@dataclass
class ShaderData:
    """Source text of a shader."""

    text: str = ""

    @classmethod
    def from_bytes(cls, data: bytes) -> ShaderData:
        raw = _Reader(data).raw()
        try:
            return cls(text=raw.decode("utf-8"))
        except UnicodeDecodeError as error:
            raise DataFormatError("shader text is not valid UTF-8") from error

    def to_bytes(self) -> bytes:
        writer = _Writer()
        writer.raw(self.text.encode("utf-8"))
        return writer.getvalue()