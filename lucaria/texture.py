"""Decoding of texture images and selection of the format to upload them as."""

from __future__ import annotations

import logging
import struct
from collections.abc import Callable
from concurrent.futures import Future
from os import PathLike

from lucaria.data import DataFormatError, ImageData
from lucaria.fetch import Fetcher

logger = logging.getLogger(__name__)

GL_RGB = 0x1907
GL_RGBA = 0x1908

COMPRESSED_R11_EAC = 0x9270
COMPRESSED_SIGNED_R11_EAC = 0x9271
COMPRESSED_RG11_EAC = 0x9272
COMPRESSED_SIGNED_RG11_EAC = 0x9273
COMPRESSED_RGB8_ETC2 = 0x9274
COMPRESSED_SRGB8_ETC2 = 0x9275
COMPRESSED_RGB8_PUNCHTHROUGH_ALPHA1_ETC2 = 0x9276
COMPRESSED_SRGB8_PUNCHTHROUGH_ALPHA1_ETC2 = 0x9277
COMPRESSED_RGBA8_ETC2_EAC = 0x9278
COMPRESSED_SRGB8_ALPHA8_ETC2_EAC = 0x9279

COMPRESSED_RGB_S3TC_DXT1_EXT = 0x83F0
COMPRESSED_RGBA_S3TC_DXT1_EXT = 0x83F1
COMPRESSED_RGBA_S3TC_DXT3_EXT = 0x83F2
COMPRESSED_RGBA_S3TC_DXT5_EXT = 0x83F3

PVR_MAGIC = 0x03525650
KTX_MAGIC = 0x58544BAB

_PVR_HEADER_SIZE = 52
_KTX_HEADER_SIZE = 4 * 17

# PVR pixel format -> (name, channels, is_etc, is_s3tc)
_PVR_FORMATS = {
    7: ("DXT1", 3, False, True),
    11: ("DXT5", 4, False, True),
    22: ("ETC2_RGB", 3, True, False),
    23: ("ETC2_RGBA", 4, True, False),
}

# KTX internal format -> (name, channels)
_KTX_FORMATS = {
    COMPRESSED_RGB8_ETC2: ("ETC2_RGB", 3),
    COMPRESSED_RGBA8_ETC2_EAC: ("ETC2_RGBA", 4),
}

PathType = str | PathLike[str]


def internal_format(image: ImageData) -> int:
    """Return the GL internal format an image is uploaded with.

    Raises ValueError unless the image has 3 or 4 channels.
    """
    if image.channels == 3:
        if image.is_compressed_etc:
            return COMPRESSED_RGB8_ETC2
        if image.is_compressed_s3tc:
            return COMPRESSED_RGB_S3TC_DXT1_EXT
        return GL_RGB
    if image.channels == 4:
        if image.is_compressed_etc:
            return COMPRESSED_RGBA8_ETC2_EAC
        if image.is_compressed_s3tc:
            return COMPRESSED_RGBA_S3TC_DXT5_EXT
        return GL_RGBA
    raise ValueError("Invalid channels count, must be 3 or 4")


def _word(data: bytes, index: int) -> int:
    start = 4 * index
    if start + 4 > len(data):
        raise DataFormatError("compressed image header is truncated")
    return struct.unpack_from("<I", data, start)[0]


def _payload(data: bytes, offset: int) -> bytes:
    if offset > len(data):
        raise DataFormatError("compressed image data offset lies past the end")
    return data[offset:]


def _load_pvr(data: bytes) -> ImageData:
    pixel_format = _word(data, 2)
    try:
        name, channels, is_etc, is_s3tc = _PVR_FORMATS[pixel_format]
    except KeyError:
        raise DataFormatError(f"unsupported PVR pixel format {pixel_format}") from None
    logger.info("%s", name)
    return ImageData(
        channels=channels,
        width=_word(data, 7),
        height=_word(data, 6),
        pixels=_payload(data, _PVR_HEADER_SIZE + _word(data, 12)),
        is_compressed_etc=is_etc,
        is_compressed_s3tc=is_s3tc,
    )


def _load_ktx(data: bytes) -> ImageData:
    gl_format = _word(data, 7)
    try:
        name, channels = _KTX_FORMATS[gl_format]
    except KeyError:
        raise DataFormatError(f"unsupported KTX internal format {gl_format:#x}") from None
    logger.info("%s", name)
    return ImageData(
        channels=channels,
        width=_word(data, 9),
        height=_word(data, 10),
        pixels=_payload(data, _KTX_HEADER_SIZE + _word(data, 15)),
        is_compressed_etc=True,
    )


def load_compressed_image_data(data: bytes) -> ImageData:
    """Decode a PVR or KTX container holding an ETC2 or S3TC image.

    Raises DataFormatError for other containers, formats or truncated data.
    """
    data = bytes(data)
    magic = _word(data, 0)
    if magic == PVR_MAGIC:
        return _load_pvr(data)
    if magic == KTX_MAGIC:
        return _load_ktx(data)
    raise DataFormatError("data is neither a PVR nor a KTX container")


def _resolve(future: Future, loader: Callable[[bytes], ImageData], data: bytes) -> None:
    try:
        image = loader(data)
    except ValueError as error:
        future.set_exception(error)
        return
    future.set_result(image)


def fetch_texture(
    fetcher: Fetcher,
    image_path: PathType,
    etc_image_path: PathType | None = None,
    s3tc_image_path: PathType | None = None,
    etc_supported: bool = False,
    s3tc_supported: bool = False,
) -> Future[ImageData]:
    """Fetch an image, preferring a compressed variant the device supports.

    The returned future receives the decoded image. It stays pending if the
    file cannot be fetched, and fails if the file cannot be decoded.
    """
    if etc_supported and etc_image_path is not None:
        path, loader = etc_image_path, load_compressed_image_data
    elif s3tc_supported and s3tc_image_path is not None:
        path, loader = s3tc_image_path, load_compressed_image_data
    else:
        path, loader = image_path, ImageData.from_bytes
    future: Future[ImageData] = Future()
    fetcher.fetch_file(path, lambda data: _resolve(future, loader, data))
    return future