import struct

import pytest

from lucaria.data import DataFormatError, ImageData
from lucaria.fetch import Fetcher
from lucaria.texture import (
    COMPRESSED_RGB8_ETC2,
    COMPRESSED_RGB_S3TC_DXT1_EXT,
    COMPRESSED_RGBA8_ETC2_EAC,
    COMPRESSED_RGBA_S3TC_DXT5_EXT,
    GL_RGB,
    GL_RGBA,
    KTX_MAGIC,
    PVR_MAGIC,
    fetch_texture,
    internal_format,
    load_compressed_image_data,
)


def make_pvr(pixel_format, width, height, pixels, metadata=b""):
    header = struct.pack(
        "<13I", PVR_MAGIC, 0, pixel_format, 0, 0, 0, height, width, 1, 1, 1, 1, len(metadata)
    )
    return header + metadata + pixels


def make_ktx(gl_format, width, height, pixels, key_values=b""):
    words = [0] * 16
    words[0] = KTX_MAGIC
    words[7] = gl_format
    words[9] = width
    words[10] = height
    words[15] = len(key_values)
    return struct.pack("<16I", *words) + key_values + struct.pack("<I", len(pixels)) + pixels


@pytest.mark.parametrize(
    "channels, etc, s3tc, expected",
    [
        (3, False, False, GL_RGB),
        (4, False, False, GL_RGBA),
        (3, True, False, COMPRESSED_RGB8_ETC2),
        (4, True, False, COMPRESSED_RGBA8_ETC2_EAC),
        (3, False, True, COMPRESSED_RGB_S3TC_DXT1_EXT),
        (4, False, True, COMPRESSED_RGBA_S3TC_DXT5_EXT),
    ],
)
def test_internal_format(channels, etc, s3tc, expected):
    image = ImageData(channels=channels, is_compressed_etc=etc, is_compressed_s3tc=s3tc)
    assert internal_format(image) == expected


def test_internal_format_rejects_bad_channels():
    with pytest.raises(ValueError):
        internal_format(ImageData(channels=2))


def test_gl_constants_fixed_by_format():
    assert internal_format(ImageData(channels=3, is_compressed_etc=True)) == 0x9274
    assert internal_format(ImageData(channels=4, is_compressed_s3tc=True)) == 0x83F3


@pytest.mark.parametrize(
    "pixel_format, channels, etc, s3tc",
    [(7, 3, False, True), (11, 4, False, True), (22, 3, True, False), (23, 4, True, False)],
)
def test_load_pvr(pixel_format, channels, etc, s3tc):
    pixels = bytes(range(16))
    image = load_compressed_image_data(make_pvr(pixel_format, 8, 4, pixels, metadata=b"meta"))
    assert image.channels == channels
    assert image.is_compressed_etc is etc
    assert image.is_compressed_s3tc is s3tc
    assert image.width == 8
    assert image.height == 4
    assert image.pixels == pixels


def test_load_pvr_unknown_format():
    with pytest.raises(DataFormatError):
        load_compressed_image_data(make_pvr(6, 4, 4, b"\x00" * 8))


@pytest.mark.parametrize(
    "gl_format, channels", [(COMPRESSED_RGB8_ETC2, 3), (COMPRESSED_RGBA8_ETC2_EAC, 4)]
)
def test_load_ktx(gl_format, channels):
    pixels = b"\x11\x22\x33\x44" * 4
    image = load_compressed_image_data(make_ktx(gl_format, 16, 32, pixels, key_values=b"abcd"))
    assert image.channels == channels
    assert image.is_compressed_etc is True
    assert image.is_compressed_s3tc is False
    assert (image.width, image.height) == (16, 32)
    assert image.pixels == pixels


def test_load_ktx_unknown_format():
    with pytest.raises(DataFormatError):
        load_compressed_image_data(make_ktx(COMPRESSED_RGB_S3TC_DXT1_EXT, 4, 4, b""))


def test_load_unknown_container():
    with pytest.raises(DataFormatError):
        load_compressed_image_data(b"\x89PNG\r\n\x1a\n" + b"\x00" * 60)


def test_load_truncated_header():
    with pytest.raises(DataFormatError):
        load_compressed_image_data(struct.pack("<I", PVR_MAGIC))


def make_fetcher(files):
    return Fetcher(loader=files.__getitem__)


def test_fetch_texture_uncompressed_round_trip():
    original = ImageData(channels=4, width=2, height=1, pixels=bytes(range(8)))
    fetcher = make_fetcher({"a.bin": original.to_bytes()})
    future = fetch_texture(fetcher, "a.bin")
    assert future.result(timeout=0) == original
    assert fetcher.completed == 1


def test_fetch_texture_prefers_etc_when_supported():
    files = {
        "a.bin": ImageData(channels=3, width=1, height=1, pixels=b"abc").to_bytes(),
        "a.ktx": make_ktx(COMPRESSED_RGB8_ETC2, 4, 4, b"\x01" * 8),
        "a.pvr": make_pvr(7, 4, 4, b"\x02" * 8),
    }
    fetcher = make_fetcher(files)
    image = fetch_texture(fetcher, "a.bin", "a.ktx", "a.pvr", True, True).result(timeout=0)
    assert image.is_compressed_etc is True
    assert image.pixels == b"\x01" * 8


def test_fetch_texture_falls_back_to_s3tc():
    files = {"a.pvr": make_pvr(11, 4, 4, b"\x02" * 16)}
    fetcher = make_fetcher(files)
    image = fetch_texture(
        fetcher, "a.bin", None, "a.pvr", etc_supported=True, s3tc_supported=True
    ).result(timeout=0)
    assert image.is_compressed_s3tc is True
    assert image.channels == 4


def test_fetch_texture_ignores_unsupported_variants():
    original = ImageData(channels=3, width=1, height=1, pixels=b"xyz")
    files = {"a.bin": original.to_bytes()}
    fetcher = make_fetcher(files)
    image = fetch_texture(fetcher, "a.bin", "a.ktx", "a.pvr").result(timeout=0)
    assert image == original


def test_fetch_texture_missing_file_stays_pending():
    fetcher = make_fetcher({})
    future = fetch_texture(fetcher, "missing.bin")
    assert future.done() is False
    assert fetcher.failed == 1


def test_fetch_texture_bad_data_fails_future():
    fetcher = make_fetcher({"a.ktx": b"garbage!" * 10})
    future = fetch_texture(fetcher, "a.bin", "a.ktx", etc_supported=True)
    with pytest.raises(DataFormatError):
        future.result(timeout=0)