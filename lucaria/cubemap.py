"""Fetching the six faces of a cube map."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import Future
from enum import IntEnum
from os import PathLike

from lucaria.data import ImageData
from lucaria.fetch import Fetcher
from lucaria.texture import load_compressed_image_data

PathType = str | PathLike[str]

FACE_COUNT = 6


class CubemapSide(IntEnum):
    """The faces of a cube map, in upload order."""

    POSITIVE_X = 0
    POSITIVE_Y = 1
    POSITIVE_Z = 2
    NEGATIVE_X = 3
    NEGATIVE_Y = 4
    NEGATIVE_Z = 5


def _checked(paths: Sequence[PathType] | None, name: str) -> list[PathType] | None:
    if paths is None:
        return None
    paths = list(paths)
    if len(paths) != FACE_COUNT:
        raise ValueError(f"{name} must name exactly {FACE_COUNT} faces")
    return paths


def fetch_cubemap(
    fetcher: Fetcher,
    image_paths: Sequence[PathType],
    etc_image_paths: Sequence[PathType] | None = None,
    s3tc_image_paths: Sequence[PathType] | None = None,
    etc_supported: bool = False,
    s3tc_supported: bool = False,
) -> Future[list[ImageData]]:
    """Fetch six face images, preferring a compressed set the device supports.

    The future receives the images ordered by CubemapSide once all six have
    arrived; it fails if a face cannot be decoded.
    """
    plain = _checked(image_paths, "image_paths")
    etc = _checked(etc_image_paths, "etc_image_paths")
    s3tc = _checked(s3tc_image_paths, "s3tc_image_paths")
    if etc_supported and etc is not None:
        paths, loader = etc, load_compressed_image_data
    elif s3tc_supported and s3tc is not None:
        paths, loader = s3tc, load_compressed_image_data
    else:
        paths, loader = plain, ImageData.from_bytes

    future: Future[list[ImageData]] = Future()
    faces: dict[CubemapSide, ImageData] = {}

    def on_face(index: int, _count: int, data: bytes) -> None:
        if future.done():
            return
        try:
            faces[CubemapSide(index)] = loader(data)
        except ValueError as error:
            future.set_exception(error)
            return
        if len(faces) == FACE_COUNT:
            future.set_result([faces[side] for side in CubemapSide])

    fetcher.fetch_files(paths, on_face)
    return future