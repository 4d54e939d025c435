"""Loading of shader sources and fetching of vertex/fragment program pairs."""

from __future__ import annotations

import logging
from concurrent.futures import Future
from os import PathLike

from lucaria.data import ShaderData
from lucaria.fetch import Fetcher

logger = logging.getLogger(__name__)

PathType = str | PathLike[str]

_STAGE_COUNT = 2


def load_shader_data(data: bytes) -> ShaderData:
    """Decode encoded shader bytes into their source text."""
    return ShaderData.from_bytes(data)


def fetch_program(
    fetcher: Fetcher,
    vertex_path: PathType,
    fragment_path: PathType,
) -> Future[tuple[ShaderData, ShaderData]]:
    """Fetch a vertex and a fragment shader that together form a program.

    The future receives ``(vertex, fragment)`` once both have arrived. It
    stays pending if either file cannot be fetched, and fails if a file
    cannot be decoded.
    """
    future: Future[tuple[ShaderData, ShaderData]] = Future()
    stages: dict[int, ShaderData] = {}

    def on_stage(index: int, _count: int, data: bytes) -> None:
        if future.done():
            return
        try:
            stages[index] = load_shader_data(data)
        except ValueError as error:
            future.set_exception(error)
            return
        if len(stages) == _STAGE_COUNT:
            logger.info("Program sources for %s and %s ready", vertex_path, fragment_path)
            future.set_result((stages[0], stages[1]))

    fetcher.fetch_files([vertex_path, fragment_path], on_stage)
    return future