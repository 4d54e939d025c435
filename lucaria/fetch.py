"""Loading of asset files with completion counters, and deferred values."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import Future
from os import PathLike
from pathlib import Path
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

PathType = str | PathLike[str]
Loader = Callable[[str], bytes]
FileCallback = Callable[[bytes], None]
MultipleFileCallback = Callable[[int, int, bytes], None]


class Fetcher:
    """Fetch files through a loader and count what was requested, done and failed.

    The loader receives a path string and returns the file contents; it
    signals a failed fetch by raising ``OSError`` or ``LookupError``. Without
    a loader, files are read from disk relative to ``root``.
    """

    def __init__(self, loader: Loader | None = None, root: PathType = ".") -> None:
        self._root = Path(root)
        self._loader: Loader = loader if loader is not None else self._read_file
        self._total = 0
        self._completed = 0
        self._failed = 0

    @property
    def total(self) -> int:
        return self._total

    @property
    def completed(self) -> int:
        return self._completed

    @property
    def failed(self) -> int:
        return self._failed

    def _read_file(self, path: str) -> bytes:
        return (self._root / path).read_bytes()

    def _load(self, path: PathType) -> bytes | None:
        name = str(path)
        try:
            data = bytes(self._loader(name))
        except (OSError, LookupError) as error:
            self._failed += 1
            logger.warning("Failed to fetch %s: %s", name, error)
            return None
        self._completed += 1
        logger.info("Successfully fetched %d bytes from %s", len(data), name)
        return data

    def fetch_file(self, path: PathType, callback: FileCallback) -> None:
        """Fetch one file and hand its bytes to ``callback`` on success."""
        self._total += 1
        data = self._load(path)
        if data is not None:
            callback(data)

    def fetch_files(self, paths: Iterable[PathType], callback: MultipleFileCallback) -> None:
        """Fetch several files; ``callback`` gets (index, count, bytes) for each success."""
        paths = list(paths)
        count = len(paths)
        self._total += count
        for index, path in enumerate(paths):
            data = self._load(path)
            if data is not None:
                callback(index, count, data)

    def reset_counters(self) -> None:
        """Zero the counters; refused while failures leave fetches unaccounted for."""
        if self._total != self._completed and self._failed != 0:
            raise RuntimeError("Impossible to reset fetch counters.")
        self._total = 0
        self._completed = 0
        self._failed = 0


class FetchContainer(Generic[T]):
    """Holds a value that is either given directly or arrives through a future."""

    def __init__(self, updater: ContainerUpdater | None = None) -> None:
        self._updater = updater
        self._fetched: Future[T] | None = None
        self._value: T | None = None
        self._callback: Callable[[], None] | None = None

    def _ensure_not_waiting(self) -> None:
        if self._fetched is not None:
            raise RuntimeError("Fetched container is already waiting for a future.")

    def emplace(self, value: T) -> None:
        """Store ``value`` at once."""
        self._ensure_not_waiting()
        self._value = value

    def emplace_future(self, future: Future[T], callback: Callable[[], None] | None = None) -> None:
        """Wait for ``future``; ``callback`` runs once its value has been taken."""
        self._ensure_not_waiting()
        self._fetched = future
        self._callback = callback
        if self._updater is not None:
            self._updater.register(self)

    def has_value(self) -> bool:
        return self._value is not None

    def value(self) -> T:
        if self._value is None:
            raise LookupError("container holds no value yet")
        return self._value

    def poll(self) -> bool:
        """Take the future's value if it is ready; return True when that happened."""
        if self._fetched is None or not self._fetched.done():
            return False
        self._value = self._fetched.result()
        if self._callback is not None:
            self._callback()
        self._fetched = None
        return True


class ContainerUpdater:
    """Polls registered containers until their futures have delivered."""

    def __init__(self) -> None:
        self._containers: dict[int, FetchContainer] = {}

    def __len__(self) -> int:
        return len(self._containers)

    def register(self, container: FetchContainer) -> None:
        self._containers[id(container)] = container

    def wait(self) -> None:
        """Poll every registered container and drop those that are done."""
        finished = [key for key, container in self._containers.items() if container.poll()]
        for key in finished:
            del self._containers[key]