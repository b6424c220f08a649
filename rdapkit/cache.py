"""Caches for bootstrap Service Registry files, held in memory or on disk."""

from __future__ import annotations

import abc
import enum
import os
import time
from pathlib import Path

DEFAULT_TIMEOUT = 24 * 60 * 60.0
DEFAULT_CACHE_DIR_NAME = ".openrdap"


class FileState(enum.Enum):
    """State of a file in a registry cache."""

    ABSENT = 0
    """The file is not in the cache."""

    GOOD = 1
    """The latest version of the file has already been loaded or saved."""

    SHOULD_RELOAD = 2
    """A newer version of the file is available to be loaded."""

    EXPIRED = 3
    """The file is cached but has expired; it can still be loaded."""

    def __str__(self) -> str:
        if self is FileState.ABSENT:
            return "not cached"
        if self is FileState.EXPIRED:
            return "expired"
        return "good"


class CacheError(Exception):
    """Raised when a cached file cannot be loaded or saved."""


class RegistryCache(abc.ABC):
    """A cache of Service Registry files."""

    @abc.abstractmethod
    def load(self, filename: str) -> bytes:
        """Return the cached contents of *filename*."""

    @abc.abstractmethod
    def save(self, filename: str, data: bytes) -> None:
        """Store *data* under *filename*."""

    @abc.abstractmethod
    def state(self, filename: str) -> FileState:
        """Return the cache state of *filename*."""

    @abc.abstractmethod
    def set_timeout(self, timeout: float) -> None:
        """Set how many seconds a file is kept before it is expired."""


class MemoryCache(RegistryCache):
    """Caches Service Registry files in memory."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout
        self._data: dict[str, bytes] = {}
        self._saved_at: dict[str, float] = {}

    def set_timeout(self, timeout: float) -> None:
        self.timeout = timeout

    def save(self, filename: str, data: bytes) -> None:
        self._data[filename] = bytes(data)
        self._saved_at[filename] = time.monotonic()

    def load(self, filename: str) -> bytes:
        """Return the file even if it has expired."""
        try:
            return self._data[filename]
        except KeyError:
            raise CacheError(f"File {filename} not in cache") from None

    def state(self, filename: str) -> FileState:
        saved_at = self._saved_at.get(filename)
        if saved_at is None:
            return FileState.ABSENT
        if saved_at + self.timeout < time.monotonic():
            return FileState.EXPIRED
        return FileState.GOOD


class DiskCache(RegistryCache):
    """Caches Service Registry files in a directory.

    File modification times decide expiry, so several caches may share one
    directory and notice each other's saves.
    """

    def __init__(
        self,
        directory: str | os.PathLike[str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if directory is None:
            directory = Path.home() / DEFAULT_CACHE_DIR_NAME
        self.directory = Path(directory)
        self.timeout = timeout
        self._last_loaded: dict[str, int] = {}

    def init_dir(self) -> bool:
        """Create the cache directory if needed; return True if it was created."""
        try:
            if self.directory.is_dir():
                return False
            if self.directory.exists():
                raise CacheError(f"Cache dir {self.directory} is not a dir")
            self.directory.mkdir(mode=0o775)
        except CacheError:
            raise
        except OSError as exc:
            raise CacheError(f"Cannot create cache dir {self.directory}: {exc}") from exc
        return True

    def set_timeout(self, timeout: float) -> None:
        self.timeout = timeout

    def save(self, filename: str, data: bytes) -> None:
        self.init_dir()
        try:
            self._path(filename).write_bytes(bytes(data))
            mtime = self._mtime_ns(filename)
        except OSError as exc:
            raise CacheError(f"File {filename} failed to save correctly: {exc}") from exc
        self._last_loaded[filename] = mtime

    def load(self, filename: str) -> bytes:
        """Return the file even if it has expired."""
        try:
            mtime = self._mtime_ns(filename)
            data = self._path(filename).read_bytes()
        except OSError as exc:
            raise CacheError(f"Unable to load {filename}: {exc}") from exc
        self._last_loaded[filename] = mtime
        return data

    def state(self, filename: str) -> FileState:
        try:
            mtime = self._mtime_ns(filename)
        except OSError:
            return FileState.ABSENT
        expiry_ns = time.time_ns() - int(self.timeout * 1_000_000_000)
        if mtime <= expiry_ns:
            return FileState.EXPIRED
        last = self._last_loaded.get(filename)
        if last is not None and mtime <= last:
            return FileState.GOOD
        return FileState.SHOULD_RELOAD

    def _path(self, filename: str) -> Path:
        return self.directory / filename

    def _mtime_ns(self, filename: str) -> int:
        return self._path(filename).stat().st_mtime_ns