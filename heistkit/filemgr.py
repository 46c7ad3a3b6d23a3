"""Search-path file resolution with a cache of loaded resources."""

from __future__ import annotations

import os
import sys
from typing import Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


def _executable_dir() -> str:
    return os.path.dirname(os.path.abspath(sys.argv[0] or ".")) + os.sep


class FileManager(Generic[T]):
    """Resolve file names against a search path and cache loaded objects.

    The search path is a list of directory prefixes separated by semicolons;
    every ``%`` is replaced by the base directory (by default the directory
    of the running program).  Example: ``"%;%images/;./;images/"``.
    """

    def __init__(
        self,
        path: str,
        loader: Callable[[str], T],
        deleter: Optional[Callable[[T], None]] = None,
        base_dir: Optional[str] = None,
    ) -> None:
        self._base_dir = base_dir if base_dir is not None else _executable_dir()
        self._loader = loader
        self._deleter = deleter
        self._cache: Dict[str, T] = {}
        self.path = path

    @property
    def path(self) -> str:
        """The search path as given."""
        return self._path

    @path.setter
    def path(self, new_path: str) -> None:
        self._path = new_path
        resolved = new_path if new_path.endswith(";") else new_path + ";"
        self._resolved = resolved.replace("%", self._base_dir)

    @property
    def search_dirs(self) -> list[str]:
        """The directory prefixes scanned, in order, after substitution."""
        return self._resolved.split(";")[:-1]

    def find_path(self, filename: str) -> str:
        """Return the first existing prefix+filename, or filename unchanged."""
        drive, rest = os.path.splitdrive(filename)
        if drive or os.path.dirname(rest):
            return filename
        for prefix in self.search_dirs:
            candidate = prefix + filename
            if os.path.isfile(candidate):
                return candidate
        return filename

    def load(self, filename: str) -> T:
        """Load a file through the loader, once per distinct file name."""
        if filename not in self._cache:
            self._cache[filename] = self._loader(self.find_path(filename))
        return self._cache[filename]

    def close(self) -> None:
        """Release every cached object through the deleter and empty the cache."""
        cached, self._cache = self._cache, {}
        if self._deleter is not None:
            for item in cached.values():
                self._deleter(item)

    def __enter__(self) -> FileManager[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()