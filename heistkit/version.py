"""Library version numbers and their numeric encoding."""

from __future__ import annotations

from dataclasses import dataclass

MAJOR_VERSION = 1
MINOR_VERSION = 2
PATCHLEVEL = 15


def version_num(major: int, minor: int, patch: int) -> int:
    """Encode a version as one number, e.g. (1, 2, 3) -> 1203."""
    return major * 1000 + minor * 100 + patch


@dataclass(frozen=True, order=True)
class Version:
    """A major.minor.patch version triple."""

    major: int
    minor: int
    patch: int

    def number(self) -> int:
        """The numeric encoding of this version."""
        return version_num(self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def compiled_version() -> Version:
    """The version this package implements."""
    return Version(MAJOR_VERSION, MINOR_VERSION, PATCHLEVEL)


def version_at_least(major: int, minor: int, patch: int) -> bool:
    """True if the compiled version is at least major.minor.patch."""
    return compiled_version().number() >= version_num(major, minor, patch)