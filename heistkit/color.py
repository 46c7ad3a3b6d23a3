"""RGBA colours with saturating arithmetic and a palette of named shades."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _clamp(value: int) -> int:
    return max(0, min(255, value))


@dataclass(frozen=True)
class Color:
    """An immutable RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an int in 0..255, got {value!r}")

    def _channels(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def _combine(self, other: Color, op) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(op(x, y) for x, y in zip(self._channels(), other._channels())))

    # Arithmetic saturates at the channel limits.
    def __add__(self, other: Color) -> Color:
        return self._combine(other, lambda x, y: _clamp(x + y))

    def __sub__(self, other: Color) -> Color:
        return self._combine(other, lambda x, y: _clamp(x - y))

    def __mul__(self, other: Color | int) -> Color:
        if isinstance(other, int) and not isinstance(other, bool):
            m = other & 0xFF
            other = Color(m, m, m, 255)
        return self._combine(other, lambda x, y: (x * y) // 255)

    def __or__(self, other: Color) -> Color:
        return self._combine(other, lambda x, y: x | y)

    def __and__(self, other: Color) -> Color:
        return self._combine(other, lambda x, y: x & y)

    def __xor__(self, other: Color) -> Color:
        return self._combine(other, lambda x, y: x ^ y)

    def __invert__(self) -> Color:
        return self ^ Color(255, 255, 255, 255)

    # Primary colours
    @classmethod
    def red(cls, shade: int = 255) -> Color:
        return cls(shade, 0, 0)

    @classmethod
    def green(cls, shade: int = 255) -> Color:
        return cls(0, shade, 0)

    @classmethod
    def blue(cls, shade: int = 255) -> Color:
        return cls(0, 0, shade)

    # Secondary colours
    @classmethod
    def yellow(cls, shade: int = 255) -> Color:
        return cls.red(shade) | cls.green(shade)

    @classmethod
    def cyan(cls, shade: int = 255) -> Color:
        return cls.green(shade) | cls.blue(shade)

    @classmethod
    def magenta(cls, shade: int = 255) -> Color:
        return cls.red(shade) | cls.blue(shade)

    # Dark colours
    @classmethod
    def dark_red(cls, shade: int = 128) -> Color:
        return cls.red(shade)

    @classmethod
    def dark_green(cls, shade: int = 128) -> Color:
        return cls.green(shade)

    @classmethod
    def dark_blue(cls, shade: int = 128) -> Color:
        return cls.blue(shade)

    @classmethod
    def dark_yellow(cls, shade: int = 128) -> Color:
        return cls.yellow(shade)

    @classmethod
    def dark_cyan(cls, shade: int = 128) -> Color:
        return cls.cyan(shade)

    @classmethod
    def dark_magenta(cls, shade: int = 128) -> Color:
        return cls.magenta(shade)

    # Light colours
    @classmethod
    def light_red(cls, gray: int = 128, shade: int = 255) -> Color:
        return cls.red(shade) | cls.white(gray)

    @classmethod
    def light_green(cls, gray: int = 128, shade: int = 255) -> Color:
        return cls.green(shade) | cls.white(gray)

    @classmethod
    def light_blue(cls, gray: int = 128, shade: int = 255) -> Color:
        return cls.blue(shade) | cls.white(gray)

    @classmethod
    def light_yellow(cls, gray: int = 128, shade: int = 255) -> Color:
        return cls.yellow(shade) | cls.white(gray)

    @classmethod
    def light_cyan(cls, gray: int = 128, shade: int = 255) -> Color:
        return cls.cyan(shade) | cls.white(gray)

    @classmethod
    def light_magenta(cls, gray: int = 128, shade: int = 255) -> Color:
        return cls.magenta(shade) | cls.white(gray)

    # Greyscale
    @classmethod
    def white(cls, shade: int = 255) -> Color:
        return cls.red(shade) | cls.green(shade) | cls.blue(shade)

    @classmethod
    def light_gray(cls, shade: int = 192) -> Color:
        return cls.white(shade)

    @classmethod
    def dark_gray(cls, shade: int = 128) -> Color:
        return cls.white(shade)

    @classmethod
    def black(cls, shade: int = 0) -> Color:
        return cls.white(shade)

    @classmethod
    def any_but(cls, *args: Color) -> Color:
        """Return a colour differing from the one or two colours given."""
        if len(args) not in (1, 2):
            raise TypeError(f"any_but() takes 1 or 2 colours, got {len(args)}")
        candidate = cls.black()
        if candidate in args:
            candidate = cls.white()
        if len(args) == 2 and candidate in args:
            candidate = cls.dark_gray()
        return candidate

    @classmethod
    def hsb(cls, hue: float, saturation: float, brightness: float) -> Color:
        """Build a colour from hue (degrees), saturation and brightness (0..1)."""
        sector = int(hue / 60.0)
        h = int(math.fmod(sector, 6))
        f = hue / 60.0 - sector
        p = int(255 * brightness * (1 - saturation)) & 0xFF
        q = int(255 * brightness * (1 - f * saturation)) & 0xFF
        t = int(255 * brightness * (1 - (1 - f) * saturation)) & 0xFF
        v = int(brightness * 255) & 0xFF
        table = {
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
            5: (v, p, q),
        }
        if h not in table:
            return cls.black()
        return cls(*table[h])