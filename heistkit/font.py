"""A simple font object that draws text through a renderer."""

from __future__ import annotations

from typing import Optional, Protocol

from heistkit.color import Color


class TextRenderer(Protocol):
    """Anything that can draw text and report a result (negative on failure)."""

    def draw_text(self, x: int, y: int, font_face: str, size: int, color: Color, text: str) -> int:
        ...


class Font:
    """A current face, point size and colour used to draw text."""

    DEFAULT_FACE = "arial.ttf"
    DEFAULT_SIZE = 18

    def __init__(self, renderer: TextRenderer) -> None:
        self._renderer = renderer
        self.face = self.DEFAULT_FACE
        self.point_size = self.DEFAULT_SIZE
        self.color = Color.black()
        self.load_default()

    def load_default(self) -> bool:
        """Load the default face."""
        return self.load(self.DEFAULT_FACE)

    def load(self, filename: str) -> bool:
        """Select a face, reset size and colour; True if the renderer accepts it."""
        self.face = filename
        self.point_size = self.DEFAULT_SIZE
        self.color = Color.black()
        return self._renderer.draw_text(0, 0, self.face, self.point_size, self.color, "") >= 0

    def set_color(self, *args) -> None:
        """Set the colour from a Color or from r, g, b and an optional alpha (default 100)."""
        if len(args) == 1 and isinstance(args[0], Color):
            self.color = args[0]
        elif len(args) in (3, 4):
            r, g, b, *rest = args
            self.color = Color(r, g, b, rest[0] if rest else 100)
        else:
            raise TypeError("set_color() takes a Color or r, g, b[, a]")

    def set_size(self, size: int) -> None:
        self.point_size = size

    def draw_text(
        self,
        x: int,
        y: int,
        text: str,
        color: Optional[Color] = None,
        size: Optional[int] = None,
    ) -> int:
        """Draw text, optionally with a one-off colour and size."""
        return self._renderer.draw_text(
            x,
            y,
            self.face,
            self.point_size if size is None else size,
            self.color if color is None else color,
            text,
        )

    def draw_number(
        self,
        x: int,
        y: int,
        number: int,
        color: Optional[Color] = None,
        size: Optional[int] = None,
    ) -> int:
        """Draw an integer in decimal."""
        return self.draw_text(x, y, str(int(number)), color, size)

    def draw_char(self, x: int, y: int, c: str) -> int:
        """Draw a single character."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return self.draw_text(x, y, c)