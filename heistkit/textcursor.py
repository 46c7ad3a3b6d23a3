"""Text insertion-point placement on a drawing surface, and time formatting."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder matching truncating division."""
    return a - b * _tdiv(a, b)


def _pad2(value: int) -> str:
    return str(value).rjust(2, "0")


def timetext(t: int) -> str:
    """Format milliseconds as MM:SS.cc (minutes wrap at 100)."""
    t = int(t)
    minutes = _tmod(_tdiv(t, 60000), 100)
    seconds = _tmod(_tdiv(t, 1000), 60)
    centis = _tmod(_tdiv(t, 10), 100)
    return f"{_pad2(minutes)}:{_pad2(seconds)}.{_pad2(centis)}"


class Align(Enum):
    """Horizontal alignment of text around the insertion point."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True)
class FontMetrics:
    """Measurements of a font, in pixels."""

    size: int
    height: int
    width: int
    ascent: int
    descent: int
    leading: int
    baseline: int

    def with_leading(self, leading: int) -> FontMetrics:
        """Return these metrics with a new leading and the matching baseline."""
        return replace(self, leading=leading, baseline=leading - self.height - self.descent)


class TextCursor:
    """The insertion point for text output on a surface of a given size.

    Rows are counted from the top, bottom or vertical centre of the surface
    and columns from the left, right or centre, inside the margins.  The
    y axis points up: row 0 from the top has the largest y.  In ``down``
    mode a new line moves the insertion point down, otherwise up.  The
    cursor starts left-aligned in down mode; ``align`` and ``down`` may be
    changed at any time.
    """

    def __init__(self, width: int, height: int, font: FontMetrics) -> None:
        self.width = width
        self.height = height
        self.font = font
        self.align = Align.LEFT
        self.down = True
        self.x = 0
        self.y = 0
        self.margin_left = 5
        self.margin_right = 5
        self.margin_upper = 2
        self.margin_bottom = 2

    @property
    def position(self) -> tuple[int, int]:
        """The insertion point as (x, y)."""
        return (self.x, self.y)

    def set_margins(self, left: int = 5, right: int = 5, upper: int = 2, bottom: int = 2) -> None:
        """Set the margins and move to row 0, column 0."""
        self.margin_left = left
        self.margin_right = right
        self.margin_upper = upper
        self.margin_bottom = bottom
        self.goto_row_col(0, 0)

    def set_leading(self, leading: int) -> None:
        """Change the distance between lines."""
        self.font = self.font.with_leading(leading)

    def goto_xy(self, x: int, y: int) -> None:
        """Place the insertion point at surface coordinates."""
        self.x = x
        self.y = y

    def goto_row_col(self, row: float, col: float) -> None:
        self.goto_row(row)
        self.goto_col(col)

    def goto_row(self, row: float = 0) -> None:
        """Go to a row counted from the top in down mode, else from the bottom."""
        if self.down:
            self.goto_row_top(row)
        else:
            self.goto_row_bottom(row)

    def goto_row_top(self, row: float = 0) -> None:
        f = self.font
        self.y = self.height - self.margin_upper - int((row + 1) * f.leading) + f.baseline

    def goto_row_bottom(self, row: float = 0) -> None:
        f = self.font
        self.y = self.margin_bottom + int(row * f.leading) - f.descent

    def goto_row_center(self, row: float = 0) -> None:
        f = self.font
        span = self.height - self.margin_upper - self.margin_bottom - f.leading
        self.y = self.margin_bottom + _tdiv(span, 2) - int(row * f.leading)

    def goto_col(self, col: float = 0) -> None:
        """Go to a column counted according to the current alignment."""
        if self.align is Align.LEFT:
            self.goto_col_left(col)
        elif self.align is Align.RIGHT:
            self.goto_col_right(col)
        else:
            self.goto_col_center(col)

    def goto_col_left(self, col: float = 0) -> None:
        self.x = self.margin_left + int(col * self.font.width)

    def goto_col_right(self, col: float = 0) -> None:
        self.x = self.width - self.margin_right - int(col * self.font.width)

    def goto_col_center(self, col: float = 0) -> None:
        span = self.width - self.margin_left - self.margin_right
        self.x = self.margin_left + _tdiv(span, 2) + int(col * self.font.width)

    def new_line(self) -> None:
        """Move one line in the current direction and back to column 0."""
        self.y -= self.font.leading * (1 if self.down else -1)
        self.goto_col()

    def line_down(self) -> None:
        self.y -= self.font.leading
        self.goto_col()

    def line_up(self) -> None:
        self.y += self.font.leading
        self.goto_col()

    def top(self) -> None:
        """Switch to down mode and go to the top row."""
        self.down = True
        self.goto_row_top()
        self.goto_col()

    def bottom(self) -> None:
        """Switch to up mode and go to the bottom row."""
        self.down = False
        self.goto_row_bottom()
        self.goto_col()

    def vcenter(self) -> None:
        """Switch to down mode and go to the vertically centred row."""
        self.down = True
        self.goto_row_center()
        self.goto_col()