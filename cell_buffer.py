from dataclasses import dataclass, field
from typing import Iterable, NamedTuple


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Style:
    fg: str | None = None
    bg: str | None = None
    bold: bool = False

    def patch(self, other: "Style") -> "Style":
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            bold=self.bold or other.bold,
        )


@dataclass
class Cell:
    symbol: str = " "
    style: Style = field(default_factory=Style)


class Span(NamedTuple):
    text: str
    style: Style


HORIZONTAL = "─"
VERTICAL = "│"
HORIZONTAL_DOWN = "┬"
HORIZONTAL_UP = "┴"


class CellBuffer:
    """Styled character surface addressed by (x, y).

    Writes outside ``area`` are dropped, so callers can draw without
    checking bounds first.
    """

    def __init__(self, area: Rect):
        self.area = area
        self.cells = [Cell() for _ in range(max(0, area.area()))]

    @classmethod
    def empty(cls, width: int, height: int) -> "CellBuffer":
        return cls(Rect(0, 0, max(0, width), max(0, height)))

    def _index(self, x: int, y: int) -> int | None:
        a = self.area
        if a.left <= x < a.right and a.top <= y < a.bottom:
            return (y - a.y) * a.width + (x - a.x)
        return None

    def get(self, x: int, y: int) -> Cell | None:
        idx = self._index(x, y)
        return None if idx is None else self.cells[idx]

    def set_symbol(self, x: int, y: int, symbol: str) -> None:
        cell = self.get(x, y)
        if cell is not None:
            cell.symbol = symbol

    def set_style(self, x: int, y: int, style: Style) -> None:
        cell = self.get(x, y)
        if cell is not None:
            cell.style = cell.style.patch(style)

    def set_string(self, x: int, y: int, text: str, style: Style, max_width: int) -> int:
        """Write ``text`` starting at (x, y), at most ``max_width`` cells.

        Returns the x position right after the last written cell.
        """
        if max_width <= 0:
            return x
        limit = x + max_width
        for ch in text:
            if x >= limit:
                break
            # newlines, tabs and other control characters would move the terminal cursor
            if not ch.isprintable():
                ch = " "
            cell = self.get(x, y)
            if cell is not None:
                cell.symbol = ch
                cell.style = cell.style.patch(style)
            x += 1
        return x

    def set_span(self, x: int, y: int, span: Span, max_width: int) -> int:
        return self.set_string(x, y, span.text, span.style, max_width)

    def set_spans(self, x: int, y: int, spans: Iterable[Span], max_width: int) -> int:
        remaining = max_width
        for span in spans:
            if remaining <= 0:
                break
            end = self.set_span(x, y, span, remaining)
            remaining -= end - x
            x = end
        return x

    def hline(self, x: int, y: int, width: int, style: Style) -> None:
        for xi in range(x, x + max(0, width)):
            self.set_symbol(xi, y, HORIZONTAL)
            self.set_style(xi, y, style)

    def vline(self, x: int, y: int, height: int, style: Style) -> None:
        for yi in range(y, y + max(0, height)):
            self.set_symbol(x, yi, VERTICAL)
            self.set_style(x, yi, style)

    def blank(self, x: int, y: int, width: int) -> None:
        for xi in range(x, x + max(0, width)):
            cell = self.get(xi, y)
            if cell is not None:
                cell.symbol = " "
                cell.style = Style()

    def reset(self) -> None:
        for cell in self.cells:
            cell.symbol = " "
            cell.style = Style()

    # ---------- inspection ----------
    def row_text(self, y: int) -> str:
        if not self.area.top <= y < self.area.bottom:
            return ""
        start = (y - self.area.y) * self.area.width
        return "".join(c.symbol for c in self.cells[start : start + self.area.width])

    def lines(self) -> list[str]:
        return [self.row_text(y) for y in range(self.area.top, self.area.bottom)]

    def snapshot(self) -> list[tuple[str, Style]]:
        return [(c.symbol, c.style) for c in self.cells]
