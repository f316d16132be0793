import curses
import logging

from cell_buffer import CellBuffer, Style

logger = logging.getLogger(__name__)


class CursesPainter:
    """Copies a CellBuffer onto a curses window, one styled run at a time."""

    FIRST_PAIR = 1

    def __init__(self):
        self.colors_enabled = False
        self.extended = False
        self._pairs: dict[tuple[int, int], int] = {}
        try:
            curses.start_color()
            curses.use_default_colors()
            self.colors_enabled = True
            self.extended = curses.COLORS >= 16
        except curses.error:
            logger.debug("terminal colours unavailable, painting without colour")

    def _color(self, name: str | None) -> tuple[int, int]:
        """Curses colour number plus any extra attribute needed to fake it."""
        if name is None:
            return -1, 0
        if name == "dark_gray":
            return (8, 0) if self.extended else (curses.COLOR_WHITE, curses.A_DIM)
        if name == "gray":
            return curses.COLOR_WHITE, 0
        if name == "red":
            return curses.COLOR_RED, 0
        if name == "light_yellow":
            return (11, 0) if self.extended else (curses.COLOR_YELLOW, 0)
        return -1, 0

    def _pair(self, fg: int, bg: int) -> int:
        key = (fg, bg)
        if key not in self._pairs:
            number = self.FIRST_PAIR + len(self._pairs)
            try:
                curses.init_pair(number, fg, bg)
            except curses.error:
                logger.warning("init_pair(%d, %d, %d) failed", number, fg, bg)
                return 0
            self._pairs[key] = number
        return curses.color_pair(self._pairs[key])

    def attr_for(self, style: Style) -> int:
        attr = curses.A_BOLD if style.bold else curses.A_NORMAL
        if not self.colors_enabled or (style.fg is None and style.bg is None):
            return attr
        fg, fg_extra = self._color(style.fg)
        bg, _ = self._color(style.bg)
        return attr | fg_extra | self._pair(fg, bg)

    def paint(self, win, buf: CellBuffer) -> None:
        win.erase()
        h, w = win.getmaxyx()
        area = buf.area
        for y in range(area.top, min(area.bottom, h)):
            x = area.left
            while x < min(area.right, w):
                style = buf.get(x, y).style
                run_start = x
                chars = []
                while x < min(area.right, w) and buf.get(x, y).style == style:
                    chars.append(buf.get(x, y).symbol)
                    x += 1
                text = "".join(chars)
                try:
                    win.addnstr(y, run_start, text, len(text), self.attr_for(style))
                except curses.error:
                    # writing the bottom-right cell moves the cursor off-screen
                    pass
        win.refresh()
