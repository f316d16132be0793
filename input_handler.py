import curses
from dataclasses import dataclass
from typing import Any

from input_overlay import InputMode

ESC = 27
ENTER_KEYS = (10, 13, curses.KEY_ENTER)
BACKSPACE_KEYS = (8, 127, curses.KEY_BACKSPACE)
CTRL_B = 2
CTRL_F = 6


@dataclass(frozen=True)
class Control:
    kind: str
    value: Any = None


NOTHING = Control("nothing")

DEFAULT_KEYS = {
    ord("q"): Control("quit"),
    ord("j"): Control("scroll_down"),
    curses.KEY_DOWN: Control("scroll_down"),
    ord("k"): Control("scroll_up"),
    curses.KEY_UP: Control("scroll_up"),
    ord("l"): Control("scroll_right"),
    curses.KEY_RIGHT: Control("scroll_right"),
    ord("h"): Control("scroll_left"),
    curses.KEY_LEFT: Control("scroll_left"),
    ord("L"): Control("page_right"),
    ord("H"): Control("page_left"),
    CTRL_F: Control("page_down"),
    ord(" "): Control("page_down"),
    curses.KEY_NPAGE: Control("page_down"),
    CTRL_B: Control("page_up"),
    curses.KEY_PPAGE: Control("page_up"),
    ord("g"): Control("top"),
    curses.KEY_HOME: Control("top"),
    ord("G"): Control("bottom"),
    curses.KEY_END: Control("bottom"),
    ord("n"): Control("find_next"),
    ord("N"): Control("find_prev"),
    ESC: Control("reset"),
}


class InputHandler:
    def __init__(self):
        self.mode = InputMode.DEFAULT
        self.buffer = ""

    def buffer_state(self) -> tuple[InputMode, str] | None:
        if self.mode == InputMode.DEFAULT:
            return None
        return self.mode, self.buffer

    def reset(self):
        self.mode = InputMode.DEFAULT
        self.buffer = ""

    def handle_key(self, ch) -> Control:
        if ch == -1:
            return NOTHING
        if self.mode == InputMode.DEFAULT:
            return self._handle_default(ch)
        return self._handle_buffered(ch)

    def _handle_default(self, ch) -> Control:
        if ord("0") <= ch <= ord("9"):
            self.mode = InputMode.GOTO_LINE
            self.buffer = chr(ch)
            return Control("buffer_content")
        if ch == ord("/"):
            self.mode = InputMode.FIND
            self.buffer = ""
            return Control("buffer_content")
        return DEFAULT_KEYS.get(ch, NOTHING)

    def _handle_buffered(self, ch) -> Control:
        if ch == ESC:
            self.reset()
            return Control("buffer_reset")

        if ch in ENTER_KEYS:
            mode, text = self.mode, self.buffer
            self.reset()
            if mode == InputMode.GOTO_LINE:
                try:
                    line = int(text)
                except ValueError:
                    return Control("buffer_reset")
                return Control("goto_line", line)
            if mode == InputMode.FIND:
                if not text:
                    return Control("buffer_reset")
                return Control("find", text)
            return Control("buffer_reset")

        if ch in BACKSPACE_KEYS:
            self.buffer = self.buffer[:-1]
            return Control("buffer_content")

        if 32 <= ch < 127:
            if self.mode == InputMode.GOTO_LINE and not chr(ch).isdigit():
                return NOTHING
            self.buffer += chr(ch)
            return Control("buffer_content")

        return NOTHING
