from dataclasses import dataclass
from enum import Enum


class InputMode(Enum):
    DEFAULT = "default"
    GOTO_LINE = "goto_line"
    FIND = "find"


PROMPT_LABELS = {
    InputMode.GOTO_LINE: "Go to line: ",
    InputMode.FIND: "Find: ",
}


def prompt_label(mode: InputMode) -> str:
    return PROMPT_LABELS.get(mode, "")


@dataclass(frozen=True)
class OverlayDisabled:
    pass


@dataclass(frozen=True)
class OverlayEnabled:
    mode: InputMode
    text: str = ""

    def status_text(self) -> str:
        return f"{prompt_label(self.mode)}{self.text}"


InputOverlayState = OverlayDisabled | OverlayEnabled
