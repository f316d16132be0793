from dataclasses import dataclass, field

from input_overlay import InputMode, InputOverlayState, OverlayDisabled, OverlayEnabled
from search_snapshot import SearchInactive, SearchSnapshot


@dataclass
class BorderAnchor:
    gutter_right_x: int
    first_record_y: int


@dataclass
class LayoutState:
    source_name: str = ""
    total_cols: int = 0
    total_row_count: int | None = None

    rows_offset: int = 0
    cols_offset: int = 0

    # written by the renderer every frame
    num_cols_rendered: int = 0
    more_cols_to_show: bool = True
    border_anchor: BorderAnchor | None = None

    elapsed_ms: float | None = None
    debug_text: str = ""

    overlay: InputOverlayState = field(default_factory=OverlayDisabled)
    search: SearchSnapshot = field(default_factory=SearchInactive)

    def begin_frame(self) -> None:
        self.border_anchor = None

    def set_buffer(self, mode: InputMode, text: str) -> None:
        self.overlay = OverlayEnabled(mode, text)

    def reset_buffer(self) -> None:
        self.overlay = OverlayDisabled()

    def set_cols_offset(self, offset: int) -> None:
        if self.total_cols > 0:
            offset = min(offset, self.total_cols - 1)
        self.cols_offset = max(0, offset)

    def set_rows_offset(self, offset: int) -> None:
        self.rows_offset = max(0, offset)
