import logging
from typing import Sequence

from cell_buffer import HORIZONTAL_DOWN, HORIZONTAL_UP, CellBuffer, Rect, Span, Style
from column_widths import compute_column_widths
from highlight_spans import contains_target, split_highlight
from layout_state import BorderAnchor, LayoutState
from search_snapshot import SearchActive
from status_bar import render_status

logger = logging.getLogger(__name__)

BORDER_STYLE = Style(fg="dark_gray")
ROW_NUMBER_STYLE = Style(fg="dark_gray")
STATUS_STYLE = Style(fg="gray")
MATCH_STYLE = Style(fg="red")
CURRENT_MATCH_STYLE = Style(fg="red", bg="light_yellow")
HEADER_STYLE = Style(bold=True)
CELL_STYLE = Style()


class TableRenderer:
    HEADER_HEIGHT = 3
    STATUS_HEIGHT = 2
    # blank cells on each side of the gutter's row numbers, then the rule
    GUTTER_PADDING = 2
    GUTTER_RULE = 1
    GUTTER_GAP = 2

    def __init__(self, header: Sequence[str], rows: Sequence[Sequence[str]]):
        self.header = list(header)
        self.rows = rows

    # ---------- frame ----------
    def render(self, area: Rect, buf: CellBuffer, state: LayoutState) -> None:
        if area.area() == 0:
            return

        state.begin_frame()
        column_widths = compute_column_widths(self.header, self.rows)
        y_header, y_first_record = self._render_header_borders(buf, area)

        # row numbers and row content
        rows_area = Rect(
            area.x,
            y_first_record,
            area.width,
            max(0, area.height - self.HEADER_HEIGHT - self.STATUS_HEIGHT),
        )

        x_first_col = self._render_row_numbers(buf, state, rows_area, len(self.rows))

        self._render_row(buf, state, column_widths, rows_area, x_first_col, y_header, self.header, None)

        y = y_first_record
        for rel_index, row in enumerate(self.rows):
            if y >= rows_area.bottom:
                break
            self._render_row(
                buf,
                state,
                column_widths,
                rows_area,
                x_first_col,
                y,
                row,
                rel_index + state.rows_offset,
            )
            y += 1

        status_height = min(self.STATUS_HEIGHT, area.height)
        status_area = Rect(area.x, area.bottom - status_height, area.width, status_height)
        self._render_status(buf, status_area, state)

        self._render_other_borders(buf, area, rows_area, state)

        logger.debug(
            "frame %dx%d rows=%d cols_offset=%d cols_rendered=%d more_cols=%s",
            area.width,
            area.height,
            len(self.rows),
            state.cols_offset,
            state.num_cols_rendered,
            state.more_cols_to_show,
        )

    # ---------- regions ----------
    def _render_header_borders(self, buf: CellBuffer, area: Rect) -> tuple[int, int]:
        # the last row always belongs to the status text
        status_y = area.bottom - 1
        if area.y < status_y:
            buf.hline(area.x, area.y, area.width, BORDER_STYLE)
        if area.y + self.HEADER_HEIGHT - 1 < status_y:
            buf.hline(area.x, area.y + self.HEADER_HEIGHT - 1, area.width, BORDER_STYLE)
        # y of the header text and of the first record
        return area.y + 1, area.y + self.HEADER_HEIGHT

    def _render_row_numbers(self, buf: CellBuffer, state: LayoutState, area: Rect, num_rows: int) -> int:
        max_row_num = state.rows_offset + num_rows + 1
        digits = len(str(max_row_num))

        y = area.y
        for i in range(num_rows):
            if y >= area.bottom:
                break
            row_num = str(i + state.rows_offset + 1)
            buf.set_span(area.x, y, Span(row_num, ROW_NUMBER_STYLE), digits)
            y += 1

        rule_x = area.x + digits + self.GUTTER_PADDING
        state.border_anchor = BorderAnchor(gutter_right_x=rule_x, first_record_y=area.y)

        return rule_x + self.GUTTER_RULE + self.GUTTER_GAP

    def _render_row(
        self,
        buf: CellBuffer,
        state: LayoutState,
        column_widths: list[int],
        area: Rect,
        x: int,
        y: int,
        row: Sequence[str],
        row_index: int | None,
    ) -> None:
        is_header = row_index is None
        remaining = max(0, area.right - x)
        search = state.search
        more_cols = False
        rendered = 0

        for col_index, (value, width) in enumerate(zip(row, column_widths)):
            if col_index < state.cols_offset:
                continue
            if remaining < width:
                more_cols = True
                break

            style = HEADER_STYLE if is_header else CELL_STYLE
            if isinstance(search, SearchActive) and contains_target(value, search.target):
                match_style = MATCH_STYLE
                current = search.current_match
                if current is not None and current.matches(row_index, col_index):
                    match_style = CURRENT_MATCH_STYLE
                pieces = split_highlight(value, search.target, style, match_style)
                buf.set_spans(x, y, [Span(text, s) for text, s in pieces], width)
            else:
                buf.set_span(x, y, Span(value, style), width)

            x += width
            remaining -= width
            rendered += 1

        state.num_cols_rendered = rendered
        state.more_cols_to_show = more_cols

    def _render_status(self, buf: CellBuffer, area: Rect, state: LayoutState) -> None:
        # the separator above is drawn with the other borders
        content = render_status(state)
        y = max(area.y, area.bottom - 1)
        buf.blank(area.x, y, area.width)
        buf.set_span(area.x, y, Span(content, STATUS_STYLE), area.width)

    def _render_other_borders(self, buf: CellBuffer, area: Rect, rows_area: Rect, state: LayoutState) -> None:
        anchor = state.border_anchor
        if anchor is None:
            return

        rule_x = anchor.gutter_right_x
        y_first = anchor.first_record_y
        buf.vline(rule_x, y_first, rows_area.height, BORDER_STYLE)
        if y_first - 1 < area.bottom - 1:
            buf.set_symbol(rule_x, y_first - 1, HORIZONTAL_DOWN)

        y_separator = y_first + rows_area.height
        if y_separator < area.bottom - 1:
            buf.hline(area.x, y_separator, area.width, BORDER_STYLE)
            buf.set_symbol(rule_x, y_separator, HORIZONTAL_UP)


def render(
    area: Rect,
    buf: CellBuffer,
    state: LayoutState,
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    TableRenderer(header, rows).render(area, buf, state)
