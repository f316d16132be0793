import unittest

from cell_buffer import CellBuffer, Rect, Style
from layout_state import BorderAnchor, LayoutState
from search_snapshot import FoundRecord, SearchActive
from table_renderer import TableRenderer, render

HEADER = ["id", "name"]
ROWS = [["1", "alice"], ["2", "bob"]]


def _render(rows=ROWS, header=HEADER, width=40, height=10, state=None):
    state = state or LayoutState(source_name="data.csv", total_cols=len(header))
    buf = CellBuffer.empty(width, height)
    render(buf.area, buf, state, header, rows)
    return buf, state


class FrameLayoutTests(unittest.TestCase):
    def test_header_band_and_first_rows(self):
        buf, _ = _render()
        self.assertEqual(buf.row_text(0), "─" * 40)
        self.assertEqual(buf.row_text(1).rstrip(), "      id    name")
        self.assertEqual(buf.row_text(2), "───┬" + "─" * 36)
        self.assertEqual(buf.row_text(3).rstrip(), "1  │  1     alice")
        self.assertEqual(buf.row_text(4).rstrip(), "2  │  2     bob")

    def test_gutter_rule_spans_row_area_and_meets_status_separator(self):
        buf, _ = _render()
        for y in range(3, 8):
            self.assertEqual(buf.get(3, y).symbol, "│")
        self.assertEqual(buf.row_text(8), "───┴" + "─" * 36)

    def test_status_line_on_last_row(self):
        buf, _ = _render()
        self.assertEqual(buf.row_text(9).rstrip(), "data.csv [Row 1/?, Col 1/2]")
        self.assertEqual(buf.get(0, 9).style, Style(fg="gray"))

    def test_header_is_bold(self):
        buf, _ = _render()
        self.assertTrue(buf.get(6, 1).style.bold)
        self.assertFalse(buf.get(6, 3).style.bold)

    def test_border_anchor_recorded(self):
        _, state = _render()
        self.assertEqual(state.border_anchor, BorderAnchor(gutter_right_x=3, first_record_y=3))

    def test_draws_relative_to_area_origin(self):
        state = LayoutState(source_name="data.csv", total_cols=2)
        buf = CellBuffer.empty(45, 12)
        render(Rect(5, 2, 40, 10), buf, state, HEADER, ROWS)
        self.assertEqual(buf.row_text(0), " " * 45)
        self.assertEqual(buf.row_text(5)[5:].rstrip(), "1  │  1     alice")
        self.assertEqual(state.border_anchor, BorderAnchor(gutter_right_x=8, first_record_y=5))


class GutterTests(unittest.TestCase):
    def test_gutter_width_follows_highest_possible_row_number(self):
        state = LayoutState(source_name="data.csv", total_cols=2, rows_offset=98)
        buf, state = _render(state=state)
        # 98 + 2 + 1 = 101 -> three digits
        self.assertEqual(state.border_anchor.gutter_right_x, 5)
        self.assertEqual(buf.row_text(3)[:6], "99   │")
        self.assertEqual(buf.row_text(4)[:6], "100  │")

    def test_numbering_stops_at_bottom_of_row_area(self):
        rows = [[str(i), f"n{i}"] for i in range(5)]
        buf, _ = _render(rows=rows, height=6)
        # one data row fits: 3 header lines + 1 row + 2 status lines
        self.assertTrue(buf.row_text(3).startswith("1"))
        self.assertEqual(buf.row_text(4), "───┴" + "─" * 36)
        self.assertTrue(buf.row_text(5).startswith("data.csv"))


class ColumnFitTests(unittest.TestCase):
    def test_all_columns_fit(self):
        _, state = _render()
        self.assertEqual(state.num_cols_rendered, 2)
        self.assertFalse(state.more_cols_to_show)

    def test_column_that_does_not_fit_is_not_drawn_at_all(self):
        buf, state = _render(width=16)
        self.assertEqual(state.num_cols_rendered, 1)
        self.assertTrue(state.more_cols_to_show)
        self.assertEqual(buf.row_text(3).rstrip(), "1  │  1")
        self.assertEqual(buf.row_text(1).rstrip(), "      id")

    def test_painted_widths_never_exceed_available_space(self):
        for width in range(6, 30):
            buf, state = _render(width=width)
            painted = [6, 9][: state.num_cols_rendered]
            self.assertLessEqual(sum(painted), max(0, width - 6))
            self.assertEqual(state.more_cols_to_show, state.num_cols_rendered < 2)

    def test_cols_offset_skips_leading_columns(self):
        state = LayoutState(source_name="data.csv", total_cols=2, cols_offset=1)
        buf, state = _render(state=state)
        self.assertEqual(buf.row_text(1).rstrip(), "      name")
        self.assertEqual(buf.row_text(3).rstrip(), "1  │  alice")
        self.assertEqual(state.num_cols_rendered, 1)
        self.assertFalse(state.more_cols_to_show)

    def test_rows_longer_than_header_are_cut_to_header(self):
        buf, state = _render(rows=[["1", "alice", "extra"]])
        self.assertNotIn("extra", buf.row_text(3))
        self.assertEqual(state.num_cols_rendered, 2)

    def test_ragged_short_row(self):
        buf, state = _render(rows=[["1"]])
        self.assertEqual(buf.row_text(3).rstrip(), "1  │  1")
        self.assertEqual(state.num_cols_rendered, 1)
        self.assertFalse(state.more_cols_to_show)


class HighlightTests(unittest.TestCase):
    def _state(self, current):
        state = LayoutState(source_name="data.csv", total_cols=2)
        state.search = SearchActive(
            is_complete=True,
            total_matches=2,
            cursor_index=0,
            target="li",
            current_match=current,
        )
        return state

    def test_current_match_gets_background(self):
        rows = [["1", "alice"], ["2", "olivia"]]
        buf, _ = _render(rows=rows, state=self._state(FoundRecord(0, frozenset({1}))))
        self.assertEqual(buf.row_text(3).rstrip(), "1  │  1     alice")
        self.assertEqual(buf.get(12, 3).style, Style())
        self.assertEqual(buf.get(13, 3).style, Style(fg="red", bg="light_yellow"))
        self.assertEqual(buf.get(14, 3).style, Style(fg="red", bg="light_yellow"))
        self.assertEqual(buf.get(15, 3).style, Style())
        # same text on another row is a plain match
        self.assertEqual(buf.get(13, 4).style, Style(fg="red"))

    def test_match_outside_current_columns_has_no_background(self):
        rows = [["1", "alice"]]
        buf, _ = _render(rows=rows, state=self._state(FoundRecord(0, frozenset({0}))))
        self.assertEqual(buf.get(13, 3).style, Style(fg="red"))

    def test_every_occurrence_highlighted(self):
        state = self._state(None)
        state.search = SearchActive(True, 1, None, "an", None)
        buf, _ = _render(rows=[["1", "banana"]], state=state)
        styles = [buf.get(x, 3).style.fg for x in range(12, 18)]
        self.assertEqual(styles, [None, "red", "red", "red", "red", None])
        self.assertEqual(buf.row_text(3).rstrip(), "1  │  1     banana")

    def test_cells_without_target_are_plain(self):
        buf, _ = _render(state=self._state(None))
        self.assertEqual(buf.get(12, 4).style, Style())
        self.assertEqual(buf.get(6, 1).style, Style(bold=True))


class DegenerateInputTests(unittest.TestCase):
    def test_zero_area_is_a_no_op(self):
        state = LayoutState(source_name="data.csv", total_cols=2)
        buf = CellBuffer.empty(10, 10)
        before = buf.snapshot()
        render(Rect(0, 0, 0, 10), buf, state, HEADER, ROWS)
        render(Rect(0, 0, 10, 0), buf, state, HEADER, ROWS)
        self.assertEqual(buf.snapshot(), before)
        self.assertIsNone(state.border_anchor)
        self.assertEqual(state.num_cols_rendered, 0)

    def test_tiny_viewport_does_not_raise(self):
        for width in range(1, 8):
            for height in range(1, 7):
                _render(width=width, height=height)

    def test_status_row_stays_clean_on_short_viewports(self):
        for rows in (ROWS, []):
            for height in range(1, 5):
                buf, _ = _render(rows=rows, height=height)
                self.assertEqual(buf.row_text(height - 1).rstrip(), "data.csv [Row 1/?, Col 1/2]")
                self.assertNotIn("┬", buf.row_text(height - 1))

    def test_control_characters_do_not_reach_cells(self):
        buf, _ = _render(rows=[["1", "a\nb"], ["2", "a\tb"]])
        self.assertEqual(buf.row_text(3).rstrip(), "1  │  1     a b")
        self.assertEqual(buf.row_text(4).rstrip(), "2  │  2     a b")
        self.assertEqual(buf.row_text(1).rstrip(), "      id    name")

    def test_no_rows(self):
        buf, state = _render(rows=[])
        self.assertEqual(buf.row_text(1).rstrip(), "      id    name")
        self.assertEqual(state.num_cols_rendered, 2)

    def test_render_is_idempotent(self):
        buf1, _ = _render()
        buf2, _ = _render()
        self.assertEqual(buf1.snapshot(), buf2.snapshot())

        state = LayoutState(source_name="data.csv", total_cols=2)
        TableRenderer(HEADER, ROWS).render(buf1.area, buf1, state)
        self.assertEqual(buf1.snapshot(), buf2.snapshot())


if __name__ == "__main__":
    unittest.main()
