import curses
import logging
import time

from cell_buffer import CellBuffer
from config_paths import FIND_BATCH_SIZE_DEFAULT, POLL_TIMEOUT_MS_DEFAULT
from finder import Finder
from input_handler import InputHandler
from layout_state import LayoutState
from navigation import NavigationController
from screen_layout import ScreenLayout
from screen_painter import CursesPainter
from search_snapshot import snapshot_from_finder
from table_renderer import TableRenderer, render

logger = logging.getLogger(__name__)


class Orchestrator:
    NAV_CONTROLS = {
        "scroll_down",
        "scroll_up",
        "scroll_right",
        "scroll_left",
        "page_down",
        "page_up",
        "page_right",
        "page_left",
        "top",
        "bottom",
    }

    def __init__(self, stdscr, source, config=None, debug=False):
        self.stdscr = stdscr
        self.config = config or {}
        self.debug = debug
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self.stdscr.timeout(self.config.get("POLL_TIMEOUT_MS", POLL_TIMEOUT_MS_DEFAULT))

        self.source = source
        self.state = LayoutState(
            source_name=source.source_name,
            total_cols=len(source.header),
        )
        self.input = InputHandler()
        self.nav = NavigationController(self.state, source)
        self.painter = CursesPainter()

        # ---- search ----
        self.finder = None
        self.follow_first_match = False

        self.last_elapsed_ms = None
        self.exit_requested = False

    # ---------------- controls ----------------

    def handle_control(self, control):
        kind = control.kind
        if kind == "quit":
            self.exit_requested = True
        elif kind in self.NAV_CONTROLS:
            getattr(self.nav, kind)()
        elif kind == "goto_line":
            self.nav.goto_line(control.value)
        elif kind == "find":
            self.start_find(control.value)
        elif kind == "find_next":
            if self.finder is not None:
                self.nav.jump_to_record(self.finder.next())
        elif kind == "find_prev":
            if self.finder is not None:
                self.nav.jump_to_record(self.finder.prev())
        elif kind == "reset":
            self.stop_find()

    def start_find(self, target):
        self.stop_find()
        batch_size = self.config.get("FIND_BATCH_SIZE", FIND_BATCH_SIZE_DEFAULT)
        self.finder = Finder(self.source, target, batch_size=batch_size)
        self.follow_first_match = True
        logger.debug("find started for %r", target)

    def stop_find(self):
        if self.finder is not None:
            self.finder.stop()
        self.finder = None
        self.follow_first_match = False

    # ---------------- frame ----------------

    def _sync_state(self, num_rows):
        state = self.state
        state.total_row_count = self.source.total_rows()
        state.total_cols = len(self.source.header)
        self.nav.set_viewport_rows(num_rows)

        if self.follow_first_match and self.finder is not None and self.finder.count() > 0:
            self.nav.jump_to_record(self.finder.next())
            self.follow_first_match = False

        state.search = snapshot_from_finder(self.finder)

        buffered = self.input.buffer_state()
        if buffered is None:
            state.reset_buffer()
        else:
            state.set_buffer(*buffered)

        if self.debug:
            state.elapsed_ms = self.last_elapsed_ms
            state.debug_text = f"loaded {self.source.loaded_rows()} rows"

    def build_frame(self, area):
        buf = CellBuffer(area)
        num_rows = max(0, area.height - TableRenderer.HEADER_HEIGHT - TableRenderer.STATUS_HEIGHT)
        self._sync_state(num_rows)

        rows = self.source.get_rows(self.state.rows_offset, num_rows)
        start = time.perf_counter()
        render(buf.area, buf, self.state, self.source.header, rows)
        self.last_elapsed_ms = round((time.perf_counter() - start) * 1000, 3)
        return buf

    def redraw(self):
        layout = ScreenLayout(self.stdscr)
        buf = self.build_frame(layout.table_area)
        self.painter.paint(self.stdscr, buf)

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self.stdscr.getch()
            if ch == 3:  # Ctrl+C
                break

            self.handle_control(self.input.handle_key(ch))
            if self.exit_requested:
                break

            self.redraw()

        self.stop_find()
