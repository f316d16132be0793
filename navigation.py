class NavigationController:
    def __init__(self, state, source):
        self.state = state
        self.source = source
        self.num_rows = 0  # data rows visible in the last frame

    def set_viewport_rows(self, num_rows):
        self.num_rows = max(0, num_rows)

    def _last_row(self):
        total = self.source.total_rows()
        if total is None:
            total = self.source.loaded_rows()
        return max(0, total - 1)

    def _set_rows_offset(self, offset):
        self.state.set_rows_offset(min(max(0, offset), self._last_row()))

    # ---------- rows ----------
    def scroll_down(self):
        self._set_rows_offset(self.state.rows_offset + 1)

    def scroll_up(self):
        self._set_rows_offset(self.state.rows_offset - 1)

    def page_down(self):
        self._set_rows_offset(self.state.rows_offset + max(1, self.num_rows))

    def page_up(self):
        self._set_rows_offset(self.state.rows_offset - max(1, self.num_rows))

    def top(self):
        self._set_rows_offset(0)

    def bottom(self):
        self._set_rows_offset(self._last_row() + 1 - max(1, self.num_rows))

    def goto_line(self, line):
        # lines are 1-based on screen
        self._set_rows_offset(line - 1)

    # ---------- columns ----------
    def scroll_right(self):
        if self.state.more_cols_to_show:
            self.state.set_cols_offset(self.state.cols_offset + 1)

    def scroll_left(self):
        self.state.set_cols_offset(self.state.cols_offset - 1)

    def page_right(self):
        if self.state.more_cols_to_show:
            step = max(1, self.state.num_cols_rendered)
            self.state.set_cols_offset(self.state.cols_offset + step)

    def page_left(self):
        step = max(1, self.state.num_cols_rendered)
        self.state.set_cols_offset(self.state.cols_offset - step)

    # ---------- search ----------
    def jump_to_record(self, record):
        if record is None:
            return
        row = record.row_index
        if not (self.state.rows_offset <= row < self.state.rows_offset + self.num_rows):
            self._set_rows_offset(row)

        col = record.first_column()
        if col is None:
            return
        first = self.state.cols_offset
        if col < first or col >= first + self.state.num_cols_rendered:
            self.state.set_cols_offset(col)
