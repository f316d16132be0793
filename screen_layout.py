import curses

from cell_buffer import Rect


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # the table owns the whole screen: header band, rows, status band
        self.table_area = Rect(0, 0, self.W, self.H)

        # table must never own the cursor
        try:
            self.stdscr.leaveok(True)
        except curses.error:
            pass
