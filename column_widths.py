from typing import Sequence

COLUMN_PADDING = 4


def compute_column_widths(header: Sequence[str], rows: Sequence[Sequence[str]]) -> list[int]:
    """Width of each header column over the rows currently on screen.

    Only the visible window is scanned, so a column can grow or shrink as
    rows scroll in and out of view.
    """
    widths = [len(name) for name in header]
    ncols = len(widths)
    for row in rows:
        for i, value in enumerate(row[:ncols]):
            value_len = len(value)
            if widths[i] < value_len:
                widths[i] = value_len
    return [w + COLUMN_PADDING for w in widths]
