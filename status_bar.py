from input_overlay import OverlayEnabled
from search_snapshot import SearchActive


def format_elapsed(elapsed_ms) -> str:
    value = float(elapsed_ms)
    if value.is_integer():
        return str(int(value))
    return str(value)


def render_status(state):
    """
    Status line text for one frame. An enabled input overlay replaces
    everything else; otherwise: source, position, search, timing, debug.
    """
    overlay = state.overlay
    if isinstance(overlay, OverlayEnabled):
        text = overlay.status_text()
    else:
        total = "?" if state.total_row_count is None else str(state.total_row_count)
        text = (
            f"{state.source_name} [Row {state.rows_offset + 1}/{total}, "
            f"Col {state.cols_offset + 1}/{state.total_cols}]"
        )
        if isinstance(state.search, SearchActive):
            text += f" {state.search.status_fragment()}"
        if state.elapsed_ms is not None:
            text += f" [{format_elapsed(state.elapsed_ms)}ms]"
        if state.debug_text:
            text += f" (debug: {state.debug_text})"

    return text
