from dataclasses import dataclass


@dataclass(frozen=True)
class FoundRecord:
    row_index: int
    column_indices: frozenset[int]

    def first_column(self) -> int | None:
        return min(self.column_indices) if self.column_indices else None

    def matches(self, row_index: int | None, col_index: int) -> bool:
        return row_index == self.row_index and col_index in self.column_indices


@dataclass(frozen=True)
class SearchInactive:
    pass


@dataclass(frozen=True)
class SearchActive:
    """Copy of the finder's progress taken once at the start of a frame."""

    is_complete: bool
    total_matches: int
    cursor_index: int | None
    target: str
    current_match: FoundRecord | None = None

    @classmethod
    def from_finder(cls, finder) -> "SearchActive":
        current = finder.current()
        if current is not None and not isinstance(current, FoundRecord):
            current = FoundRecord(current.row_index, frozenset(current.column_indices))
        return cls(
            is_complete=bool(finder.done()),
            total_matches=int(finder.count()),
            cursor_index=finder.cursor(),
            target=str(finder.target()),
            current_match=current,
        )

    def status_fragment(self) -> str:
        if self.total_matches == 0:
            body = "Not found" if self.is_complete else "Finding..."
        else:
            cursor = "-" if self.cursor_index is None else str(self.cursor_index + 1)
            plus = "" if self.is_complete else "+"
            body = f"{cursor}/{self.total_matches}{plus}"
        return f'["{self.target}": {body}]'


SearchSnapshot = SearchInactive | SearchActive


def snapshot_from_finder(finder) -> SearchSnapshot:
    if finder is None:
        return SearchInactive()
    return SearchActive.from_finder(finder)
