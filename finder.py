import logging
import threading
import time

import numpy as np
import pandas as pd

from search_snapshot import FoundRecord

logger = logging.getLogger(__name__)


class Finder:
    """Background substring search over a row source.

    The scan runs on its own thread and keeps going while the source is
    still loading. The read-only accessors (``done``, ``count``, ``cursor``,
    ``target``, ``current``) each take the lock, so every value is
    consistent at the moment it is read.
    """

    DEFAULT_BATCH_SIZE = 2000
    IDLE_SLEEP = 0.01

    def __init__(self, source, target: str, batch_size: int = DEFAULT_BATCH_SIZE):
        self.source = source
        self._target = target
        self.batch_size = max(1, int(batch_size))

        self._found: list[FoundRecord] = []
        self._cursor: int | None = None
        self._done = False
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._scan, daemon=True)
        self._thread.start()

    # ---------- scanning ----------
    def _scan(self):
        pos = 0
        try:
            while not self._stop.is_set():
                rows, source_done = self.source.rows_from(pos, self.batch_size)
                if rows:
                    records = self._match_batch(rows, pos)
                    with self._lock:
                        self._found.extend(records)
                    pos += len(rows)
                    continue
                if source_done:
                    break
                time.sleep(self.IDLE_SLEEP)
        except Exception:
            logger.exception("search for %r failed", self._target)
        finally:
            with self._lock:
                self._done = True
            logger.debug("search for %r finished with %d matches", self._target, len(self._found))

    def _match_batch(self, rows, offset: int) -> list[FoundRecord]:
        if not self._target:
            return []
        frame = pd.DataFrame(rows).fillna("").astype(str)
        hits = frame.apply(lambda col: col.str.contains(self._target, regex=False)).to_numpy(dtype=bool)
        records = []
        for rel in np.flatnonzero(hits.any(axis=1)):
            cols = frozenset(int(c) for c in np.flatnonzero(hits[rel]))
            records.append(FoundRecord(row_index=offset + int(rel), column_indices=cols))
        return records

    def stop(self):
        self._stop.set()

    def wait(self, timeout=None):
        self._thread.join(timeout)

    # ---------- accessors ----------
    def done(self) -> bool:
        with self._lock:
            return self._done

    def count(self) -> int:
        with self._lock:
            return len(self._found)

    def cursor(self) -> int | None:
        with self._lock:
            return self._cursor

    def target(self) -> str:
        return self._target

    def current(self) -> FoundRecord | None:
        with self._lock:
            if self._cursor is None:
                return None
            return self._found[self._cursor]

    # ---------- navigation ----------
    def next(self) -> FoundRecord | None:
        with self._lock:
            if not self._found:
                return None
            if self._cursor is None:
                self._cursor = 0
            else:
                self._cursor = min(self._cursor + 1, len(self._found) - 1)
            return self._found[self._cursor]

    def prev(self) -> FoundRecord | None:
        with self._lock:
            if not self._found:
                return None
            if self._cursor is None:
                self._cursor = 0
            else:
                self._cursor = max(self._cursor - 1, 0)
            return self._found[self._cursor]
