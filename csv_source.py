import logging
import os
import threading

import pandas as pd

logger = logging.getLogger(__name__)


class CsvSource:
    """Rows of a CSV file, loaded in chunks on a background thread.

    Every value is kept as text. ``total_rows()`` stays ``None`` until the
    whole file has been read.
    """

    DEFAULT_CHUNK_SIZE = 10000

    def __init__(self, path: str, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if not os.path.exists(path):
            raise FileNotFoundError(path)
        self.path = path
        self.chunk_size = max(1, int(chunk_size))
        self.source_name = os.path.basename(path)
        self.error: Exception | None = None

        self._rows: list[list[str]] = []
        self._done = False
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None

        self.header = self._read_header()
        if not self.header:
            self._done = True

    def _read_header(self) -> list[str]:
        if os.path.getsize(self.path) == 0:
            return []
        try:
            df = pd.read_csv(self.path, nrows=0, dtype=str)
        except pd.errors.EmptyDataError:
            return []
        return [str(c) for c in df.columns]

    # ---------- loading ----------
    def start(self):
        if self._done or self._thread is not None:
            return
        self._thread = threading.Thread(target=self._load, daemon=True)
        self._thread.start()

    def wait(self, timeout=None):
        if self._thread is not None:
            self._thread.join(timeout)

    def _load(self):
        try:
            with pd.read_csv(
                self.path,
                dtype=str,
                keep_default_na=False,
                index_col=False,
                chunksize=self.chunk_size,
            ) as reader:
                for chunk in reader:
                    rows = chunk.fillna("").astype(str).values.tolist()
                    with self._lock:
                        self._rows.extend(rows)
                    logger.debug("loaded %d rows from %s", len(self._rows), self.path)
        except Exception as exc:
            logger.exception("failed to load %s", self.path)
            self.error = exc
        finally:
            with self._lock:
                self._done = True

    # ---------- accessors ----------
    def is_done(self) -> bool:
        with self._lock:
            return self._done

    def loaded_rows(self) -> int:
        with self._lock:
            return len(self._rows)

    def total_rows(self) -> int | None:
        with self._lock:
            return len(self._rows) if self._done else None

    def get_rows(self, offset: int, n: int) -> list[list[str]]:
        rows, _ = self.rows_from(offset, n)
        return rows

    def rows_from(self, offset: int, n: int) -> tuple[list[list[str]], bool]:
        offset = max(0, offset)
        with self._lock:
            return self._rows[offset : offset + max(0, n)], self._done
