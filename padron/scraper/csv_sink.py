"""Incremental CSV writer for lookup results."""
from __future__ import annotations

import csv
import os
from pathlib import Path
from typing import IO, Optional

from .records import CSV_HEADER, NormalizedRecord
from .utils import log_line


class CsvRecordSink:
    """Write one :class:`NormalizedRecord` per row, durably, in call order.

    The file is truncated and the header written on the first :meth:`write`,
    so a run that never produces a row leaves an earlier run's output alone.
    Each :meth:`write` flushes and fsyncs before returning so a crash never
    loses a row that was already reported as written.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.rows_written = 0
        self._opened = False
        self._handle: Optional[IO[str]] = None
        self._writer = None

    def open(self) -> "CsvRecordSink":
        self._opened = True
        self.rows_written = 0
        return self

    def write(self, record: NormalizedRecord) -> None:
        if not self._opened:
            raise RuntimeError(f"CSV sink for {self.path} is not open")
        if self._handle is None or self._writer is None:
            self._start_file()
        self._writer.writerow(record.as_row())
        self._sync()
        self.rows_written += 1

    def close(self) -> None:
        self._opened = False
        if self._handle is None:
            return
        try:
            self._handle.close()
        finally:
            self._handle = None
            self._writer = None

    def _start_file(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self.path.open("w", encoding="utf-8", newline="")
        self._writer = csv.writer(self._handle)
        self._writer.writerow(CSV_HEADER)
        self._sync()
        log_line(f"[CSV] Writing results to {self.path}")

    def _sync(self) -> None:
        self._handle.flush()
        os.fsync(self._handle.fileno())

    def __enter__(self) -> "CsvRecordSink":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["CsvRecordSink"]
