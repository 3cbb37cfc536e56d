"""Sequential lookup of a list of cedulas against the verification form.

Workflow:

- Launch headless Chromium through :class:`launcher.EngineLauncher`.
- Open one page and reuse it for every identifier.
- For each identifier run :func:`extractor.extract_record`; a failed lookup
  becomes a placeholder row so every identifier yields exactly one CSV row.
- Hand each row to the sink before moving on, then pause for the fixed
  per-record delay.
- Close the browser and log a summary.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, ContextManager, Iterator, List, Optional, Protocol, Sequence

from playwright.sync_api import Browser, Page, sync_playwright

from . import config
from .extractor import ExtractionResult, extract_record
from .launcher import EngineLauncher
from .logging_utils import _scraper_event
from .records import NormalizedRecord, failure_record
from .telemetry import RunTelemetry
from .utils import log_line

EngineFactory = Callable[[], ContextManager[Browser]]
Extractor = Callable[[Page, str], ExtractionResult]


class RecordSink(Protocol):
    def write(self, record: NormalizedRecord) -> None: ...


@dataclass
class BatchTally:
    successes: int = 0
    failures: int = 0
    records: List[NormalizedRecord] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.successes + self.failures


@contextmanager
def playwright_engine(headless: Optional[bool] = None) -> Iterator[Browser]:
    """Yield a launched Chromium browser, closing it on every exit path."""

    with sync_playwright() as pw:
        browser = EngineLauncher(pw.chromium, headless=headless).launch()
        try:
            yield browser
        finally:
            try:
                browser.close()
            except Exception as exc:  # noqa: BLE001
                log_line(f"[RUN] Error while closing browser: {exc}")


class BatchRunner:
    """Look up identifiers one at a time and persist every outcome immediately."""

    def __init__(
        self,
        sink: RecordSink,
        *,
        engine_factory: Optional[EngineFactory] = None,
        extractor: Extractor = extract_record,
        delay_seconds: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
        telemetry: Optional[RunTelemetry] = None,
        output_location: Optional[str] = None,
    ) -> None:
        self.sink = sink
        self.engine_factory: EngineFactory = engine_factory or playwright_engine
        self.extractor = extractor
        self.delay_seconds = config.PER_RECORD_DELAY_SECONDS if delay_seconds is None else delay_seconds
        self.sleep = sleep
        self.telemetry = telemetry
        self.output_location = output_location or str(getattr(sink, "path", config.OUTPUT_CSV))

    def run(self, identifiers: Sequence[str]) -> BatchTally:
        """Process ``identifiers`` in order.

        ``launcher.LaunchExhaustedError`` propagates; per-record failures never do.
        """

        tally = BatchTally()
        total = len(identifiers)
        log_line("Starting lookup run...")
        log_line(f"Identifiers to process: {total}")

        with self.engine_factory() as browser:
            page = browser.new_page()
            for index, raw_identifier in enumerate(identifiers, start=1):
                identifier = (raw_identifier or "").strip()
                if not identifier:
                    continue

                log_line(f"[{index}/{total}] Processing {identifier}...")
                self._process_one(page, identifier, tally)

                if self.delay_seconds > 0:
                    self.sleep(self.delay_seconds)

        self._log_summary(tally)
        return tally

    def _process_one(self, page: Page, identifier: str, tally: BatchTally) -> None:
        result = self.extractor(page, identifier)

        if result.ok and result.record is not None:
            record = result.record
            tally.successes += 1
            status = "ok"
        else:
            record = failure_record(identifier)
            tally.failures += 1
            status = "failed"

        tally.records.append(record)
        self.sink.write(record)

        if status == "ok":
            log_line(f"Saved {identifier} to CSV")
        else:
            log_line(f"Saved failure row for {identifier} ({result.error_code or 'unknown'})")
        _scraper_event("record", identifier=identifier, status=status, error_code=result.error_code)
        if self.telemetry is not None:
            self.telemetry.add(identifier, status, result.error_code)

    def _log_summary(self, tally: BatchTally) -> None:
        log_line("=" * 50)
        log_line("FINAL SUMMARY:")
        log_line(f"Successful lookups: {tally.successes}")
        log_line(f"Failed lookups: {tally.failures}")
        log_line(f"Total rows: {tally.total}")
        log_line(f"CSV file saved: {self.output_location}")
        log_line("=" * 50)

        if self.telemetry is not None:
            try:
                path = self.telemetry.finalize(
                    {"output": self.output_location, "successes": tally.successes, "failures": tally.failures}
                )
                log_line(f"Run summary written to {path}")
            except OSError as exc:
                log_line(f"[RUN][WARN] Could not write run summary: {exc}")


__all__ = ["BatchRunner", "BatchTally", "RecordSink", "playwright_engine"]
