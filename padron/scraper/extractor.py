"""Per-identifier query protocol against the verification form.

navigate -> wait for input -> clear + type -> submit -> wait for cards ->
parse -> normalize. Only the three bounded waits can fail a lookup outright;
missing sections in the response just leave fields empty.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from playwright.sync_api import Error as PWError, Page, TimeoutError as PWTimeout

from . import config
from .error_codes import ErrorCode
from .logging_utils import _scraper_event
from .parser import parse_result_cards
from .records import NormalizedRecord, normalize_record
from .selectors_padron import PADRON_SELECTORS, PadronSelectors
from .utils import log_line, short_error_message

_CLEAR_VALUE_JS = "el => { el.value = ''; }"
_CARDS_OUTER_HTML_JS = "els => els.map(el => el.outerHTML)"


@dataclass(frozen=True)
class StageTimeouts:
    navigation_seconds: float
    input_seconds: float
    results_seconds: float

    @classmethod
    def from_config(cls) -> "StageTimeouts":
        return cls(
            navigation_seconds=config.NAV_TIMEOUT_SECONDS,
            input_seconds=config.INPUT_TIMEOUT_SECONDS,
            results_seconds=config.RESULTS_TIMEOUT_SECONDS,
        )


class StageTimeoutError(Exception):
    def __init__(self, stage: str, error_code: str, message: str) -> None:
        super().__init__(message)
        self.stage = stage
        self.error_code = error_code


@dataclass(frozen=True)
class ExtractionResult:
    identifier: str
    record: Optional[NormalizedRecord] = None
    error_code: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.record is not None

    @classmethod
    def success(cls, identifier: str, record: NormalizedRecord) -> "ExtractionResult":
        return cls(identifier=identifier, record=record)

    @classmethod
    def failure(cls, identifier: str, error_code: str, message: str) -> "ExtractionResult":
        return cls(identifier=identifier, error_code=error_code, message=message)


def _ms(seconds: float) -> float:
    return seconds * 1000


def _bounded(stage: str, error_code: str, action) -> None:
    """Run a bounded Playwright wait, turning its timeout into ``StageTimeoutError``."""

    try:
        action()
    except PWTimeout as exc:
        raise StageTimeoutError(stage, error_code, short_error_message(exc)) from exc


def _submit_query(page: Page, identifier: str, *, selectors: PadronSelectors, timeouts: StageTimeouts) -> list[str]:
    _scraper_event("nav", step="goto", url=config.QUERY_URL, identifier=identifier)
    _bounded(
        "navigate",
        ErrorCode.NAV_TIMEOUT,
        lambda: page.goto(
            config.QUERY_URL,
            wait_until="networkidle",
            timeout=_ms(timeouts.navigation_seconds),
        ),
    )
    _bounded(
        "wait_for_input",
        ErrorCode.INPUT_TIMEOUT,
        lambda: page.wait_for_selector(selectors.input_selector, timeout=_ms(timeouts.input_seconds)),
    )

    page.click(selectors.input_selector)
    page.eval_on_selector(selectors.input_selector, _CLEAR_VALUE_JS)
    page.type(selectors.input_selector, identifier)
    page.click(selectors.submit_selector)

    _bounded(
        "wait_for_results",
        ErrorCode.NOT_FOUND,
        lambda: page.wait_for_selector(selectors.card_selector, timeout=_ms(timeouts.results_seconds)),
    )
    return list(page.eval_on_selector_all(selectors.card_selector, _CARDS_OUTER_HTML_JS) or [])


def extract_record(
    page: Page,
    identifier: str,
    *,
    selectors: PadronSelectors = PADRON_SELECTORS,
    timeouts: Optional[StageTimeouts] = None,
) -> ExtractionResult:
    """Look up ``identifier`` on the shared ``page``. Never raises."""

    timeouts = timeouts or StageTimeouts.from_config()
    log_line(f"Looking up cedula {identifier}")

    try:
        cards_html = _submit_query(page, identifier, selectors=selectors, timeouts=timeouts)
        raw = parse_result_cards(cards_html, selectors=selectors)
        record = normalize_record(raw, identifier)
    except StageTimeoutError as exc:
        log_line(f"[SCRAPER][ERROR][LOOKUP] {identifier}: {exc.stage} timed out ({exc.error_code}): {exc}")
        _scraper_event(
            "error",
            phase="lookup",
            step=exc.stage,
            error_code=exc.error_code,
            identifier=identifier,
            error=str(exc),
        )
        return ExtractionResult.failure(identifier, exc.error_code, str(exc))
    except PWError as exc:
        message = short_error_message(exc)
        log_line(f"[SCRAPER][ERROR][LOOKUP] {identifier}: browser error: {message}")
        _scraper_event("error", phase="lookup", error_code=ErrorCode.ENGINE, identifier=identifier, error=message)
        return ExtractionResult.failure(identifier, ErrorCode.ENGINE, message)
    except Exception as exc:  # noqa: BLE001
        message = short_error_message(exc)
        log_line(f"[SCRAPER][ERROR][LOOKUP] {identifier}: unexpected {type(exc).__name__}: {message}")
        _scraper_event("error", phase="lookup", error_code=ErrorCode.INTERNAL, identifier=identifier, error=message)
        return ExtractionResult.failure(identifier, ErrorCode.INTERNAL, message)

    log_line(f"Extracted data for {record.nombre or '(no name)'}")
    log_line(f"   Birth date: {record.fecha_nacimiento}")
    log_line(f"   Province: {record.provincia}")
    return ExtractionResult.success(identifier, record)


__all__ = [
    "ExtractionResult",
    "StageTimeoutError",
    "StageTimeouts",
    "extract_record",
]
