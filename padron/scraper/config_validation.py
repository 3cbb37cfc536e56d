from __future__ import annotations

from typing import Literal
from urllib.parse import urlparse

from . import config
from .logging_utils import _scraper_event
from .utils import log_line

Entrypoint = Literal["cli", "healthcheck", "tests"]


def _raise_config_error(message: str, *, entrypoint: Entrypoint, error: str) -> None:
    _scraper_event(
        "error",
        phase="config",
        context="runtime_validation",
        error=error,
        entrypoint=entrypoint,
    )
    log_line(f"[CONFIG] {message} (entrypoint={entrypoint})")
    raise ValueError(message)


def validate_runtime_config(entrypoint: Entrypoint) -> None:
    """Validate runtime configuration for the given entrypoint.

    Raises ``ValueError`` when a blocking misconfiguration is detected.
    """

    timeout_fields = [
        ("NAV_TIMEOUT_SECONDS", config.NAV_TIMEOUT_SECONDS),
        ("INPUT_TIMEOUT_SECONDS", config.INPUT_TIMEOUT_SECONDS),
        ("RESULTS_TIMEOUT_SECONDS", config.RESULTS_TIMEOUT_SECONDS),
    ]

    for field_name, value in timeout_fields:
        if value <= 0:
            _raise_config_error(
                f"{field_name} must be greater than zero.",
                entrypoint=entrypoint,
                error="invalid_timeout",
            )

    if config.PER_RECORD_DELAY_SECONDS < 0:
        _raise_config_error(
            "PER_RECORD_DELAY_SECONDS must be non-negative.",
            entrypoint=entrypoint,
            error="invalid_delay",
        )

    parsed = urlparse(config.QUERY_URL or "")
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        _raise_config_error(
            f"QUERY_URL must be an absolute http(s) URL, got {config.QUERY_URL!r}.",
            entrypoint=entrypoint,
            error="invalid_query_url",
        )


__all__ = ["validate_runtime_config", "Entrypoint"]
