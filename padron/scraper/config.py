"""Configuration constants for the padron lookup scraper."""
from __future__ import annotations

import os
from pathlib import Path

DATA_DIR: Path = Path(os.getenv("PADRON_DATA_DIR", "."))
LOG_DIR: Path = DATA_DIR / "logs"
LOG_FILE: Path = LOG_DIR / "latest.log"
RUNS_DIR: Path = DATA_DIR / "runs"

IDENTIFIERS_FILE: Path = Path(os.getenv("PADRON_IDENTIFIERS_FILE", str(DATA_DIR / "cedulas.txt")))
OUTPUT_CSV: Path = Path(os.getenv("PADRON_OUTPUT_CSV", str(DATA_DIR / "resultados_cedulas.csv")))

QUERY_URL: str = os.getenv("PADRON_QUERY_URL", "https://verificate.votopanama.net/")

# Used when the identifiers file is missing or holds no identifiers.
DEFAULT_IDENTIFIERS: tuple[str, ...] = (
    "8-930-2006",
    "8-625-6587",
)

FAILURE_NAME: str = "ERROR - NO ENCONTRADO"


def _parse_timeout_seconds(env_var: str, default: int, *, minimum: int = 1) -> int:
    """Parse a timeout value in seconds from the environment with bounds."""

    try:
        value = int(os.getenv(env_var, str(default)))
    except ValueError:
        return default
    return max(minimum, value)


# Playwright timeouts (seconds)
# page.goto until the network is idle.
NAV_TIMEOUT_SECONDS: int = _parse_timeout_seconds("PADRON_NAV_TIMEOUT_SECONDS", 30)
# Presence of the identifier input.
INPUT_TIMEOUT_SECONDS: int = _parse_timeout_seconds("PADRON_INPUT_TIMEOUT_SECONDS", 10)
# Presence of at least one result card after submit.
RESULTS_TIMEOUT_SECONDS: int = _parse_timeout_seconds("PADRON_RESULTS_TIMEOUT_SECONDS", 10)

# Pause after every identifier, success or failure.
PER_RECORD_DELAY_SECONDS: float = float(os.getenv("PADRON_PER_RECORD_DELAY", "2.0"))

HEADLESS: bool = os.getenv("PADRON_HEADLESS", "true").strip().lower() not in {"0", "false"}
# Optional explicit browser binary tried before the built-in candidates.
BROWSER_EXECUTABLE: str = os.getenv("PADRON_BROWSER_EXECUTABLE", "").strip()

HEALTHCHECK_TIMEOUT_SECONDS: float = float(os.getenv("PADRON_HEALTHCHECK_TIMEOUT", "10"))

COMMON_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "es-PA,es;q=0.9,en;q=0.8",
}
