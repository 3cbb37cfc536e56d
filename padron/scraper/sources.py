from __future__ import annotations

"""Identifier sources for a lookup run.

Identifiers come from a plain-text file with one cedula per line. When the
file cannot be read, or holds nothing but blank lines, the inline
``config.DEFAULT_IDENTIFIERS`` list is used instead.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from . import config
from .logging_utils import _scraper_event
from .utils import log_line


def clean_identifiers(lines: Iterable[str]) -> List[str]:
    """Trim every token and drop the blank ones, keeping order."""

    cleaned: List[str] = []
    for line in lines:
        token = (line or "").strip()
        if token:
            cleaned.append(token)
    return cleaned


def read_identifiers_file(path: Path) -> List[str]:
    """Return the identifiers listed in ``path``.

    Raises ``OSError`` when the file is missing or unreadable.
    """

    text = Path(path).read_text(encoding="utf-8-sig")
    return clean_identifiers(text.splitlines())


def load_identifiers(
    path: Optional[Path] = None,
    *,
    default: Sequence[str] = config.DEFAULT_IDENTIFIERS,
) -> List[str]:
    """Load identifiers from ``path``, falling back to ``default``."""

    path = Path(path) if path is not None else config.IDENTIFIERS_FILE

    try:
        identifiers = read_identifiers_file(path)
    except OSError as exc:
        log_line(f"[SOURCES][WARN] Could not read identifiers file {str(path)!r}: {exc}; using inline list.")
        _scraper_event("state", phase="sources", kind="fallback", reason="unreadable", path=str(path))
        return clean_identifiers(default)

    if not identifiers:
        log_line(f"[SOURCES][WARN] Identifiers file {str(path)!r} is empty; using inline list.")
        _scraper_event("state", phase="sources", kind="fallback", reason="empty", path=str(path))
        return clean_identifiers(default)

    log_line(f"[SOURCES] Loaded {len(identifiers)} identifiers from {path}")
    return identifiers


__all__ = ["clean_identifiers", "load_identifiers", "read_identifiers_file"]
