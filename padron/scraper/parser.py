"""HTML parsing for the result cards of the verification page."""
from __future__ import annotations

from typing import Iterable, Mapping, Optional, Tuple

from bs4 import BeautifulSoup

from .records import FIELD_NAMES
from .selectors_padron import FIELD_LABELS, PADRON_SELECTORS, SECTION_HEADERS, PadronSelectors


def _clean_text(value: str) -> str:
    return " ".join(value.split())


def classify_header(
    header: str,
    section_headers: Iterable[Tuple[str, str]] = SECTION_HEADERS,
) -> Optional[str]:
    """Return the section kind whose marker appears in ``header``, if any."""

    for marker, kind in section_headers:
        if marker in header:
            return kind
    return None


def classify_paragraph(
    text: str,
    labels: Iterable[Tuple[str, str]],
) -> Optional[Tuple[str, str]]:
    """Return ``(field, value)`` for a ``Label: value`` paragraph, or ``None``."""

    for prefix, field in labels:
        if text.startswith(prefix):
            return field, text[len(prefix):].strip()
    return None


def parse_result_cards(
    cards_html: Iterable[str],
    *,
    selectors: PadronSelectors = PADRON_SELECTORS,
    section_headers: Iterable[Tuple[str, str]] = SECTION_HEADERS,
    field_labels: Mapping[str, Iterable[Tuple[str, str]]] = FIELD_LABELS,
) -> dict[str, str]:
    """Collect the raw field values from the outer HTML of each result card.

    Unknown sections and unknown labels are ignored; cards without a body are
    skipped. Fields that never show up stay as empty strings.
    """

    raw = {name: "" for name in FIELD_NAMES}
    section_headers = tuple(section_headers)

    for card_html in cards_html:
        soup = BeautifulSoup(card_html or "", "html5lib")
        header_el = soup.select_one(selectors.card_header_selector)
        body_el = soup.select_one(selectors.card_body_selector)
        if body_el is None:
            continue

        kind = classify_header(_clean_text(header_el.get_text()) if header_el else "", section_headers)
        if kind is None:
            continue

        labels = tuple(field_labels.get(kind, ()))
        for paragraph in body_el.select(selectors.paragraph_selector):
            match = classify_paragraph(_clean_text(paragraph.get_text()), labels)
            if match is None:
                continue
            field, value = match
            raw[field] = value

    return raw


__all__ = ["classify_header", "classify_paragraph", "parse_result_cards"]
