from __future__ import annotations

"""Selectors and label tables for the voter verification form."""

from dataclasses import dataclass
from typing import Tuple

GENERAL = "general"
RESIDENCE = "residence"
VOTING_CENTER = "voting_center"


@dataclass(frozen=True)
class PadronSelectors:
    """DOM hooks for https://verificate.votopanama.net/.

    The form has a single text input (``#cedula``) and a submit button. Each
    result section is rendered as a Bootstrap card whose header names the
    section and whose body holds one ``<p>`` per ``Label: value`` pair.
    """

    input_selector: str = "#cedula"
    submit_selector: str = 'button[type="submit"]'
    card_selector: str = ".card"
    card_header_selector: str = ".card-header"
    card_body_selector: str = ".card-body"
    paragraph_selector: str = "p"


# Header substring -> section kind. First match wins.
SECTION_HEADERS: Tuple[Tuple[str, str], ...] = (
    ("Datos Generales", GENERAL),
    ("Residencia Electoral", RESIDENCE),
    ("Centro de Votacion", VOTING_CENTER),
    ("Centro de Votación", VOTING_CENTER),
)

# Section kind -> (paragraph label prefix, record field) pairs.
FIELD_LABELS: dict[str, Tuple[Tuple[str, str], ...]] = {
    GENERAL: (
        ("Nombre:", "nombre"),
        ("Cedula:", "cedula"),
        ("Cédula:", "cedula"),
        ("F. Nacimiento:", "fecha_nacimiento"),
        ("Edad:", "edad"),
        ("Sexo:", "sexo"),
    ),
    RESIDENCE: (
        ("Provincia:", "provincia"),
        ("Distrito:", "distrito"),
        ("Corregimiento:", "corregimiento"),
    ),
    VOTING_CENTER: (
        ("Centro de Votacion:", "centro_votacion"),
        ("Centro de Votación:", "centro_votacion"),
        ("Mesa #:", "mesa"),
    ),
}


PADRON_SELECTORS = PadronSelectors()

__all__ = [
    "FIELD_LABELS",
    "GENERAL",
    "PADRON_SELECTORS",
    "PadronSelectors",
    "RESIDENCE",
    "SECTION_HEADERS",
    "VOTING_CENTER",
]
