"""Record shapes written to the results CSV."""
from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Mapping

from . import config
from .date_utils import format_birth_date

# Field name -> CSV column title, in output order.
CSV_COLUMNS: tuple[tuple[str, str], ...] = (
    ("cedula", "CEDULA"),
    ("nombre", "NOMBRE"),
    ("fecha_nacimiento", "FECHA_NACIMIENTO"),
    ("edad", "EDAD"),
    ("sexo", "SEXO"),
    ("provincia", "PROVINCIA"),
    ("distrito", "DISTRITO"),
    ("corregimiento", "CORREGIMIENTO"),
    ("centro_votacion", "CENTRO_VOTACION"),
    ("mesa", "MESA"),
)

FIELD_NAMES: tuple[str, ...] = tuple(name for name, _ in CSV_COLUMNS)
CSV_HEADER: tuple[str, ...] = tuple(title for _, title in CSV_COLUMNS)


@dataclass(frozen=True)
class NormalizedRecord:
    """One lookup result. Every field is a string; missing values are ``""``."""

    cedula: str
    nombre: str = ""
    fecha_nacimiento: str = ""
    edad: str = ""
    sexo: str = ""
    provincia: str = ""
    distrito: str = ""
    corregimiento: str = ""
    centro_votacion: str = ""
    mesa: str = ""

    @property
    def is_failure(self) -> bool:
        return self.nombre == config.FAILURE_NAME

    def as_row(self) -> list[str]:
        return list(astuple(self))


def failure_record(identifier: str) -> NormalizedRecord:
    """Placeholder row for an identifier whose lookup failed."""

    return NormalizedRecord(cedula=identifier, nombre=config.FAILURE_NAME)


def normalize_record(raw: Mapping[str, str], identifier: str) -> NormalizedRecord:
    """Build a :class:`NormalizedRecord` from the fields scraped off the result cards.

    The name is upper-cased and the birth date re-tokenised; everything else
    is copied verbatim. When the page did not show an identifier the
    requested one is used.
    """

    def _get(name: str) -> str:
        return (raw.get(name) or "").strip()

    return NormalizedRecord(
        cedula=_get("cedula") or identifier,
        nombre=_get("nombre").upper(),
        fecha_nacimiento=format_birth_date(_get("fecha_nacimiento")),
        edad=_get("edad"),
        sexo=_get("sexo"),
        provincia=_get("provincia"),
        distrito=_get("distrito"),
        corregimiento=_get("corregimiento"),
        centro_votacion=_get("centro_votacion"),
        mesa=_get("mesa"),
    )


__all__ = [
    "CSV_COLUMNS",
    "CSV_HEADER",
    "FIELD_NAMES",
    "NormalizedRecord",
    "failure_record",
    "normalize_record",
]
