from __future__ import annotations

MONTH_ABBREVIATIONS: dict[str, str] = {
    "01": "ENE",
    "02": "FEB",
    "03": "MAR",
    "04": "ABR",
    "05": "MAY",
    "06": "JUN",
    "07": "JUL",
    "08": "AGO",
    "09": "SEP",
    "10": "OCT",
    "11": "NOV",
    "12": "DIC",
}


def format_birth_date(value: str | None) -> str:
    """Return ``DD/MM/YYYY`` re-tokenised as ``DD-MMM-YYYY``.

    The month goes through :data:`MONTH_ABBREVIATIONS`; an unknown month code
    is kept as-is. Anything that is not exactly three slash-separated parts is
    returned unchanged, which makes the function idempotent on its own output.
    """

    if not value:
        return ""

    parts = value.split("/")
    if len(parts) != 3:
        return value

    day, month, year = parts
    return f"{day}-{MONTH_ABBREVIATIONS.get(month, month)}-{year}"


__all__ = ["MONTH_ABBREVIATIONS", "format_birth_date"]
