import pytest

from padron.scraper.date_utils import MONTH_ABBREVIATIONS, format_birth_date


@pytest.mark.parametrize(
    "month, abbrev",
    [
        ("01", "ENE"),
        ("02", "FEB"),
        ("03", "MAR"),
        ("04", "ABR"),
        ("05", "MAY"),
        ("06", "JUN"),
        ("07", "JUL"),
        ("08", "AGO"),
        ("09", "SEP"),
        ("10", "OCT"),
        ("11", "NOV"),
        ("12", "DIC"),
    ],
)
def test_format_birth_date_maps_every_month(month: str, abbrev: str) -> None:
    assert format_birth_date(f"15/{month}/1987") == f"15-{abbrev}-1987"


def test_format_birth_date_example() -> None:
    assert format_birth_date("05/06/2001") == "05-JUN-2001"
    assert len(MONTH_ABBREVIATIONS) == 12


def test_format_birth_date_is_idempotent() -> None:
    once = format_birth_date("01/05/1990")
    assert once == "01-MAY-1990"
    assert format_birth_date(once) == once


@pytest.mark.parametrize("value", ["2024", "1/2/3/4", "01-05-1990", "01/05"])
def test_malformed_dates_pass_through(value: str) -> None:
    assert format_birth_date(value) == value


def test_unknown_month_is_kept_literal() -> None:
    assert format_birth_date("01/13/1990") == "01-13-1990"


def test_empty_date() -> None:
    assert format_birth_date("") == ""
    assert format_birth_date(None) == ""
