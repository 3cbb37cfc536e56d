from pathlib import Path

import pytest

from padron.scraper import sources


def test_load_identifiers_trims_and_drops_blanks(tmp_path: Path) -> None:
    path = tmp_path / "cedulas.txt"
    path.write_text(" 8-930-2006 \n\n   \n4-123-456\r\n", encoding="utf-8")

    assert sources.load_identifiers(path) == ["8-930-2006", "4-123-456"]


def test_missing_file_falls_back_to_inline_list(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    messages: list[str] = []
    monkeypatch.setattr(sources, "log_line", lambda msg: messages.append(msg))

    result = sources.load_identifiers(tmp_path / "missing.txt", default=["1-1-1", " ", "2-2-2"])

    assert result == ["1-1-1", "2-2-2"]
    assert any("[SOURCES][WARN]" in m for m in messages)


def test_blank_file_falls_back_to_inline_list(tmp_path: Path) -> None:
    path = tmp_path / "cedulas.txt"
    path.write_text("\n \n", encoding="utf-8")

    assert sources.load_identifiers(path, default=["9-9-9"]) == ["9-9-9"]


def test_clean_identifiers() -> None:
    assert sources.clean_identifiers(["1-1-1", "", "  ", " 2-2-2"]) == ["1-1-1", "2-2-2"]
