from __future__ import annotations

import csv
from contextlib import contextmanager
from pathlib import Path

import pytest

from padron import main as cli
from padron.scraper import config, utils
from padron.scraper.launcher import LaunchExhaustedError
from tests.test_batch_runner import FakeBrowser
from tests.test_extractor import FakePage, ana_lopez_cards


def _configure_temp_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "DATA_DIR", tmp_path)
    monkeypatch.setattr(config, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(config, "LOG_FILE", tmp_path / "logs" / "latest.log")
    monkeypatch.setattr(config, "RUNS_DIR", tmp_path / "runs")
    monkeypatch.setattr(config, "IDENTIFIERS_FILE", tmp_path / "cedulas.txt")
    monkeypatch.setattr(config, "OUTPUT_CSV", tmp_path / "resultados_cedulas.csv")
    monkeypatch.setattr(config, "RESULTS_TIMEOUT_SECONDS", 1)


def test_main_writes_csv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _configure_temp_paths(tmp_path, monkeypatch)
    (tmp_path / "cedulas.txt").write_text("1-1-1\n\n", encoding="utf-8")
    browser = FakeBrowser(FakePage({"1-1-1": ana_lopez_cards()}))

    @contextmanager
    def fake_engine(headless=None):  # noqa: ANN001
        yield browser

    monkeypatch.setattr(cli, "playwright_engine", fake_engine)

    exit_code = cli.main(["--delay", "0"])

    assert exit_code == 0
    with config.OUTPUT_CSV.open("r", encoding="utf-8", newline="") as handle:
        rows = list(csv.reader(handle))
    assert rows[0][0] == "CEDULA"
    assert rows[1][:3] == ["1-1-1", "ANA LOPEZ", "01-MAY-1990"]
    assert len(rows) == 2
    assert list((tmp_path / "runs").glob("run_*.json"))
    assert utils.get_current_log_path().parent == tmp_path / "logs"


def test_main_returns_nonzero_when_browser_cannot_launch(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _configure_temp_paths(tmp_path, monkeypatch)
    config.OUTPUT_CSV.write_text("CEDULA,NOMBRE\n8-1-1,PRIOR RUN ROW\n", encoding="utf-8")

    @contextmanager
    def failing_engine(headless=None):  # noqa: ANN001
        raise LaunchExhaustedError(5, RuntimeError("no chromium"))
        yield  # pragma: no cover

    monkeypatch.setattr(cli, "playwright_engine", failing_engine)

    assert cli.main(["--delay", "0"]) == 1
    # The previous run's output is left as it was.
    assert config.OUTPUT_CSV.read_text(encoding="utf-8") == "CEDULA,NOMBRE\n8-1-1,PRIOR RUN ROW\n"


def test_main_rejects_invalid_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _configure_temp_paths(tmp_path, monkeypatch)
    monkeypatch.setattr(config, "QUERY_URL", "ftp://example.com")

    assert cli.main(["--delay", "0"]) == 1
