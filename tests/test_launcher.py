from __future__ import annotations

import pytest

from padron.scraper import config, launcher
from padron.scraper.launcher import (
    BASE_ARGS,
    MINIMAL_ARGS,
    EngineLauncher,
    LaunchConfiguration,
    LaunchExhaustedError,
)


class FakeBrowserType:
    def __init__(self, failing_labels: set[str], configurations) -> None:
        self.by_path = {c.executable_path: c.label for c in configurations}
        self.by_args = {tuple(c.launch_args()): c.label for c in configurations if not c.executable_path}
        self.failing_labels = failing_labels
        self.attempted: list[str] = []
        self.kwargs: list[dict] = []

    def launch(self, **kwargs):
        path = kwargs.get("executable_path")
        label = self.by_path.get(path) if path else self.by_args[tuple(kwargs["args"])]
        self.attempted.append(label)
        self.kwargs.append(kwargs)
        if label in self.failing_labels:
            raise RuntimeError(f"{label} could not start")
        return f"browser-{label}"


CANDIDATES = (
    LaunchConfiguration("A", executable_path="/opt/a/chrome"),
    LaunchConfiguration("B", executable_path="/opt/b/chrome"),
    LaunchConfiguration("C", base_args=False),
)


def test_launch_stops_at_first_success() -> None:
    browser_type = FakeBrowserType({"A"}, CANDIDATES)

    browser = EngineLauncher(browser_type, CANDIDATES, headless=True).launch()

    assert browser == "browser-B"
    assert browser_type.attempted == ["A", "B"]


def test_launch_raises_only_when_all_fail(monkeypatch: pytest.MonkeyPatch) -> None:
    messages: list[str] = []
    monkeypatch.setattr(launcher, "log_line", lambda msg: messages.append(msg))
    candidates = CANDIDATES[:2]
    browser_type = FakeBrowserType({"A", "B"}, candidates)

    with pytest.raises(LaunchExhaustedError) as excinfo:
        EngineLauncher(browser_type, candidates, headless=True).launch()

    assert browser_type.attempted == ["A", "B"]
    assert excinfo.value.attempts == 2
    assert str(excinfo.value.last_error) == "B could not start"
    assert excinfo.value.__cause__ is excinfo.value.last_error
    failed_lines = [m for m in messages if "failed" in m]
    assert len(failed_lines) == 2
    assert "'A'" in failed_lines[0] and "'B'" in failed_lines[1]


def test_empty_candidate_list_is_exhausted() -> None:
    with pytest.raises(LaunchExhaustedError):
        EngineLauncher(FakeBrowserType(set(), ()), (), headless=True).launch()


def test_launch_kwargs_merge_baseline_flags() -> None:
    explicit = LaunchConfiguration("x", executable_path="/usr/bin/chrome", extra_args=("--lang=es-PA", "--no-sandbox"))
    minimal = LaunchConfiguration("m", base_args=False)

    kwargs = explicit.launch_kwargs(headless=True)

    assert kwargs["executable_path"] == "/usr/bin/chrome"
    assert kwargs["headless"] is True
    assert kwargs["args"][: len(BASE_ARGS)] == list(BASE_ARGS)
    assert kwargs["args"].count("--no-sandbox") == 1
    assert kwargs["args"][-1] == "--lang=es-PA"
    assert "executable_path" not in minimal.launch_kwargs(headless=False)
    assert minimal.launch_args() == list(MINIMAL_ARGS)


def test_default_configurations_order(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "BROWSER_EXECUTABLE", "")
    labels = [c.label for c in launcher.default_launch_configurations()]
    assert labels == ["chromium-browser", "google-chrome", "chrome", "bundled", "minimal"]

    monkeypatch.setattr(config, "BROWSER_EXECUTABLE", "/snap/bin/chromium")
    first = launcher.default_launch_configurations()[0]
    assert first.executable_path == "/snap/bin/chromium"
