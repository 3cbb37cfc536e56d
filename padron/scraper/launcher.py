"""Headless Chromium launch with an ordered fallback cascade.

Where the browser binary lives, and whether the host allows sandboxing, varies
between containers and hosts. Rather than probing the environment, each
:class:`LaunchConfiguration` is tried in turn and the first one that starts
wins.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence, Tuple

from playwright.sync_api import Browser, BrowserType

from . import config
from .error_codes import ErrorCode
from .logging_utils import _scraper_event
from .utils import log_line, short_error_message

BASE_ARGS: Tuple[str, ...] = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
    "--single-process",
    "--disable-gpu",
    "--disable-web-security",
)

MINIMAL_ARGS: Tuple[str, ...] = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
)


@dataclass(frozen=True)
class LaunchConfiguration:
    label: str
    executable_path: Optional[str] = None
    base_args: bool = True
    extra_args: Tuple[str, ...] = ()

    def launch_args(self) -> list[str]:
        args = list(BASE_ARGS if self.base_args else MINIMAL_ARGS)
        for arg in self.extra_args:
            if arg not in args:
                args.append(arg)
        return args

    def launch_kwargs(self, *, headless: bool) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"headless": headless, "args": self.launch_args()}
        if self.executable_path:
            kwargs["executable_path"] = self.executable_path
        return kwargs


DEFAULT_LAUNCH_CONFIGURATIONS: Tuple[LaunchConfiguration, ...] = (
    LaunchConfiguration("chromium-browser", executable_path="/usr/bin/chromium-browser"),
    LaunchConfiguration("google-chrome", executable_path="/usr/bin/google-chrome"),
    LaunchConfiguration("chrome", executable_path="/usr/bin/chrome"),
    LaunchConfiguration("bundled"),
    LaunchConfiguration("minimal", base_args=False),
)


def default_launch_configurations() -> Tuple[LaunchConfiguration, ...]:
    """Return the built-in candidates, preceded by ``PADRON_BROWSER_EXECUTABLE`` if set."""

    if config.BROWSER_EXECUTABLE:
        override = LaunchConfiguration("env-override", executable_path=config.BROWSER_EXECUTABLE)
        return (override,) + DEFAULT_LAUNCH_CONFIGURATIONS
    return DEFAULT_LAUNCH_CONFIGURATIONS


class LaunchExhaustedError(RuntimeError):
    """Every launch configuration failed; ``last_error`` is the final cause."""

    def __init__(self, attempts: int, last_error: Optional[BaseException]) -> None:
        detail = short_error_message(last_error) if last_error is not None else "no configurations"
        super().__init__(f"Could not launch the browser after {attempts} attempt(s): {detail}")
        self.attempts = attempts
        self.last_error = last_error


class EngineLauncher:
    """Start a Playwright browser from the first working configuration."""

    def __init__(
        self,
        browser_type: BrowserType,
        configurations: Optional[Iterable[LaunchConfiguration]] = None,
        *,
        headless: Optional[bool] = None,
    ) -> None:
        self.browser_type = browser_type
        self.configurations: Sequence[LaunchConfiguration] = tuple(
            configurations if configurations is not None else default_launch_configurations()
        )
        self.headless = config.HEADLESS if headless is None else headless

    def launch(self) -> Browser:
        last_error: Optional[BaseException] = None
        attempts = 0

        for candidate in self.configurations:
            attempts += 1
            log_line(f"[LAUNCH] Trying browser configuration {candidate.label!r} ({attempts}/{len(self.configurations)})")
            try:
                browser = self.browser_type.launch(**candidate.launch_kwargs(headless=self.headless))
            except Exception as exc:  # noqa: BLE001
                last_error = exc
                log_line(f"[LAUNCH] Configuration {candidate.label!r} failed: {short_error_message(exc)}")
                _scraper_event(
                    "launch",
                    step="failed",
                    label=candidate.label,
                    executable_path=candidate.executable_path,
                    error=short_error_message(exc),
                )
                continue

            _scraper_event("launch", step="ok", label=candidate.label, attempts=attempts)
            return browser

        _scraper_event("error", phase="launch", error_code=ErrorCode.LAUNCH_FAILED, attempts=attempts)
        raise LaunchExhaustedError(attempts, last_error) from last_error


__all__ = [
    "BASE_ARGS",
    "DEFAULT_LAUNCH_CONFIGURATIONS",
    "EngineLauncher",
    "LaunchConfiguration",
    "LaunchExhaustedError",
    "MINIMAL_ARGS",
    "default_launch_configurations",
]
