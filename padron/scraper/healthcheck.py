from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from . import config
from .config_validation import validate_runtime_config
from .logging_utils import _scraper_event
from .utils import ensure_dirs, log_line


@dataclass
class HealthResult:
    ok: bool
    checks: dict[str, dict[str, Any]]


def _check_output_dir() -> dict[str, Any]:
    target_dir = config.OUTPUT_CSV.parent
    probe = target_dir / ".padron_write_probe"
    try:
        ensure_dirs()
        probe.write_text("ok", encoding="utf-8")
        probe.unlink()
    except OSError as exc:
        return {"ok": False, "output_dir": str(target_dir), "error": str(exc)}
    return {"ok": True, "output_dir": str(target_dir)}


def _check_endpoint(session: requests.Session | None = None) -> dict[str, Any]:
    http = session or requests.Session()
    try:
        resp = http.get(
            config.QUERY_URL,
            headers=config.COMMON_HEADERS,
            timeout=config.HEALTHCHECK_TIMEOUT_SECONDS,
        )
    except requests.RequestException as exc:
        return {"ok": False, "url": config.QUERY_URL, "error": str(exc)}
    return {"ok": resp.status_code < 400, "url": config.QUERY_URL, "status": resp.status_code}


def run_health_checks(session: requests.Session | None = None) -> HealthResult:
    checks: dict[str, dict[str, Any]] = {}

    try:
        validate_runtime_config("healthcheck")
        checks["config"] = {"ok": True}
    except ValueError as exc:
        checks["config"] = {"ok": False, "error": str(exc)}

    checks["output"] = _check_output_dir()
    checks["endpoint"] = _check_endpoint(session)

    overall_ok = all(check.get("ok", False) for check in checks.values())

    _scraper_event(
        "state" if overall_ok else "error",
        phase="health",
        ok=overall_ok,
        checks=checks,
    )

    return HealthResult(ok=overall_ok, checks=checks)


if __name__ == "__main__":  # pragma: no cover
    result = run_health_checks()
    for name, info in result.checks.items():
        status = "OK" if info.get("ok") else "FAIL"
        log_line(f"[HEALTH] {name}: {status} {info}")
    raise SystemExit(0 if result.ok else 1)
