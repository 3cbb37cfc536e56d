from __future__ import annotations

"""Error code taxonomy for lookup failures.

These codes appear in structured logs and run telemetry so that a failed row
in the CSV can be explained. ``NOT_FOUND`` covers both "no such identifier"
and "results never rendered": the remote page gives no way to tell them apart.
"""


class ErrorCode:
    NAV_TIMEOUT = "nav_timeout"
    INPUT_TIMEOUT = "input_timeout"
    NOT_FOUND = "not_found"
    ENGINE = "engine_error"
    LAUNCH_FAILED = "launch_failed"
    INTERNAL = "internal_error"


__all__ = ["ErrorCode"]
