"""Run telemetry for lookup batches."""

from __future__ import annotations

import json
import time
import uuid
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import config


def _ts() -> str:
    return time.strftime("%Y%m%d_%H%M%S")


class RunTelemetry:
    """Collect per-identifier outcomes and write them as a JSON run summary."""

    def __init__(self, runs_dir: Optional[Path] = None) -> None:
        self.run_id = f"{_ts()}_{uuid.uuid4().hex[:8]}"
        self.runs_dir = Path(runs_dir) if runs_dir is not None else config.RUNS_DIR
        self.started_at = time.time()
        self.entries: List[Dict[str, Any]] = []
        self.summary: Dict[str, Any] = defaultdict(int)

    def add(self, identifier: str, status: str, error_code: Optional[str] = None) -> None:
        self.entries.append(
            {
                "identifier": identifier,
                "status": status,
                "error_code": error_code,
            }
        )
        self.summary[f"count_{status}"] += 1
        if error_code:
            self.summary[f"error_{error_code}"] += 1

    def finalize(self, extra: Optional[Dict[str, Any]] = None) -> Path:
        payload = {
            "run_id": self.run_id,
            "started_at": self.started_at,
            "ended_at": time.time(),
            "summary": dict(self.summary),
            "entries": self.entries,
            **(extra or {}),
        }
        self.runs_dir.mkdir(parents=True, exist_ok=True)
        path = self.runs_dir / f"run_{self.run_id}.json"
        with path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, ensure_ascii=False, indent=2)
        return path


__all__ = ["RunTelemetry"]
