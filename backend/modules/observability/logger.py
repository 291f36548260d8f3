"""
modules/observability/logger.py
--------------------------------
Draft event log: one JSON object per line, one file per journey draft.

    event_log = StructuredLogger()
    event_log.log("3f9c…", "activity_added", {"active_day": "Day 1", "index": 0})
    # → <EDITOR_LOG_DIR>/3f9c….jsonl

Each record opens, appends and closes its file, so a long-lived editor
process holds no descriptors between edits and an abandoned draft leaves
nothing open behind it.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path

import config


class StructuredLogger:
    """Thread-safe JSONL event sink keyed by draft id."""

    def __init__(self, logs_dir: Path | str | None = None) -> None:
        self._logs_dir = Path(logs_dir) if logs_dir else config.EDITOR_LOG_DIR
        self._lock = threading.Lock()

    def path_for(self, draft_id: str) -> Path:
        return self._logs_dir / f"{draft_id}.jsonl"

    def log(self, draft_id: str, event_type: str, payload: dict) -> None:
        line = json.dumps(
            {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "draft_id": draft_id,
                "event_type": event_type,
                "payload": payload,
            },
            default=str,
            ensure_ascii=False,
        )
        with self._lock:
            self._logs_dir.mkdir(parents=True, exist_ok=True)
            with open(self.path_for(draft_id), "a", encoding="utf-8") as fh:
                fh.write(line + "\n")

    def read(self, draft_id: str) -> list[dict]:
        """Every record logged for ``draft_id``, oldest first."""
        path = self.path_for(draft_id)
        if not path.exists():
            return []
        with self._lock, open(path, encoding="utf-8") as fh:
            return [json.loads(line) for line in fh if line.strip()]
