# utils/eventlog.py
"""
Append-only JSONL event logs for the sync controller.

Primary API:
    write_event_jsonl(path: str, event: dict) -> None
    sync_log(slug: str, event: dict) -> str
    read_jsonl(path: str) -> Iterable[dict]

Design:
- One JSON object per line, parent directories created as needed.
- Short retry loop for transient Windows file locks.
- Never raise on logging failures; the caller's flow must not depend on the log.
"""

from __future__ import annotations

import io
import json
import time
from pathlib import Path
from typing import Any, Dict, Iterable

from utils.constants import ARTIFACTS_DIR


def _json_sanitize(obj: Any) -> Any:
    try:
        json.dumps(obj)
        return obj
    except (TypeError, ValueError):
        return str(obj)


def write_event_jsonl(path: str, event: Dict[str, Any]) -> None:
    """
    Append a single JSON object as one line.

    Guarantees:
        - Writes exactly one line per call (trailing '\n').
        - Never raises to the caller (best-effort logging).
    """
    try:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(event, ensure_ascii=False, separators=(",", ":"))
        for _ in range(3):
            try:
                with io.open(p, "a", encoding="utf-8", newline="\n") as f:
                    f.write(payload + "\n")
                return
            except PermissionError:
                time.sleep(0.05)
    except Exception:
        # Logging must never block the main flow
        return


def read_jsonl(path: str) -> Iterable[Dict[str, Any]]:
    """
    Iterate a JSONL file, yielding dicts and skipping malformed lines.
    Yields nothing if the file is missing.
    """
    try:
        with io.open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    obj = json.loads(line)
                except ValueError:
                    continue
                if isinstance(obj, dict):
                    yield obj
    except FileNotFoundError:
        return


def sync_log_path(slug: str) -> Path:
    """Per-slug layout: artifacts/<slug>/<slug>_sync_log.jsonl"""
    slug = (slug or "").strip() or "dev"
    return Path(ARTIFACTS_DIR) / slug / f"{slug}_sync_log.jsonl"


def sync_log(slug: str, event: Dict[str, Any]) -> str:
    """
    Append one controller transition to the slug's sync log.
    Returns the absolute path string.
    """
    path = sync_log_path(slug)
    payload = {k: _json_sanitize(v) for k, v in (event or {}).items()}
    payload.setdefault("session_slug", slug)
    write_event_jsonl(str(path), payload)
    return str(path.resolve())
