"""utils.time

Pure time helpers. Side-effect free; no Streamlit imports.
"""

from __future__ import annotations

from datetime import datetime, timezone


def now_utc_iso() -> str:
    """UTC timestamp in ISO-8601 with milliseconds and 'Z' suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
