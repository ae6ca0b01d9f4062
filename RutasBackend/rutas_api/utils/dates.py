"""Date stamps for creation/update fields (``YYYY-MM-DD``, UTC)."""

from __future__ import annotations

from datetime import datetime, timezone


def today_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")
