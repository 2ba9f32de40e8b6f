from __future__ import annotations
from datetime import datetime, timezone

# ─────────────────────────────
# Time & Date helpers
# ─────────────────────────────

def now_utc() -> datetime:
    return datetime.now(tz=timezone.utc)

def to_iso_z(dt: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix, e.g. 2025-01-31T09:15:02.123Z."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def utc_now_iso() -> str:
    return to_iso_z(now_utc())

def parse_iso_z(raw: str) -> datetime:
    # fromisoformat only understands "Z" from 3.11 on
    return datetime.fromisoformat(raw.replace("Z", "+00:00"))
