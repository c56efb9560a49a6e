"""
Timestamp helpers shared by order shaping and health reporting
"""
import time
from datetime import datetime, timezone
from typing import Optional


def now_ms() -> int:
    """Current Unix time in milliseconds"""
    return time.time_ns() // 1_000_000


def to_iso(unix_seconds: Optional[float] = None) -> str:
    """
    Render Unix seconds as ISO-8601 UTC with millisecond precision.

    ``None`` renders the current time. Output looks like
    ``2024-05-01T12:00:00.000Z``.
    """
    if unix_seconds is None:
        moment = datetime.now(timezone.utc)
    else:
        moment = datetime.fromtimestamp(unix_seconds, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
