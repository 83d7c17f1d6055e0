"""Wall-clock helpers for record timestamps."""

import time
from datetime import datetime, timezone


def now() -> datetime:
    """Return the current UTC time truncated to whole milliseconds.

    The nanosecond counter is divided down to milliseconds so every
    timestamp written by the service has the same resolution.
    """
    millis = time.time_ns() // 1_000_000
    seconds, remainder = divmod(millis, 1000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=remainder * 1000)
