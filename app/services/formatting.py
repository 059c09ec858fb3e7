"""
Display formatting for catalog values.

The catalog stores views, duration and "time ago" as ready-to-render
strings. Upstream data (crawls, exports) usually has raw numbers and
timestamps instead, so these helpers turn them into the exact strings the
front end shows. Values that are already strings pass through untouched;
missing values stay missing.
"""

from datetime import datetime, timezone
from typing import Optional, Union

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
MONTH = 30 * DAY
YEAR = 365 * DAY


def format_views(views: Union[str, int, float, None]) -> Optional[str]:
    """1234567 -> "1.2M views", 1500 -> "1.5K views", 999 -> "999 views".

    Small counts keep any fraction (999.5 -> "999.5 views").
    """
    if views is None or isinstance(views, str):
        return views
    if views >= 1_000_000:
        return f"{views / 1_000_000:.1f}M views"
    if views >= 1000:
        return f"{views / 1000:.1f}K views"
    return f"{views:g} views"


def format_duration(duration: Union[str, int, float, None]) -> Optional[str]:
    """Seconds to "m:ss" (930 -> "15:30")."""
    if duration is None or isinstance(duration, str):
        return duration
    total = int(duration)
    minutes, seconds = divmod(total, 60)
    return f"{minutes}:{seconds:02d}"


def parse_timestamp(value: str) -> datetime:
    """ISO-8601 to an aware datetime. A trailing "Z" and naive values are UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_time_ago(published_at: Optional[str], now: Optional[datetime] = None) -> Optional[str]:
    """Relative age of a publish timestamp, e.g. "3 days ago".

    Raises:
        ValueError: published_at is not an ISO-8601 timestamp.
    """
    if not published_at:
        return None
    if not isinstance(published_at, str):
        raise ValueError(f"published_at must be an ISO-8601 string, got {type(published_at).__name__}")

    now = now or datetime.now(timezone.utc)
    elapsed = int((now - parse_timestamp(published_at)).total_seconds())

    if elapsed < MINUTE:
        return "Just now"
    if elapsed < HOUR:
        return f"{elapsed // MINUTE} minutes ago"
    if elapsed < DAY:
        return f"{elapsed // HOUR} hours ago"
    if elapsed < MONTH:
        return f"{elapsed // DAY} days ago"
    if elapsed < YEAR:
        return f"{elapsed // MONTH} months ago"
    return f"{elapsed // YEAR} years ago"
