"""
Относительное время в духе date-fns formatDistanceToNow(addSuffix=True).
"""

from datetime import datetime, timezone
from typing import Optional

MINUTES_IN_DAY = 1440
MINUTES_IN_MONTH = 43200
MINUTES_IN_YEAR = 525600


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def distance_in_words(minutes: float) -> str:
    """Расстояние в минутах → "about 2 hours", "3 days" и т.п."""
    seconds = minutes * 60
    if seconds < 30:
        return "less than a minute"
    if minutes < 1.5:
        return "1 minute"
    if minutes < 44.5:
        return _plural(round(minutes), "minute")
    if minutes < 89.5:
        return "about 1 hour"
    if minutes < MINUTES_IN_DAY - 0.5:
        return f"about {_plural(round(minutes / 60), 'hour')}"
    if minutes < 2519.5:
        return "1 day"
    if minutes < MINUTES_IN_MONTH - 0.5:
        return _plural(round(minutes / MINUTES_IN_DAY), "day")
    if minutes < 64799.5:
        return "about 1 month"
    if minutes < 86399.5:
        return "about 2 months"
    if minutes < MINUTES_IN_YEAR:
        return _plural(round(minutes / MINUTES_IN_MONTH), "month")

    months = int(minutes // MINUTES_IN_MONTH)
    years, remainder = divmod(months, 12)
    if remainder < 3:
        return f"about {_plural(years, 'year')}"
    if remainder < 9:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"


def time_ago(moment: Optional[datetime], now: Optional[datetime] = None) -> str:
    """"3 days ago" / "in 5 minutes"; пустая строка если времени нет."""
    if moment is None:
        return ""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    minutes = (now - moment).total_seconds() / 60
    words = distance_in_words(abs(minutes))
    return f"in {words}" if minutes < 0 else f"{words} ago"
