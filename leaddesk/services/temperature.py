from __future__ import annotations

from datetime import datetime, timedelta, timezone

from leaddesk.models.lead import Temperature

HOT_MAX_DAYS = 2
WARM_MAX_DAYS = 5

_ONE_DAY = timedelta(days=1)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _aware(dt: datetime) -> datetime:
    # naive timestamps are treated as UTC
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def days_since(last_interaction_at: datetime, now: datetime) -> int:
    """
    Whole days elapsed between last contact and `now`, floored.
    Future timestamps give a negative number.
    """
    return (_aware(now) - _aware(last_interaction_at)) // _ONE_DAY


def classify_days(days: int) -> Temperature:
    if days <= HOT_MAX_DAYS:
        return Temperature.HOT
    if days <= WARM_MAX_DAYS:
        return Temperature.WARM
    return Temperature.COLD


def classify_temperature(last_interaction_at: datetime, now: datetime) -> Temperature:
    """hot: <= 2 days, warm: 3-5 days, cold: more than 5 days without contact."""
    return classify_days(days_since(last_interaction_at, now))


def contact_status(days: int) -> str:
    if days <= 0:
        return "Contacted today"
    if days == 1:
        return "Last contact yesterday"
    if days <= HOT_MAX_DAYS:
        return f"{days} days ago (hot)"
    if days <= WARM_MAX_DAYS:
        return f"{days} days ago (cooling down)"
    return f"{days} days ago (cold, re-engage!)"
