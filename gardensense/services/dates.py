import math
from datetime import date, timedelta
from typing import Optional


def resolve_today(today: Optional[date] = None) -> date:
    return today if today is not None else date.today()


def elapsed_days(since: date, today: Optional[date] = None) -> int:
    """Whole days from ``since`` to ``today``, clamped at zero for future dates."""
    return max((resolve_today(today) - since).days, 0)


def is_finite_number(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def add_days(start: date, days: float) -> Optional[date]:
    """``start`` plus ``days``, or None when the result falls outside the calendar."""
    if not is_finite_number(days):
        return None
    try:
        return start + timedelta(days=days)
    except OverflowError:
        return None
