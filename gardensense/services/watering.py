"""
Weather-aware watering reminders.

The watering interval comes from the plant's frequency class (or its explicit
interval), nudged by the current temperature: hot days bring watering forward,
cool days push it back. The result is bucketed into an urgency level with a
display message and colour.
"""
from datetime import date, timedelta
from typing import Iterable, Optional

from gardensense.schemas.tracker import (
    TrackedPlantState,
    WateringFrequency,
    WateringStatus,
    WateringUrgency,
)
from gardensense.services.dates import elapsed_days, is_finite_number, resolve_today

WATERING_INTERVALS: dict[WateringFrequency, int] = {
    WateringFrequency.frequent: 2,
    WateringFrequency.average: 4,
    WateringFrequency.minimum: 7,
    WateringFrequency.custom: 4,
}
DEFAULT_INTERVAL_DAYS = 4

FREQUENCY_DISPLAY_NAMES: dict[WateringFrequency, str] = {
    WateringFrequency.frequent: "Frequent (every 2 days)",
    WateringFrequency.average: "Average (every 4 days)",
    WateringFrequency.minimum: "Minimal (weekly)",
    WateringFrequency.custom: "Custom schedule",
}

NEVER_WATERED_DAYS = 999
OVERDUE_GRACE_DAYS = 2

VERY_HOT_F = 95
HOT_F = 85
COOL_F = 65

URGENCY_COLORS: dict[WateringUrgency, str] = {
    WateringUrgency.overdue: "#dc2626",
    WateringUrgency.urgent: "#f97316",
    WateringUrgency.due_soon: "#eab308",
    WateringUrgency.recently_watered: "#22c55e",
    WateringUrgency.good: "#10b981",
}

NEEDS_WATER = {WateringUrgency.overdue, WateringUrgency.urgent, WateringUrgency.due_soon}


def base_interval(
    frequency: WateringFrequency, interval_days: Optional[int] = None
) -> int:
    """An explicit positive interval always wins over the frequency class."""
    if interval_days is not None and interval_days > 0:
        return interval_days
    return WATERING_INTERVALS.get(frequency, DEFAULT_INTERVAL_DAYS)


def weather_adjustment(temp_f: Optional[float]) -> int:
    if not is_finite_number(temp_f):
        return 0
    if temp_f >= VERY_HOT_F:
        return -2
    if temp_f >= HOT_F:
        return -1
    if temp_f <= COOL_F:
        return 1
    return 0


def adjusted_interval(plant: TrackedPlantState, temp_f: Optional[float] = None) -> int:
    interval = base_interval(plant.watering_frequency, plant.watering_interval_days)
    return max(1, interval + weather_adjustment(temp_f))


def days_since_watering(last_watered: Optional[date], today: Optional[date] = None) -> int:
    if last_watered is None:
        return NEVER_WATERED_DAYS
    return elapsed_days(last_watered, today)


def frequency_display_name(frequency: Optional[WateringFrequency]) -> str:
    return FREQUENCY_DISPLAY_NAMES.get(frequency, "Average")


def _ago(days: int) -> str:
    return f"Watered {days} day{'' if days == 1 else 's'} ago"


def watering_status(
    plant: TrackedPlantState,
    current_temp_f: Optional[float] = None,
    today: Optional[date] = None,
) -> WateringStatus:
    temp = current_temp_f if is_finite_number(current_temp_f) else None
    days_since = days_since_watering(plant.last_watered, today)
    adjustment = weather_adjustment(temp)
    interval = adjusted_interval(plant, temp)
    days_until = interval - days_since

    if days_since > interval + OVERDUE_GRACE_DAYS:
        urgency = WateringUrgency.overdue
        message = f"{_ago(days_since)} - Overdue!"
        notify = True
    elif days_since >= interval and temp is not None and temp >= HOT_F:
        urgency = WateringUrgency.urgent
        message = f"{_ago(days_since)} - Hot day ({round(temp)}°F)"
        notify = True
    elif days_since > interval:
        urgency = WateringUrgency.overdue
        message = f"{_ago(days_since)} - Due now"
        notify = True
    elif days_until in (0, 1):
        urgency = WateringUrgency.due_soon
        if days_since == 0:
            message = "Watered today"
        else:
            due = "Water today" if days_until == 0 else f"Due in {days_until} day"
            message = f"{_ago(days_since)} - {due}"
        notify = days_until == 0
    elif days_since <= 1:
        urgency = WateringUrgency.recently_watered
        message = "Watered today" if days_since == 0 else _ago(days_since)
        notify = False
    else:
        urgency = WateringUrgency.good
        message = _ago(days_since)
        notify = False

    if temp is not None and adjustment < 0:
        message += " (heat adjusted)"
    elif temp is not None and adjustment > 0:
        message += " (cool weather)"

    return WateringStatus(
        urgency=urgency,
        days_since_watering=days_since,
        days_until_next=days_until,
        adjusted_interval_days=interval,
        message=message,
        color_tag=URGENCY_COLORS[urgency],
        should_notify=notify and plant.watering_reminder_enabled,
    )


def needs_water(status: WateringStatus) -> bool:
    return status.urgency in NEEDS_WATER


def next_watering_date(
    plant: TrackedPlantState,
    current_temp_f: Optional[float] = None,
    today: Optional[date] = None,
) -> date:
    if plant.last_watered is None:
        return resolve_today(today)
    return plant.last_watered + timedelta(days=adjusted_interval(plant, current_temp_f))


def watering_notifications(
    plants: Iterable[TrackedPlantState],
    current_temp_f: Optional[float] = None,
    today: Optional[date] = None,
) -> list[tuple[TrackedPlantState, WateringStatus]]:
    """Plants whose reminder should fire now, in input order."""
    results = []
    for plant in plants:
        status = watering_status(plant, current_temp_f, today)
        if status.should_notify:
            results.append((plant, status))
    return results
