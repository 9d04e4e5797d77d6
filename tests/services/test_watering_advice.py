from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from gardensense.schemas.tracker import TrackedPlantState, WateringFrequency, WateringUrgency
from gardensense.services.watering import (
    base_interval,
    frequency_display_name,
    needs_water,
    next_watering_date,
    watering_notifications,
    watering_status,
    weather_adjustment,
)

TODAY = date(2026, 7, 1)


def _plant(days_ago: int | None, frequency=WateringFrequency.average, **kwargs) -> TrackedPlantState:
    last = TODAY - timedelta(days=days_ago) if days_ago is not None else None
    kwargs.setdefault("plant_name", "Basil")
    return TrackedPlantState(watering_frequency=frequency, last_watered=last, **kwargs)


@pytest.mark.parametrize(
    "frequency,interval,expected",
    [
        (WateringFrequency.frequent, None, 2),
        (WateringFrequency.average, None, 4),
        (WateringFrequency.minimum, None, 7),
        (WateringFrequency.custom, None, 4),
        (WateringFrequency.custom, 10, 10),
        (WateringFrequency.frequent, 5, 5),
        (WateringFrequency.minimum, 0, 7),
    ],
)
def test_base_interval(frequency, interval, expected):
    assert base_interval(frequency, interval) == expected


@pytest.mark.parametrize(
    "temp,expected",
    [(None, 0), (100, -2), (95, -2), (94.9, -1), (85, -1), (75, 0), (65.1, 0), (65, 1), (0, 1), (float("nan"), 0)],
)
def test_weather_adjustment(temp, expected):
    assert weather_adjustment(temp) == expected


def test_hot_day_escalates_to_urgent():
    status = watering_status(_plant(5), current_temp_f=90, today=TODAY)
    assert status.adjusted_interval_days == 3
    assert status.urgency is WateringUrgency.urgent
    assert status.days_since_watering == 5
    assert status.days_until_next == -2
    assert status.should_notify is True
    assert status.color_tag == "#f97316"
    assert status.message == "Watered 5 days ago - Hot day (90°F) (heat adjusted)"


def test_well_past_interval_is_overdue():
    status = watering_status(_plant(7), today=TODAY)
    assert status.urgency is WateringUrgency.overdue
    assert status.message == "Watered 7 days ago - Overdue!"
    assert status.color_tag == "#dc2626"
    assert status.should_notify is True


def test_overdue_beats_hot_day_when_far_past_interval():
    status = watering_status(_plant(10), current_temp_f=96, today=TODAY)
    assert status.urgency is WateringUrgency.overdue
    assert status.message == "Watered 10 days ago - Overdue! (heat adjusted)"


def test_just_past_interval_is_due_now():
    status = watering_status(_plant(5), today=TODAY)
    assert status.urgency is WateringUrgency.overdue
    assert status.message == "Watered 5 days ago - Due now"


def test_never_watered_is_overdue():
    status = watering_status(_plant(None), today=TODAY)
    assert status.urgency is WateringUrgency.overdue
    assert status.days_since_watering == 999
    assert status.should_notify is True


def test_due_today_notifies():
    status = watering_status(_plant(4), today=TODAY)
    assert status.urgency is WateringUrgency.due_soon
    assert status.days_until_next == 0
    assert status.message == "Watered 4 days ago - Water today"
    assert status.should_notify is True
    assert status.color_tag == "#eab308"


def test_due_tomorrow_does_not_notify():
    status = watering_status(_plant(3), today=TODAY)
    assert status.urgency is WateringUrgency.due_soon
    assert status.days_until_next == 1
    assert status.message == "Watered 3 days ago - Due in 1 day"
    assert status.should_notify is False


def test_due_soon_watered_today():
    # a one-day interval is due again tomorrow even when watered today
    status = watering_status(_plant(0, WateringFrequency.frequent), current_temp_f=100, today=TODAY)
    assert status.adjusted_interval_days == 1
    assert status.urgency is WateringUrgency.due_soon
    assert status.message == "Watered today (heat adjusted)"


@pytest.mark.parametrize("days_ago,message", [(0, "Watered today"), (1, "Watered 1 day ago")])
def test_recently_watered(days_ago, message):
    status = watering_status(_plant(days_ago, WateringFrequency.minimum), today=TODAY)
    assert status.urgency is WateringUrgency.recently_watered
    assert status.message == message
    assert status.should_notify is False
    assert status.color_tag == "#22c55e"


def test_good():
    status = watering_status(_plant(3, WateringFrequency.minimum), today=TODAY)
    assert status.urgency is WateringUrgency.good
    assert status.message == "Watered 3 days ago"
    assert status.color_tag == "#10b981"


def test_cool_weather_extends_interval():
    status = watering_status(_plant(3), current_temp_f=60, today=TODAY)
    assert status.adjusted_interval_days == 5
    assert status.urgency is WateringUrgency.good
    assert status.message == "Watered 3 days ago (cool weather)"


def test_explicit_interval_overrides_class():
    status = watering_status(
        _plant(8, WateringFrequency.custom, watering_interval_days=10), today=TODAY
    )
    assert status.adjusted_interval_days == 10
    assert status.urgency is WateringUrgency.good


def test_reminders_disabled_never_notify():
    status = watering_status(_plant(12, watering_reminder_enabled=False), today=TODAY)
    assert status.urgency is WateringUrgency.overdue
    assert status.should_notify is False


def test_watered_in_future_counts_as_today():
    status = watering_status(_plant(-3), today=TODAY)
    assert status.days_since_watering == 0


def test_same_inputs_same_output():
    plant = _plant(5)
    assert watering_status(plant, 90, TODAY) == watering_status(plant, 90, TODAY)


def test_needs_water():
    assert needs_water(watering_status(_plant(4), today=TODAY))
    assert needs_water(watering_status(_plant(9), today=TODAY))
    assert not needs_water(watering_status(_plant(1), today=TODAY))


def test_next_watering_date():
    assert next_watering_date(_plant(2), today=TODAY) == TODAY + timedelta(days=2)
    assert next_watering_date(_plant(2), current_temp_f=96, today=TODAY) == TODAY
    assert next_watering_date(_plant(None), today=TODAY) == TODAY


def test_watering_notifications_keep_input_order():
    plants = [
        _plant(9, plant_name="Tomato"),
        _plant(1, plant_name="Lettuce"),
        _plant(4, plant_name="Pepper"),
        _plant(9, plant_name="Mint", watering_reminder_enabled=False),
    ]
    due = watering_notifications(plants, today=TODAY)
    assert [plant.plant_name for plant, _ in due] == ["Tomato", "Pepper"]


def test_frequency_display_name():
    assert frequency_display_name(WateringFrequency.minimum) == "Minimal (weekly)"
    assert frequency_display_name(WateringFrequency.frequent) == "Frequent (every 2 days)"
    assert frequency_display_name(None) == "Average"


@pytest.mark.parametrize("interval", [0, -3])
def test_non_positive_interval_rejected(interval):
    with pytest.raises(ValidationError):
        _plant(2, WateringFrequency.custom, watering_interval_days=interval)
