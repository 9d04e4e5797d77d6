from datetime import date
from typing import Iterable, Optional

from gardensense.schemas.tracker import TrackedPlantState, TrackerSummary
from gardensense.services.growth import growth_progress
from gardensense.services.watering import needs_water, watering_status


def tracker_summary(
    plants: Iterable[TrackedPlantState],
    current_temp_f: Optional[float] = None,
    today: Optional[date] = None,
) -> TrackerSummary:
    """Dashboard counts across every tracked plant."""
    total = planted = thirsty = ready = 0

    for plant in plants:
        total += 1
        if needs_water(watering_status(plant, current_temp_f, today)):
            thirsty += 1
        # Planned plants have no timeline yet
        if plant.planted_date is None:
            continue
        planted += 1
        if growth_progress(plant, today).harvest_ready:
            ready += 1

    return TrackerSummary(
        total_tracked=total,
        planted=planted,
        planned=total - planted,
        needs_water=thirsty,
        ready_to_harvest=ready,
    )
