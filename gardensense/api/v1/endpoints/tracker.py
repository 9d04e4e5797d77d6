from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from gardensense.core.exceptions import NotPlantedError
from gardensense.schemas.tracker import (
    GrowthProgress,
    Milestone,
    MilestoneStatus,
    TrackedPlantRequest,
    TrackerBatchRequest,
    TrackerSummary,
    WateringNotification,
    WateringRequest,
    WateringStatus,
)
from gardensense.services.growth import (
    default_milestones,
    growth_progress,
    milestone_statuses,
    milestones_from_maturity,
)
from gardensense.services.tracker import tracker_summary
from gardensense.services.watering import watering_notifications, watering_status

router = APIRouter(prefix="/tracker", tags=["tracker"])


def _not_planted(exc: NotPlantedError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


# ── Growth ────────────────────────────────────────────────────────────────────


@router.post("/progress", response_model=GrowthProgress)
async def plant_progress(data: TrackedPlantRequest):
    try:
        return growth_progress(data.plant, data.today)
    except NotPlantedError as exc:
        raise _not_planted(exc)


@router.post("/milestones", response_model=list[MilestoneStatus])
async def plant_milestones(data: TrackedPlantRequest):
    try:
        return milestone_statuses(data.plant, data.today)
    except NotPlantedError as exc:
        raise _not_planted(exc)


@router.get("/milestones/default", response_model=list[Milestone])
async def get_default_milestones(
    days_to_harvest: Optional[float] = Query(None, gt=0),
    scaled: bool = Query(False, description="Scale milestones to maturity time"),
):
    if scaled:
        return milestones_from_maturity(days_to_harvest)
    return default_milestones(days_to_harvest)


# ── Watering ──────────────────────────────────────────────────────────────────


@router.post("/watering", response_model=WateringStatus)
async def plant_watering(data: WateringRequest):
    temp = data.weather.current_temp_f if data.weather else None
    return watering_status(data.plant, temp, data.today)


@router.post("/notifications", response_model=list[WateringNotification])
async def pending_notifications(data: TrackerBatchRequest):
    temp = data.weather.current_temp_f if data.weather else None
    return [
        WateringNotification(plant_name=plant.plant_name, status=result)
        for plant, result in watering_notifications(data.plants, temp, data.today)
    ]


@router.post("/summary", response_model=TrackerSummary)
async def summary(data: TrackerBatchRequest):
    temp = data.weather.current_temp_f if data.weather else None
    return tracker_summary(data.plants, temp, data.today)
