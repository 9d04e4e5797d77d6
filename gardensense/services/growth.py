"""
Growth stage and harvest progress for tracked plants.

The current stage comes from the plant's own milestone table: the last
milestone whose estimated day has passed. Records without milestones fall back
to ``stage_from_day_thresholds``, a fixed table tuned for a ~70 day crop.
"""
from datetime import date
from typing import Optional

from gardensense.core.exceptions import NotPlantedError
from gardensense.schemas.tracker import (
    GrowthProgress,
    Milestone,
    MilestoneStatus,
    PlantType,
    TrackedPlantState,
)
from gardensense.services.dates import add_days, elapsed_days, is_finite_number, resolve_today

DEFAULT_DAYS_TO_HARVEST = 70
DEFAULT_GERMINATION_DAYS = 7

STAGE_GERMINATION = "Germination"
STAGE_SEEDLING = "Seedling"
STAGE_VEGETATIVE = "vegetative growth/flowering"
STAGE_HARVEST = "Ready to Harvest"

# Day boundaries of the fixed stage table: 7, 7 + 17.5, 7 + 17.5 + 42
SEEDLING_FROM_DAY = 7
VEGETATIVE_FROM_DAY = 24.5
LATE_GROWTH_FROM_DAY = 66.5

_ORNAMENTAL_TYPES = {PlantType.flower, PlantType.ornamental}


def normalize_stage(stage: Optional[str]) -> str:
    """Collapse the historical flowering/vegetative names into one label."""
    text = (stage or "").strip().lower()
    if not text:
        return ""
    if text in ("flowering", "vegetative growth") or "flowering" in text:
        return STAGE_VEGETATIVE
    return stage or ""


def effective_days_to_harvest(days_to_harvest: Optional[float]) -> float:
    if is_finite_number(days_to_harvest) and days_to_harvest > 0:
        return days_to_harvest
    return DEFAULT_DAYS_TO_HARVEST


def stage_from_milestones(milestones: list[Milestone], days_passed: int) -> Optional[str]:
    if not milestones:
        return None
    stage = milestones[0].name
    for milestone in milestones:
        if milestone.estimated_days <= days_passed:
            stage = milestone.name
    return normalize_stage(stage)


def stage_from_day_thresholds(days_passed: int, days_to_harvest: float) -> str:
    """Fallback stage for records with an empty milestone table."""
    if days_passed < SEEDLING_FROM_DAY:
        return STAGE_GERMINATION
    if days_passed < VEGETATIVE_FROM_DAY:
        return STAGE_SEEDLING
    if days_passed < LATE_GROWTH_FROM_DAY:
        return STAGE_VEGETATIVE
    if days_passed >= days_to_harvest:
        return STAGE_HARVEST
    return STAGE_VEGETATIVE


def _next_milestone_text(days_passed: int, days_to_harvest: float, harvest_ready: bool) -> str:
    if harvest_ready:
        return "Harvest ready"
    remaining = max(round(days_to_harvest - days_passed), 0)
    if remaining == 0:
        return "Harvest window opening"
    return f"Harvest in {remaining} day{'' if remaining == 1 else 's'}"


def _days_passed(plant: TrackedPlantState, today: Optional[date]) -> int:
    if plant.planted_date is None:
        raise NotPlantedError(plant.plant_name)
    return elapsed_days(plant.planted_date, today)


def current_stage(plant: TrackedPlantState, today: Optional[date] = None) -> tuple[str, str]:
    """Return (stage, source) where source is "milestones" or "thresholds"."""
    days_passed = _days_passed(plant, today)
    stage = stage_from_milestones(plant.milestones, days_passed)
    if stage is not None:
        return stage, "milestones"
    days_to_harvest = effective_days_to_harvest(plant.days_to_harvest)
    return stage_from_day_thresholds(days_passed, days_to_harvest), "thresholds"


def growth_progress(plant: TrackedPlantState, today: Optional[date] = None) -> GrowthProgress:
    """
    Days in soil, percent of the way to harvest and current growth stage.

    Raises NotPlantedError for a planned plant with no planting date.
    Ornamentals are not harvested, so they report 0% and never become ready.
    """
    today = resolve_today(today)
    days_passed = _days_passed(plant, today)
    days_to_harvest = effective_days_to_harvest(plant.days_to_harvest)
    stage, source = current_stage(plant, today)

    if plant.plant_type in _ORNAMENTAL_TYPES:
        return GrowthProgress(
            days_passed=days_passed,
            percent_complete=0.0,
            stage=stage,
            stage_source=source,
            harvest_ready=False,
            next_milestone="Growing",
        )

    harvest_ready = days_passed >= days_to_harvest
    return GrowthProgress(
        days_passed=days_passed,
        percent_complete=min(days_passed / days_to_harvest * 100, 100.0),
        stage=stage,
        stage_source=source,
        harvest_ready=harvest_ready,
        next_milestone=_next_milestone_text(days_passed, days_to_harvest, harvest_ready),
    )


def milestone_statuses(plant: TrackedPlantState, today: Optional[date] = None) -> list[MilestoneStatus]:
    today = resolve_today(today)
    days_passed = _days_passed(plant, today)
    stage, _ = current_stage(plant, today)

    statuses = []
    for milestone in plant.milestones:
        name = normalize_stage(milestone.name)
        statuses.append(MilestoneStatus(
            name=name,
            estimated_days=milestone.estimated_days,
            reached=milestone.reached,
            past=days_passed >= milestone.estimated_days,
            current=name == stage,
            due_date=add_days(plant.planted_date, milestone.estimated_days),
        ))
    return statuses


# ── Default milestone tables ──────────────────────────────────────────────────


def default_milestones(days_to_harvest: Optional[float] = None) -> list[Milestone]:
    """Milestones for a plant added straight to the tracker."""
    return [
        Milestone(name=STAGE_GERMINATION, estimated_days=SEEDLING_FROM_DAY),
        Milestone(name=STAGE_SEEDLING, estimated_days=VEGETATIVE_FROM_DAY),
        Milestone(name=STAGE_VEGETATIVE, estimated_days=LATE_GROWTH_FROM_DAY),
        Milestone(name=STAGE_HARVEST, estimated_days=effective_days_to_harvest(days_to_harvest)),
    ]


def milestones_from_maturity(days_to_maturity: Optional[float] = None) -> list[Milestone]:
    """Milestones scaled to maturity time, for plants placed from the bed planner."""
    maturity = effective_days_to_harvest(days_to_maturity)
    germination = round(maturity * 0.1) or DEFAULT_GERMINATION_DAYS
    seedling = germination + 14
    # short crops would otherwise list later stages before earlier ones
    vegetative = max(round(maturity * 0.8), seedling)
    return [
        Milestone(name=STAGE_GERMINATION, estimated_days=germination),
        Milestone(name=STAGE_SEEDLING, estimated_days=seedling),
        Milestone(name=STAGE_VEGETATIVE, estimated_days=vegetative),
        Milestone(name=STAGE_HARVEST, estimated_days=max(maturity, vegetative)),
    ]
