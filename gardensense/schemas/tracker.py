from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, PositiveInt


class PlantType(str, Enum):
    vegetable = "vegetable"
    herb = "herb"
    flower = "flower"
    ornamental = "ornamental"


class WateringFrequency(str, Enum):
    frequent = "frequent"
    average = "average"
    minimum = "minimum"
    custom = "custom"


class WateringUrgency(str, Enum):
    overdue = "overdue"
    urgent = "urgent"
    due_soon = "due-soon"
    good = "good"
    recently_watered = "recently-watered"


class Milestone(BaseModel):
    name: str
    estimated_days: float = Field(ge=0)
    reached: bool = False
    reached_date: Optional[date] = None


class TrackedPlantState(BaseModel):
    plant_name: str = ""
    plant_type: Optional[PlantType] = None
    planted_date: Optional[date] = None
    watering_frequency: WateringFrequency = WateringFrequency.average
    watering_interval_days: Optional[PositiveInt] = None
    watering_reminder_enabled: bool = True
    last_watered: Optional[date] = None
    milestones: list[Milestone] = []
    days_to_harvest: float = 70


class WeatherReading(BaseModel):
    current_temp_f: Optional[float] = None


# ── Results ───────────────────────────────────────────────────────────────────


class GrowthProgress(BaseModel):
    days_passed: int
    percent_complete: float
    stage: str
    stage_source: str   # "milestones" or "thresholds"
    harvest_ready: bool
    next_milestone: str


class MilestoneStatus(BaseModel):
    name: str
    estimated_days: float
    reached: bool
    past: bool
    current: bool
    due_date: Optional[date] = None


class WateringStatus(BaseModel):
    urgency: WateringUrgency
    days_since_watering: int
    days_until_next: int
    adjusted_interval_days: int
    message: str
    color_tag: str
    should_notify: bool


class WateringNotification(BaseModel):
    plant_name: str
    status: WateringStatus


class TrackerSummary(BaseModel):
    total_tracked: int
    planted: int
    planned: int
    needs_water: int
    ready_to_harvest: int


# ── Requests ──────────────────────────────────────────────────────────────────


class TrackedPlantRequest(BaseModel):
    plant: TrackedPlantState
    today: Optional[date] = None


class WateringRequest(BaseModel):
    plant: TrackedPlantState
    weather: Optional[WeatherReading] = None
    today: Optional[date] = None


class TrackerBatchRequest(BaseModel):
    plants: list[TrackedPlantState]
    weather: Optional[WeatherReading] = None
    today: Optional[date] = None
