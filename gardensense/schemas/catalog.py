from enum import Enum
from typing import Optional

from pydantic import BaseModel, PositiveInt


class Sunlight(str, Enum):
    full = "full"
    partial = "partial"
    shade = "shade"


class WaterNeed(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class HeightClass(str, Enum):
    low = "low"
    medium = "medium"
    tall = "tall"


class PlantRequirements(BaseModel):
    sunlight: Sunlight
    water: WaterNeed
    spacing: PositiveInt  # inches
    height: HeightClass

    model_config = {"frozen": True}


class CompanionRecord(BaseModel):
    good_companions: tuple[str, ...] = ()
    bad_companions: tuple[str, ...] = ()
    family: str
    benefits: str = ""

    model_config = {"frozen": True}


class PlantCatalogEntry(BaseModel):
    name: str
    requirements: Optional[PlantRequirements] = None
    companions: Optional[CompanionRecord] = None


class PlantNameList(BaseModel):
    items: list[str]
    total: int
