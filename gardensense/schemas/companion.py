from enum import Enum
from typing import Optional

from pydantic import BaseModel


class CompanionStatus(str, Enum):
    good = "good"
    bad = "bad"
    neutral = "neutral"


class CompanionRelationship(BaseModel):
    plant: str
    status: CompanionStatus
    reason: Optional[str] = None


class CompanionRelationships(BaseModel):
    plant_name: str
    family: Optional[str] = None
    relationships: list[CompanionRelationship]


class PairCompatibility(BaseModel):
    plant: str
    other: str
    forward: CompanionStatus   # plant's own record about other
    reverse: CompanionStatus   # other's own record about plant
    mutual: CompanionStatus


class CompanionSuggestionRequest(BaseModel):
    plant_name: str
    nearby_plants: list[str] = []


class CompanionSuggestions(BaseModel):
    good: list[str]
    bad: list[str]
    benefits: str
