from enum import Enum
from typing import Optional

from pydantic import BaseModel


class AlertKind(str, Enum):
    spacing = "spacing"
    companion_conflict = "companion-conflict"
    companion_synergy = "companion-synergy"
    water_mismatch = "water-mismatch"
    sunlight_shading = "sunlight-shading"


class AlertSeverity(str, Enum):
    info = "info"
    warning = "warning"
    error = "error"


class PlacedPlant(BaseModel):
    name: str
    catalog_key: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def key(self) -> str:
        return self.catalog_key or self.name


class LayoutAlert(BaseModel):
    kind: AlertKind
    severity: AlertSeverity
    message: str
    cells: list[tuple[int, int]]


class LayoutAnalysisRequest(BaseModel):
    grid: list[list[Optional[PlacedPlant]]]


class LayoutAnalysis(BaseModel):
    rows: int
    cols: int
    occupied: int
    alerts: list[LayoutAlert]
