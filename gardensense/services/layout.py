"""
Bed layout analysis.

Scans a planting grid cell by cell (row-major) and emits alerts for
overcrowding, companion conflicts/synergies, mixed water needs and shading.
Each grid cell is assumed to be roughly 6 inches square.

Never raises for missing catalog data or ragged rows; those simply produce
fewer alerts.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from gardensense.schemas.catalog import HeightClass, PlantRequirements, Sunlight
from gardensense.schemas.companion import CompanionStatus
from gardensense.schemas.layout import AlertKind, AlertSeverity, LayoutAlert, PlacedPlant
from gardensense.services.catalog import GardenCatalog
from gardensense.services.companions import check_pair

logger = logging.getLogger(__name__)

Grid = Sequence[Sequence[Optional[PlacedPlant]]]

WIDE_SPACING_INCHES = 18
CROWDED_NEIGHBOR_COUNT = 6
WATER_MISMATCH_NEIGHBOR_COUNT = 3
SHADING_TALL_NEIGHBOR_COUNT = 2

_COMPANION_KINDS = {AlertKind.companion_conflict, AlertKind.companion_synergy}

# Moore neighbourhood, in scan order
_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


@dataclass
class _Neighbor:
    plant: PlacedPlant
    row: int
    col: int
    requirements: Optional[PlantRequirements]


def _cell(grid: Grid, row: int, col: int) -> Optional[PlacedPlant]:
    # rows may differ in length, so check each one on its own
    if row < 0 or row >= len(grid):
        return None
    cells = grid[row]
    if col < 0 or col >= len(cells):
        return None
    return cells[col]


def occupied_neighbors(catalog: GardenCatalog, grid: Grid, row: int, col: int) -> list[_Neighbor]:
    neighbors = []
    for dr, dc in _OFFSETS:
        plant = _cell(grid, row + dr, col + dc)
        if plant is not None:
            neighbors.append(
                _Neighbor(plant, row + dr, col + dc, catalog.lookup_requirements(plant.key))
            )
    return neighbors


# ── Rules ─────────────────────────────────────────────────────────────────────


def _spacing_alert(
    plant: PlacedPlant, req: PlantRequirements, row: int, col: int, neighbors: list[_Neighbor]
) -> Optional[LayoutAlert]:
    if req.spacing < WIDE_SPACING_INCHES or len(neighbors) < CROWDED_NEIGHBOR_COUNT:
        return None
    return LayoutAlert(
        kind=AlertKind.spacing,
        severity=AlertSeverity.warning,
        message=f'{plant.name} needs {req.spacing}" spacing. Consider more room for optimal growth.',
        cells=[(row, col)],
    )


def _companion_alerts(
    catalog: GardenCatalog, plant: PlacedPlant, row: int, col: int, neighbors: list[_Neighbor]
) -> list[LayoutAlert]:
    alerts = []
    for n in neighbors:
        status = check_pair(catalog, plant.key, n.plant.key)
        cells = [(row, col), (n.row, n.col)]
        if status is CompanionStatus.bad:
            alerts.append(LayoutAlert(
                kind=AlertKind.companion_conflict,
                severity=AlertSeverity.error,
                message=f"{plant.name} and {n.plant.name} are incompatible companions!",
                cells=cells,
            ))
        elif status is CompanionStatus.good:
            alerts.append(LayoutAlert(
                kind=AlertKind.companion_synergy,
                severity=AlertSeverity.info,
                message=f"{plant.name} and {n.plant.name} are excellent companions!",
                cells=cells,
            ))
    return alerts


def _water_alert(
    plant: PlacedPlant, req: PlantRequirements, row: int, col: int, neighbors: list[_Neighbor]
) -> Optional[LayoutAlert]:
    mismatched = [n for n in neighbors if n.requirements and n.requirements.water != req.water]
    if len(mismatched) < WATER_MISMATCH_NEIGHBOR_COUNT:
        return None
    return LayoutAlert(
        kind=AlertKind.water_mismatch,
        severity=AlertSeverity.warning,
        message=f"{plant.name} ({req.water.value} water) surrounded by plants with different water needs.",
        cells=[(row, col)],
    )


def _shading_alert(
    plant: PlacedPlant, req: PlantRequirements, row: int, col: int, neighbors: list[_Neighbor]
) -> Optional[LayoutAlert]:
    if req.sunlight is not Sunlight.full or req.height is not HeightClass.low:
        return None
    tall = [n for n in neighbors if n.requirements and n.requirements.height is HeightClass.tall]
    if len(tall) < SHADING_TALL_NEIGHBOR_COUNT:
        return None
    return LayoutAlert(
        kind=AlertKind.sunlight_shading,
        severity=AlertSeverity.warning,
        message=f"{plant.name} needs full sun but may be shaded by nearby tall plants.",
        cells=[(row, col)],
    )


# ── Service function ──────────────────────────────────────────────────────────


def dedupe_companion_alerts(alerts: list[LayoutAlert]) -> list[LayoutAlert]:
    """Drop repeat companion alerts for the same pair of cells, keeping the first."""
    seen: set[tuple] = set()
    unique = []
    for alert in alerts:
        if alert.kind in _COMPANION_KINDS:
            key = (alert.kind, tuple(sorted(alert.cells)))
            if key in seen:
                continue
            seen.add(key)
        unique.append(alert)
    return unique


def analyze_grid(catalog: GardenCatalog, grid: Grid) -> list[LayoutAlert]:
    alerts: list[LayoutAlert] = []

    for row, cells in enumerate(grid):
        for col, plant in enumerate(cells):
            if plant is None:
                continue

            neighbors = occupied_neighbors(catalog, grid, row, col)
            req = catalog.lookup_requirements(plant.key)

            if req is not None:
                spacing = _spacing_alert(plant, req, row, col, neighbors)
                if spacing:
                    alerts.append(spacing)

            alerts.extend(_companion_alerts(catalog, plant, row, col, neighbors))

            if req is not None:
                for rule in (_water_alert, _shading_alert):
                    alert = rule(plant, req, row, col, neighbors)
                    if alert:
                        alerts.append(alert)

    unique = dedupe_companion_alerts(alerts)
    logger.debug("layout analysis: %d alerts (%d before dedupe)", len(unique), len(alerts))
    return unique


def grid_dimensions(grid: Grid) -> tuple[int, int, int]:
    """Return (rows, widest row, occupied cell count)."""
    rows = len(grid)
    cols = max((len(r) for r in grid), default=0)
    occupied = sum(1 for r in grid for cell in r if cell is not None)
    return rows, cols, occupied
