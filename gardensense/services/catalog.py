"""
Plant reference catalog: physical requirements and companion records.

Both tables are loaded once from the bundled JSON document and are read-only
afterwards. Lookups never raise: a missing plant is simply ``None`` and
callers skip whatever rule needed the data.

Dataset shape:

    {
      "companionPlantingData": {
        "Tomato": {"goodCompanions": [...], "badCompanions": [...],
                   "family": "Solanaceae", "benefits": "..."}
      },
      "plantRequirements": {
        "Tomato": {"sunlight": "full", "water": "high", "spacing": 24, "height": "tall"}
      }
    }
"""
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from gardensense.core.exceptions import CatalogLoadError
from gardensense.schemas.catalog import CompanionRecord, PlantCatalogEntry, PlantRequirements

logger = logging.getLogger(__name__)

COMPANIONS_KEY = "companionPlantingData"
REQUIREMENTS_KEY = "plantRequirements"


class GardenCatalog:
    """Immutable lookup over the requirements and companion tables."""

    def __init__(
        self,
        requirements: Mapping[str, PlantRequirements],
        companions: Mapping[str, CompanionRecord],
    ) -> None:
        self._requirements = MappingProxyType(dict(requirements))
        self._companions = MappingProxyType(dict(companions))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GardenCatalog":
        return cls(
            requirements=_parse_requirements(data.get(REQUIREMENTS_KEY) or {}),
            companions=_parse_companions(data.get(COMPANIONS_KEY) or {}),
        )

    @property
    def requirements(self) -> Mapping[str, PlantRequirements]:
        return self._requirements

    @property
    def companions(self) -> Mapping[str, CompanionRecord]:
        return self._companions

    def lookup_requirements(self, name: str) -> Optional[PlantRequirements]:
        return self._requirements.get(name)

    def lookup_companion(self, name: str) -> Optional[CompanionRecord]:
        return self._companions.get(name)

    def plant_names(self) -> list[str]:
        """Companion-graph keys in dataset order."""
        return list(self._companions.keys())

    def requirement_names(self) -> list[str]:
        return list(self._requirements.keys())

    def entry(self, name: str) -> Optional[PlantCatalogEntry]:
        requirements = self.lookup_requirements(name)
        companions = self.lookup_companion(name)
        if requirements is None and companions is None:
            return None
        return PlantCatalogEntry(name=name, requirements=requirements, companions=companions)

    def __len__(self) -> int:
        return len(set(self._requirements) | set(self._companions))


def load_catalog(path: Path) -> GardenCatalog:
    """Read the reference dataset at ``path`` and build the catalog."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise CatalogLoadError(f"could not read plant catalog at {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise CatalogLoadError(f"plant catalog at {path} must be a JSON object")

    catalog = GardenCatalog.from_dict(raw)
    logger.info(
        "plant catalog loaded from %s: %d requirement entries, %d companion records",
        path,
        len(catalog.requirements),
        len(catalog.companions),
    )
    return catalog


# ── Parsing ───────────────────────────────────────────────────────────────────


def _parse_requirements(table: Mapping[str, Any]) -> dict[str, PlantRequirements]:
    parsed: dict[str, PlantRequirements] = {}
    for name, value in table.items():
        try:
            parsed[name] = PlantRequirements.model_validate(value)
        except ValidationError as exc:
            logger.warning("skipping requirements for %r: %s", name, exc.errors())
    return parsed


def _parse_companions(table: Mapping[str, Any]) -> dict[str, CompanionRecord]:
    parsed: dict[str, CompanionRecord] = {}
    for name, value in table.items():
        if not isinstance(value, Mapping):
            logger.warning("skipping companion record for %r: not an object", name)
            continue
        try:
            record = CompanionRecord(
                good_companions=tuple(value.get("goodCompanions") or ()),
                bad_companions=tuple(value.get("badCompanions") or ()),
                family=value.get("family"),
                benefits=value.get("benefits") or "",
            )
        except ValidationError as exc:
            logger.warning("skipping companion record for %r: %s", name, exc.errors())
            continue

        overlap = set(record.good_companions) & set(record.bad_companions)
        if overlap:
            logger.warning(
                "%s lists %s as both good and bad companions; good takes precedence",
                name,
                ", ".join(sorted(overlap)),
            )
        parsed[name] = record
    return parsed
