"""
Companion planting compatibility.

Companion data is directional: a plant's record says who it likes and
dislikes, and nothing about how the other plant feels in return. ``check_pair``
answers from the first plant's record only; ``mutual_status`` is the one place
both directions are combined.
"""
from typing import Iterable, Optional

from gardensense.schemas.companion import (
    CompanionRelationship,
    CompanionStatus,
    CompanionSuggestions,
    PairCompatibility,
)
from gardensense.services.catalog import GardenCatalog


def check_pair(catalog: GardenCatalog, plant: str, other: str) -> CompanionStatus:
    record = catalog.lookup_companion(plant)
    if record is None:
        return CompanionStatus.neutral
    if other in record.good_companions:
        return CompanionStatus.good
    if other in record.bad_companions:
        return CompanionStatus.bad
    return CompanionStatus.neutral


def mutual_status(catalog: GardenCatalog, plant: str, other: str) -> CompanionStatus:
    """Bad in either direction wins, then good in either direction."""
    statuses = {check_pair(catalog, plant, other), check_pair(catalog, other, plant)}
    if CompanionStatus.bad in statuses:
        return CompanionStatus.bad
    if CompanionStatus.good in statuses:
        return CompanionStatus.good
    return CompanionStatus.neutral


def pair_compatibility(catalog: GardenCatalog, plant: str, other: str) -> PairCompatibility:
    return PairCompatibility(
        plant=plant,
        other=other,
        forward=check_pair(catalog, plant, other),
        reverse=check_pair(catalog, other, plant),
        mutual=mutual_status(catalog, plant, other),
    )


def relationships_for(catalog: GardenCatalog, plant: str) -> list[CompanionRelationship]:
    record = catalog.lookup_companion(plant)
    if record is None:
        return []

    relationships = [
        CompanionRelationship(plant=name, status=CompanionStatus.good, reason=record.benefits)
        for name in record.good_companions
    ]
    relationships.extend(
        CompanionRelationship(plant=name, status=CompanionStatus.bad)
        for name in record.bad_companions
    )
    return relationships


def family_of(catalog: GardenCatalog, plant: str) -> Optional[str]:
    record = catalog.lookup_companion(plant)
    return record.family if record else None


def companion_suggestions(
    catalog: GardenCatalog, plant: str, nearby: Iterable[str]
) -> CompanionSuggestions:
    """Split the plants already nearby into good and bad neighbours for ``plant``."""
    record = catalog.lookup_companion(plant)
    if record is None:
        return CompanionSuggestions(good=[], bad=[], benefits="")

    nearby_set = set(nearby)
    return CompanionSuggestions(
        good=[name for name in record.good_companions if name in nearby_set],
        bad=[name for name in record.bad_companions if name in nearby_set],
        benefits=record.benefits,
    )
