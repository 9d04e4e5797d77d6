from typing import Iterable

from gardensense.schemas.rotation import RotationAdvice
from gardensense.services.catalog import GardenCatalog
from gardensense.services.companions import family_of

MAX_SUGGESTIONS = 10


def suggest_rotation(
    catalog: GardenCatalog, plant: str, previous_plants: Iterable[str]
) -> RotationAdvice:
    """Advise against replanting a family that already grew in this bed."""
    family = family_of(catalog, plant)
    if not family:
        return RotationAdvice(should_rotate=False, reason="Unknown plant family", suggestions=[])

    if not any(family_of(catalog, p) == family for p in previous_plants):
        return RotationAdvice(should_rotate=False, reason="Good rotation", suggestions=[])

    suggestions: list[str] = []
    for name in catalog.plant_names():
        other = family_of(catalog, name)
        if other and other != family and name not in suggestions:
            suggestions.append(name)
        if len(suggestions) == MAX_SUGGESTIONS:
            break

    return RotationAdvice(
        should_rotate=True,
        reason=f"Same family ({family}) planted recently. Rotate to prevent soil depletion.",
        suggestions=suggestions,
    )
