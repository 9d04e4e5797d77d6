from fastapi import APIRouter

from gardensense.core.deps import Catalog
from gardensense.schemas.companion import (
    CompanionRelationships,
    CompanionSuggestionRequest,
    CompanionSuggestions,
    PairCompatibility,
)
from gardensense.services.companions import (
    companion_suggestions,
    family_of,
    pair_compatibility,
    relationships_for,
)

router = APIRouter(prefix="/companions", tags=["companions"])


@router.post("/suggestions", response_model=CompanionSuggestions)
async def suggestions_for_nearby(data: CompanionSuggestionRequest, catalog: Catalog):
    return companion_suggestions(catalog, data.plant_name, data.nearby_plants)


@router.get("/{name}", response_model=CompanionRelationships)
async def get_relationships(name: str, catalog: Catalog):
    return CompanionRelationships(
        plant_name=name,
        family=family_of(catalog, name),
        relationships=relationships_for(catalog, name),
    )


@router.get("/{name}/check/{other}", response_model=PairCompatibility)
async def check_compatibility(name: str, other: str, catalog: Catalog):
    return pair_compatibility(catalog, name, other)
