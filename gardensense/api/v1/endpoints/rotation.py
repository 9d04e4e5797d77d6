from fastapi import APIRouter

from gardensense.core.deps import Catalog
from gardensense.schemas.rotation import RotationAdvice, RotationRequest
from gardensense.services.rotation import suggest_rotation

router = APIRouter(prefix="/rotation", tags=["rotation"])


@router.post("/suggest", response_model=RotationAdvice)
async def rotation_suggestions(data: RotationRequest, catalog: Catalog):
    return suggest_rotation(catalog, data.plant_name, data.previous_plants)
