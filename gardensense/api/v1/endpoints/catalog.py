from fastapi import APIRouter, HTTPException

from gardensense.core.deps import Catalog
from gardensense.schemas.catalog import PlantCatalogEntry, PlantNameList

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/plants", response_model=PlantNameList)
async def list_plants(catalog: Catalog):
    names = catalog.plant_names()
    names += [n for n in catalog.requirement_names() if catalog.lookup_companion(n) is None]
    return PlantNameList(items=names, total=len(names))


@router.get("/plants/{name}", response_model=PlantCatalogEntry)
async def get_plant(name: str, catalog: Catalog):
    entry = catalog.entry(name)
    if entry is None:
        raise HTTPException(status_code=404, detail="Plant not found")
    return entry
