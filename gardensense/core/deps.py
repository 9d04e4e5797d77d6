from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from gardensense.core.config import settings
from gardensense.services.catalog import GardenCatalog, load_catalog


@lru_cache
def get_catalog() -> GardenCatalog:
    """Load the reference catalog once per process."""
    return load_catalog(settings.catalog_path)


Catalog = Annotated[GardenCatalog, Depends(get_catalog)]
