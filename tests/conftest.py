import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from gardensense.core.config import BUNDLED_CATALOG_PATH
from gardensense.core.deps import get_catalog
from gardensense.main import app
from gardensense.services.catalog import GardenCatalog, load_catalog

# Small hand-written dataset. Relations are deliberately one-sided in places:
# Tomato likes Carrot but Carrot says nothing about Tomato, and Tomato
# dislikes Cabbage while Cabbage is indifferent.
FIXTURE_DATA = {
    "companionPlantingData": {
        "Tomato": {
            "goodCompanions": ["Basil", "Carrot"],
            "badCompanions": ["Cabbage"],
            "family": "Solanaceae",
            "benefits": "Repels hornworms.",
        },
        "Basil": {
            "goodCompanions": ["Tomato"],
            "badCompanions": [],
            "family": "Lamiaceae",
            "benefits": "Confuses pests.",
        },
        "Carrot": {
            "goodCompanions": ["Onion"],
            "badCompanions": ["Dill"],
            "family": "Apiaceae",
            "benefits": "Loosens soil.",
        },
        "Cabbage": {
            "goodCompanions": ["Dill"],
            "badCompanions": [],
            "family": "Brassicaceae",
            "benefits": "Shelters beneficial insects.",
        },
        "Pepper": {
            "goodCompanions": ["Basil"],
            "badCompanions": [],
            "family": "Solanaceae",
            "benefits": "Shares pest protection.",
        },
        "Mint": {
            "goodCompanions": ["Cabbage"],
            "badCompanions": [],
            "family": "Lamiaceae",
            "benefits": "Deters cabbage moths.",
        },
        "Dill": {
            "goodCompanions": ["Cabbage"],
            "badCompanions": ["Carrot"],
            "family": "Apiaceae",
            "benefits": "Attracts predatory wasps.",
        },
    },
    "plantRequirements": {
        "Tomato": {"sunlight": "full", "water": "high", "spacing": 24, "height": "tall"},
        "Basil": {"sunlight": "full", "water": "medium", "spacing": 12, "height": "low"},
        "Carrot": {"sunlight": "full", "water": "medium", "spacing": 3, "height": "low"},
        "Cabbage": {"sunlight": "full", "water": "high", "spacing": 18, "height": "medium"},
        "Pepper": {"sunlight": "full", "water": "medium", "spacing": 18, "height": "medium"},
        "Dill": {"sunlight": "full", "water": "low", "spacing": 12, "height": "tall"},
        "Squash": {"sunlight": "full", "water": "high", "spacing": 36, "height": "medium"},
        "Lettuce": {"sunlight": "partial", "water": "high", "spacing": 8, "height": "low"},
    },
}


@pytest.fixture
def catalog() -> GardenCatalog:
    return GardenCatalog.from_dict(FIXTURE_DATA)


@pytest.fixture(scope="session")
def bundled_catalog() -> GardenCatalog:
    return load_catalog(BUNDLED_CATALOG_PATH)


@pytest_asyncio.fixture
async def client(catalog: GardenCatalog):
    app.dependency_overrides[get_catalog] = lambda: catalog

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
