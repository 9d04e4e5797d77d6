from fastapi import APIRouter

from gardensense.api.v1.endpoints import catalog, companions, layout, rotation, tracker

api_router = APIRouter()

api_router.include_router(catalog.router)
api_router.include_router(companions.router)
api_router.include_router(layout.router)
api_router.include_router(tracker.router)
api_router.include_router(rotation.router)
