from fastapi import APIRouter

from gardensense.core.deps import Catalog
from gardensense.schemas.layout import LayoutAnalysis, LayoutAnalysisRequest
from gardensense.services.layout import analyze_grid, grid_dimensions

router = APIRouter(prefix="/layout", tags=["layout"])


@router.post("/analyze", response_model=LayoutAnalysis)
async def analyze_layout(data: LayoutAnalysisRequest, catalog: Catalog):
    rows, cols, occupied = grid_dimensions(data.grid)
    return LayoutAnalysis(
        rows=rows,
        cols=cols,
        occupied=occupied,
        alerts=analyze_grid(catalog, data.grid),
    )
