from __future__ import annotations

import logging
from typing import Dict
from uuid import uuid4

from fastapi import FastAPI, HTTPException

from .config import load_settings
from .models.canvas import CanvasSnapshot
from .models.taxes import TaxRegion, get_region_by_id, group_regions_by_zone
from .schemas import (
    CanvasCreateRequest,
    CanvasCreateResponse,
    CanvasListResponse,
    CanvasRunRequest,
    CanvasRunResponse,
    DepreciationRequest,
    DepreciationResponse,
    TaxRegionListResponse,
)
from .services.calculator import CanvasCalculator, calculate_depreciation


settings = load_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Business Canvas Engine", version="0.1.0")

CANVASES: Dict[str, CanvasSnapshot] = {}
calculator = CanvasCalculator(settings)


def _blank_canvas() -> CanvasSnapshot:
    return CanvasSnapshot(
        growth_rate=settings.default_growth_rate,
        tax_region=settings.default_tax_region,
        custom_tax_rate=settings.default_tax_rate,
    )


@app.post("/canvases", response_model=CanvasCreateResponse)
def create_canvas(payload: CanvasCreateRequest) -> CanvasCreateResponse:
    if payload.canvas is not None:
        canvas = payload.canvas
    elif payload.clone_from:
        source = CANVASES.get(payload.clone_from)
        if source is None:
            raise HTTPException(status_code=404, detail=f"Canvas {payload.clone_from} not found")
        canvas = source.model_copy(deep=True)
    else:
        canvas = _blank_canvas()
    canvas_id = str(uuid4())
    CANVASES[canvas_id] = canvas
    logger.info("Registered canvas %s (%d equipment, %d products)", canvas_id, len(canvas.equipment), len(canvas.products))
    return CanvasCreateResponse(canvas_id=canvas_id)


@app.get("/canvases", response_model=CanvasListResponse)
def list_canvases() -> CanvasListResponse:
    return CanvasListResponse(canvases=list(CANVASES.keys()))


@app.post("/run", response_model=CanvasRunResponse)
def run_canvas(payload: CanvasRunRequest) -> CanvasRunResponse:
    canvas: CanvasSnapshot | None = None
    if payload.canvas is not None:
        canvas = payload.canvas
    elif payload.canvas_id:
        canvas = CANVASES.get(payload.canvas_id)
    if canvas is None:
        raise HTTPException(status_code=404, detail="Canvas not found")
    if payload.growth_rate is not None:
        canvas = canvas.model_copy(update={"growth_rate": payload.growth_rate})
    result = calculator.run(canvas)
    return CanvasRunResponse(result=result)


@app.get("/canvases/{canvas_id}", response_model=CanvasRunResponse)
def get_canvas_projection(canvas_id: str) -> CanvasRunResponse:
    canvas = CANVASES.get(canvas_id)
    if canvas is None:
        raise HTTPException(status_code=404, detail="Canvas not found")
    result = calculator.run(canvas)
    return CanvasRunResponse(result=result)


@app.post("/depreciation", response_model=DepreciationResponse)
def depreciation(payload: DepreciationRequest) -> DepreciationResponse:
    result = calculate_depreciation(payload.unit_value, payload.quantity, payload.lifespan)
    return DepreciationResponse(result=result)


@app.get("/tax-regions", response_model=TaxRegionListResponse)
def list_tax_regions() -> TaxRegionListResponse:
    return TaxRegionListResponse(zones=group_regions_by_zone())


@app.get("/tax-regions/{region_id}", response_model=TaxRegion)
def get_tax_region(region_id: str) -> TaxRegion:
    region = get_region_by_id(region_id)
    if region is None:
        raise HTTPException(status_code=404, detail=f"Tax region {region_id} not found")
    return region


@app.get("/health")
def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}
