from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .models.canvas import CanvasSnapshot
from .models.results import CanvasResult, DepreciationResult
from .models.taxes import TaxRegion


class CanvasCreateRequest(BaseModel):
    canvas: Optional[CanvasSnapshot] = None
    clone_from: Optional[str] = Field(default=None, description="Canvas ID to clone from")


class CanvasCreateResponse(BaseModel):
    canvas_id: str


class CanvasRunRequest(BaseModel):
    canvas_id: Optional[str] = None
    canvas: Optional[CanvasSnapshot] = None
    growth_rate: Optional[float] = None


class CanvasListResponse(BaseModel):
    canvases: List[str]


class CanvasRunResponse(BaseModel):
    result: CanvasResult


class DepreciationRequest(BaseModel):
    unit_value: float
    quantity: int = 1
    lifespan: int = 60


class DepreciationResponse(BaseModel):
    result: DepreciationResult


class TaxRegionListResponse(BaseModel):
    zones: Dict[str, List[TaxRegion]]
