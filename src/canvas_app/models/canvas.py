from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from .line_items import (
    Activity,
    CustomerSegment,
    Equipment,
    OtherCharge,
    Personnel,
    Product,
    RawMaterial,
)
from .taxes import CUSTOM_REGION_ID


class ProjectInfo(BaseModel):
    name: str = ""
    promoter: str = ""
    location: str = ""
    sector: str = ""
    start_date: Optional[date] = None


class CanvasSnapshot(BaseModel):
    project_info: ProjectInfo = Field(default_factory=ProjectInfo)
    equipment: List[Equipment] = Field(default_factory=list)
    personnel: List[Personnel] = Field(default_factory=list)
    activities: List[Activity] = Field(default_factory=list)
    products: List[Product] = Field(default_factory=list)
    customers: List[CustomerSegment] = Field(default_factory=list)
    other_charges: List[OtherCharge] = Field(default_factory=list)
    raw_materials: List[RawMaterial] = Field(default_factory=list)
    growth_rate: float = Field(15.0, description="Annual growth rate in percent (15 means 15%)")
    tax_region: str = Field("cameroon", description=f"Tax region id, or '{CUSTOM_REGION_ID}' to use custom_tax_rate")
    custom_tax_rate: float = Field(30.0, description="Corporate tax rate in percent, used with the custom region")
