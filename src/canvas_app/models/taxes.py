from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


CUSTOM_REGION_ID = "custom"


class TaxRegion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    zone: str
    corporate_tax_rate: float
    vat_rate: float
    description: str


def _region(region_id: str, name: str, zone: str, corporate: float, vat: float, description: str) -> TaxRegion:
    return TaxRegion(id=region_id, name=name, zone=zone, corporate_tax_rate=corporate, vat_rate=vat, description=description)


TAX_REGIONS: Tuple[TaxRegion, ...] = (
    # CEMAC
    _region("cameroon", "Cameroon", "CEMAC", 33, 19.25, "Central Africa"),
    _region("gabon", "Gabon", "CEMAC", 30, 18, "Central Africa"),
    _region("congo", "Congo", "CEMAC", 28, 18, "Central Africa"),
    _region("chad", "Chad", "CEMAC", 35, 18, "Central Africa"),
    _region("car", "Central African Republic", "CEMAC", 30, 19, "Central Africa"),
    _region("eq_guinea", "Equatorial Guinea", "CEMAC", 35, 15, "Central Africa"),
    # UEMOA
    _region("senegal", "Senegal", "UEMOA", 30, 18, "West Africa"),
    _region("ivory_coast", "Côte d'Ivoire", "UEMOA", 25, 18, "West Africa"),
    _region("mali", "Mali", "UEMOA", 30, 18, "West Africa"),
    _region("burkina_faso", "Burkina Faso", "UEMOA", 27.5, 18, "West Africa"),
    _region("benin", "Benin", "UEMOA", 30, 18, "West Africa"),
    _region("togo", "Togo", "UEMOA", 27, 18, "West Africa"),
    _region("niger", "Niger", "UEMOA", 30, 19, "West Africa"),
    _region("guinea_bissau", "Guinea-Bissau", "UEMOA", 25, 17, "West Africa"),
    # Rest of Africa
    _region("nigeria", "Nigeria", "ECOWAS", 30, 7.5, "West Africa"),
    _region("ghana", "Ghana", "ECOWAS", 25, 15, "West Africa"),
    _region("kenya", "Kenya", "EAC", 30, 16, "East Africa"),
    _region("rwanda", "Rwanda", "EAC", 30, 18, "East Africa"),
    _region("south_africa", "South Africa", "SADC", 27, 15, "Southern Africa"),
    _region("morocco", "Morocco", "Maghreb", 31, 20, "North Africa"),
    _region("egypt", "Egypt", "Maghreb", 22.5, 14, "North Africa"),
    # Global
    _region("usa", "United States", "North America", 21, 0, "Federal rate only"),
    _region("canada", "Canada", "North America", 26.5, 5, "Federal + avg provincial"),
    _region("uk", "United Kingdom", "Europe", 25, 20, "Standard rate"),
    _region("france", "France", "Europe", 25, 20, "Standard rate"),
    _region("germany", "Germany", "Europe", 30, 19, "Including solidarity surcharge"),
    _region("netherlands", "Netherlands", "Europe", 25.8, 21, "Standard rate"),
    _region("uae", "United Arab Emirates", "Middle East", 9, 5, "New corporate tax 2023"),
    _region("singapore", "Singapore", "Asia", 17, 9, "GST"),
    _region("china", "China", "Asia", 25, 13, "Standard rate"),
    # Rate is ignored; callers supply their own.
    _region(CUSTOM_REGION_ID, "Custom Region", "Custom", 30, 18, "Enter your own rates"),
)


def get_region_by_id(region_id: str) -> Optional[TaxRegion]:
    for region in TAX_REGIONS:
        if region.id == region_id:
            return region
    return None


def get_regions_by_zone(zone: str) -> List[TaxRegion]:
    return [region for region in TAX_REGIONS if region.zone == zone]


def group_regions_by_zone() -> Dict[str, List[TaxRegion]]:
    grouped: Dict[str, List[TaxRegion]] = {}
    for region in TAX_REGIONS:
        grouped.setdefault(region.zone, []).append(region)
    return grouped


def resolve_tax_rate(region_id: str, custom_rate: float) -> Optional[float]:
    if region_id == CUSTOM_REGION_ID:
        return custom_rate
    region = get_region_by_id(region_id)
    if region is None:
        return None
    return region.corporate_tax_rate


def calculate_tax_amount(profit: float, tax_rate: float) -> float:
    if profit <= 0:
        return 0.0
    return profit * (tax_rate / 100)


def calculate_after_tax_profit(profit: float, tax_rate: float) -> float:
    # Losses are never taxed.
    if profit <= 0:
        return profit
    return profit * (1 - tax_rate / 100)
