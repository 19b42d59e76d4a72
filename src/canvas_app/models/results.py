from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


# Break-even saturation value: "never breaks even under current assumptions".
BREAK_EVEN_NEVER = 999


class DepreciationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly: float
    semi_annual: float


class FinancialMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly_revenue: float
    monthly_expenses: float
    monthly_cash_flow: float
    semi_annual_revenue: float
    semi_annual_expenses: float
    semi_annual_cash_flow: float
    annual_revenue: float
    annual_expenses: float
    annual_cash_flow: float
    total_investment: float
    monthly_depreciation: float
    monthly_personnel_cost: float
    monthly_activity_cost: float
    monthly_other_charges: float
    monthly_raw_materials: float
    break_even_months: int

    @property
    def reaches_break_even(self) -> bool:
        return self.break_even_months < BREAK_EVEN_NEVER


class YearlyProjection(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    revenue: float
    expenses: float
    profit: float
    cumulative_profit: float
    roi: float
    period_start: Optional[date] = None


class TaxedProjection(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    profit: float
    tax_amount: float
    after_tax_profit: float


class TaxSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    region_id: str
    tax_rate: float
    years: List[TaxedProjection]
    total_profit: float
    total_tax: float
    total_after_tax_profit: float


class CanvasResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    metrics: FinancialMetrics
    projections: List[YearlyProjection]
    tax: TaxSummary
