from __future__ import annotations

import logging
import math
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from ..config import EngineSettings
from ..models.canvas import CanvasSnapshot
from ..models.results import (
    BREAK_EVEN_NEVER,
    CanvasResult,
    DepreciationResult,
    FinancialMetrics,
    TaxedProjection,
    TaxSummary,
    YearlyProjection,
)
from ..models.taxes import calculate_after_tax_profit, calculate_tax_amount, resolve_tax_rate


logger = logging.getLogger(__name__)

PROJECTION_YEARS = 3


def calculate_depreciation(unit_value: float, quantity: float, lifespan_months: int) -> DepreciationResult:
    total_value = unit_value * quantity
    monthly = total_value / lifespan_months if lifespan_months > 0 else 0.0
    return DepreciationResult(monthly=monthly, semi_annual=monthly * 6)


def calculate_financial_metrics(canvas: CanvasSnapshot) -> FinancialMetrics:
    total_investment = sum(eq.unit_value * eq.quantity for eq in canvas.equipment)
    monthly_depreciation = sum(
        calculate_depreciation(eq.unit_value, eq.quantity, eq.lifespan).monthly for eq in canvas.equipment
    )
    monthly_personnel_cost = sum(p.monthly_salary * p.count for p in canvas.personnel)
    monthly_activity_cost = sum(a.unit_value * a.monthly_count for a in canvas.activities)
    monthly_other_charges = sum(c.monthly_value for c in canvas.other_charges)
    monthly_raw_materials = sum(r.monthly_value for r in canvas.raw_materials)
    monthly_revenue = sum(p.price * p.monthly_quantity for p in canvas.products)

    monthly_expenses = (
        monthly_depreciation
        + monthly_personnel_cost
        + monthly_activity_cost
        + monthly_other_charges
        + monthly_raw_materials
    )
    monthly_cash_flow = monthly_revenue - monthly_expenses

    break_even_months = BREAK_EVEN_NEVER
    if monthly_cash_flow > 0:
        ratio = total_investment / monthly_cash_flow
        if math.isfinite(ratio):
            break_even_months = math.ceil(ratio)

    metrics = FinancialMetrics(
        monthly_revenue=monthly_revenue,
        monthly_expenses=monthly_expenses,
        monthly_cash_flow=monthly_cash_flow,
        semi_annual_revenue=monthly_revenue * 6,
        semi_annual_expenses=monthly_expenses * 6,
        semi_annual_cash_flow=monthly_cash_flow * 6,
        annual_revenue=monthly_revenue * 12,
        annual_expenses=monthly_expenses * 12,
        annual_cash_flow=monthly_cash_flow * 12,
        total_investment=total_investment,
        monthly_depreciation=monthly_depreciation,
        monthly_personnel_cost=monthly_personnel_cost,
        monthly_activity_cost=monthly_activity_cost,
        monthly_other_charges=monthly_other_charges,
        monthly_raw_materials=monthly_raw_materials,
        break_even_months=break_even_months,
    )
    logger.debug(
        "metrics: revenue=%.2f expenses=%.2f cash_flow=%.2f break_even=%d",
        monthly_revenue,
        monthly_expenses,
        monthly_cash_flow,
        break_even_months,
    )
    return metrics


def calculate_projections(canvas: CanvasSnapshot, metrics: FinancialMetrics) -> List[YearlyProjection]:
    projections: List[YearlyProjection] = []
    cumulative_profit = -metrics.total_investment
    growth_multiplier = 1 + canvas.growth_rate / 100
    start_date = canvas.project_info.start_date

    for year in range(1, PROJECTION_YEARS + 1):
        # Revenue compounds; expenses grow linearly at half the rate.
        revenue = metrics.annual_revenue * growth_multiplier ** (year - 1)
        expense_growth = 1 + (canvas.growth_rate / 2 / 100) * (year - 1)
        expenses = metrics.annual_expenses * expense_growth
        profit = revenue - expenses
        cumulative_profit += profit

        if metrics.total_investment > 0:
            roi = (cumulative_profit + metrics.total_investment) / metrics.total_investment * 100
        else:
            roi = 0.0

        period_start = start_date + relativedelta(years=year - 1) if start_date is not None else None
        projections.append(
            YearlyProjection(
                year=year,
                revenue=revenue,
                expenses=expenses,
                profit=profit,
                cumulative_profit=cumulative_profit,
                roi=roi,
                period_start=period_start,
            )
        )
    return projections


def calculate_tax_summary(
    canvas: CanvasSnapshot,
    projections: List[YearlyProjection],
    default_rate: float,
) -> TaxSummary:
    tax_rate: Optional[float] = resolve_tax_rate(canvas.tax_region, canvas.custom_tax_rate)
    if tax_rate is None:
        logger.warning("Unknown tax region %r, falling back to %.2f%%", canvas.tax_region, default_rate)
        tax_rate = default_rate

    years = [
        TaxedProjection(
            year=p.year,
            profit=p.profit,
            tax_amount=calculate_tax_amount(p.profit, tax_rate),
            after_tax_profit=calculate_after_tax_profit(p.profit, tax_rate),
        )
        for p in projections
    ]
    return TaxSummary(
        region_id=canvas.tax_region,
        tax_rate=tax_rate,
        years=years,
        total_profit=sum(y.profit for y in years),
        total_tax=sum(y.tax_amount for y in years),
        total_after_tax_profit=sum(y.after_tax_profit for y in years),
    )


class CanvasCalculator:
    def __init__(self, settings: Optional[EngineSettings] = None) -> None:
        self.settings = settings or EngineSettings()

    def run(self, canvas: CanvasSnapshot) -> CanvasResult:
        metrics = calculate_financial_metrics(canvas)
        projections = calculate_projections(canvas, metrics)
        tax = calculate_tax_summary(canvas, projections, self.settings.default_tax_rate)
        return CanvasResult(metrics=metrics, projections=projections, tax=tax)
