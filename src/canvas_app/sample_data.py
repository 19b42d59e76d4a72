from __future__ import annotations

from datetime import date

from .models.canvas import CanvasSnapshot, ProjectInfo
from .models.line_items import (
    Activity,
    CustomerSegment,
    Equipment,
    OtherCharge,
    Personnel,
    Product,
    RawMaterial,
)


def build_sample_canvas() -> CanvasSnapshot:
    project_info = ProjectInfo(
        name="Boulangerie du Centre",
        promoter="A. Mballa",
        location="Yaoundé",
        sector="Food processing",
        start_date=date(2025, 1, 1),
    )

    equipment = [
        Equipment(id="oven", name="Industrial oven", unit_value=4_500_000, quantity=1, lifespan=120),
        Equipment(id="mixer", name="Dough mixer", unit_value=900_000, quantity=2, lifespan=60),
        Equipment(id="van", name="Delivery van", unit_value=6_000_000, quantity=1, lifespan=72),
    ]

    personnel = [
        Personnel(id="baker", role="Baker", monthly_salary=150_000, count=3),
        Personnel(id="seller", role="Sales clerk", monthly_salary=90_000, count=2),
        Personnel(id="driver", role="Driver", monthly_salary=100_000, count=1),
    ]

    activities = [
        Activity(id="delivery", name="Deliveries", unit_value=2_500, monthly_count=120),
        Activity(id="marketing", name="Radio spots", unit_value=25_000, monthly_count=4),
    ]

    products = [
        Product(id="bread", name="Baguette", price=150, monthly_quantity=12_000),
        Product(id="pastry", name="Croissant", price=300, monthly_quantity=3_000),
        Product(id="cake", name="Cake", price=8_000, monthly_quantity=60),
    ]

    customers = [
        CustomerSegment(id="households", name="Households", monthly_target=2_000),
        CustomerSegment(id="hotels", name="Hotels and restaurants", monthly_target=15),
    ]

    other_charges = [
        OtherCharge(id="rent", name="Rent", monthly_value=250_000),
        OtherCharge(id="power", name="Electricity", monthly_value=180_000),
    ]

    raw_materials = [
        RawMaterial(id="flour", name="Flour", monthly_value=900_000),
        RawMaterial(id="butter", name="Butter and eggs", monthly_value=350_000),
    ]

    return CanvasSnapshot(
        project_info=project_info,
        equipment=equipment,
        personnel=personnel,
        activities=activities,
        products=products,
        customers=customers,
        other_charges=other_charges,
        raw_materials=raw_materials,
        growth_rate=15,
        tax_region="cameroon",
    )
