from __future__ import annotations

import pytest
from pydantic import ValidationError

from canvas_app.models.taxes import (
    CUSTOM_REGION_ID,
    TAX_REGIONS,
    calculate_after_tax_profit,
    calculate_tax_amount,
    get_region_by_id,
    get_regions_by_zone,
    group_regions_by_zone,
    resolve_tax_rate,
)


def test_catalog_ids_are_unique():
    ids = [region.id for region in TAX_REGIONS]
    assert len(ids) == len(set(ids))
    assert len(ids) >= 25


def test_lookup_by_id():
    region = get_region_by_id("senegal")
    assert region is not None
    assert region.zone == "UEMOA"
    assert region.corporate_tax_rate == 30
    assert region.vat_rate == 18
    assert get_region_by_id("atlantis") is None


def test_regions_are_read_only():
    region = get_region_by_id("france")
    with pytest.raises(ValidationError):
        region.corporate_tax_rate = 0


def test_grouping_keeps_catalog_order():
    grouped = group_regions_by_zone()
    assert list(grouped)[0] == "CEMAC"
    assert list(grouped)[-1] == "Custom"
    assert [r.id for r in grouped["North America"]] == ["usa", "canada"]
    assert sum(len(regions) for regions in grouped.values()) == len(TAX_REGIONS)
    assert grouped["EAC"] == get_regions_by_zone("EAC")


def test_resolve_tax_rate():
    assert resolve_tax_rate("cameroon", 12) == 33
    assert resolve_tax_rate(CUSTOM_REGION_ID, 12) == 12
    assert resolve_tax_rate("atlantis", 12) is None


@pytest.mark.parametrize("profit", [0, -1, -250_000.5])
@pytest.mark.parametrize("rate", [0, 25, 100, -10])
def test_losses_are_never_taxed(profit, rate):
    assert calculate_tax_amount(profit, rate) == 0
    assert calculate_after_tax_profit(profit, rate) == profit


def test_positive_profit_is_taxed():
    assert calculate_tax_amount(1_000_000, 27.5) == pytest.approx(275_000)
    assert calculate_after_tax_profit(1_000_000, 27.5) == pytest.approx(725_000)
