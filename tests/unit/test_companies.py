"""Unit tests for venture founding"""

import pytest
from empire_finance.domain.catalogs import get_industry
from empire_finance.domain.companies import (
    as_holding,
    can_afford_industry,
    can_afford_upgrade,
    create_company,
    upgrade_cost,
)
from empire_finance.domain.exceptions import InsufficientFunds, InvalidCompanyName, UnknownCatalogEntry
from empire_finance.domain.models import HoldingKind


def test_create_company_starts_at_level_one():
    tech = get_industry("tech")
    company = create_company(tech, "  Byte Works ", cash=300_000).unwrap()

    assert company.name == "Byte Works"
    assert company.industry == "tech"
    assert company.level == 1
    assert company.shares_owned == 100
    assert company.market_value == tech.base_cost
    assert company.current_income == tech.base_income
    assert company.upgrade_cost == pytest.approx(tech.base_cost * 1.5)


def test_create_company_needs_a_name():
    result = create_company(get_industry("lemonade"), "   ", cash=10_000)
    assert isinstance(result.error, InvalidCompanyName)


def test_create_company_needs_cash():
    result = create_company(get_industry("film"), "Big Pictures", cash=400_000)

    assert isinstance(result.error, InsufficientFunds)
    assert result.error.shortfall == 600_000


def test_affordability_helpers():
    lemonade = get_industry("lemonade")
    company = create_company(lemonade, "Sour Power", cash=1_000).unwrap()

    assert can_afford_industry(lemonade, 1_000)
    assert not can_afford_industry(lemonade, 999)
    assert can_afford_upgrade(company, 1_500)
    assert not can_afford_upgrade(company, 1_499)


def test_upgrade_cost_grows_with_level():
    assert upgrade_cost(1_000, 2) == pytest.approx(2_250)


def test_unknown_industry():
    with pytest.raises(UnknownCatalogEntry):
        get_industry("space-mining")


def test_company_as_holding():
    company = create_company(get_industry("tech"), "Byte Works", cash=300_000).unwrap()
    holding = as_holding(company)

    assert holding.kind == HoldingKind.VENTURE
    assert holding.shares_owned == 100
    assert holding.market_value == company.market_value
