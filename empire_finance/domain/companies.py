"""Venture creation and upgrade affordability"""

import uuid

from empire_finance.domain.exceptions import InsufficientFunds, InvalidCompanyName
from empire_finance.domain.models import Company, Holding, HoldingKind, Industry
from empire_finance.domain.results import Result

UPGRADE_COST_GROWTH = 1.5
MAX_COMPANY_NAME_LENGTH = 60


def upgrade_cost(base_cost: float, level: int) -> float:
    """Cost to go from `level` to `level + 1`"""
    return base_cost * UPGRADE_COST_GROWTH ** level


def can_afford_industry(industry: Industry, cash: float) -> bool:
    return cash >= industry.base_cost


def can_afford_upgrade(company: Company, cash: float) -> bool:
    return cash >= company.upgrade_cost


def create_company(industry: Industry, name: str, cash: float) -> Result[Company]:
    """
    Found a new level-1 venture, fully owned by the player.

    The name is trimmed; blank or overlong names are rejected before cash
    is considered.
    """
    name = name.strip()
    if not name or len(name) > MAX_COMPANY_NAME_LENGTH:
        return Result.failure(
            InvalidCompanyName(
                f"Company name must be 1-{MAX_COMPANY_NAME_LENGTH} characters",
                bound=MAX_COMPANY_NAME_LENGTH,
                actual=len(name),
            )
        )

    if not can_afford_industry(industry, cash):
        return Result.failure(
            InsufficientFunds(
                f"A {industry.name} costs {industry.base_cost:,.0f} to start",
                bound=cash,
                actual=industry.base_cost,
                shortfall=industry.base_cost - cash,
            )
        )

    return Result.success(
        Company(
            id=str(uuid.uuid4()),
            name=name,
            industry=industry.id,
            level=1,
            market_value=industry.base_cost,
            current_income=industry.base_income,
            shares_owned=100.0,
            upgrade_cost=upgrade_cost(industry.base_cost, 1),
            icon=industry.icon,
        )
    )


def as_holding(company: Company) -> Holding:
    """View a venture as a tradeable holding"""
    return Holding(
        id=company.id,
        kind=HoldingKind.VENTURE,
        market_value=company.market_value,
        shares_owned=company.shares_owned,
        current_income=company.current_income,
        name=company.name,
        industry=company.industry,
    )
