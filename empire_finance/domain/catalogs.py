"""Immutable game catalogs: loan products, production tiers, industries"""

from datetime import timedelta
from types import MappingProxyType
from typing import Mapping, Tuple

from empire_finance.domain.exceptions import UnknownCatalogEntry
from empire_finance.domain.models import (
    Industry,
    LoanOffer,
    LoanType,
    ProjectType,
    ProjectTypeInfo,
)

LOAN_OFFERS: Tuple[LoanOffer, ...] = (
    LoanOffer(
        type=LoanType.SMALL,
        name="Small Business Loan",
        description="Quick capital for a first venture or a modest expansion",
        min_amount=1_000,
        max_amount=50_000,
        base_interest_rate=0.08,
        term_months=12,
        credit_score_required=580,
    ),
    LoanOffer(
        type=LoanType.MEDIUM,
        name="Growth Loan",
        description="Mid-sized financing for scaling established companies",
        min_amount=50_000,
        max_amount=500_000,
        base_interest_rate=0.065,
        term_months=36,
        credit_score_required=650,
    ),
    LoanOffer(
        type=LoanType.LARGE,
        name="Corporate Loan",
        description="Serious capital for acquisitions and blockbuster bets",
        min_amount=500_000,
        max_amount=5_000_000,
        base_interest_rate=0.05,
        term_months=60,
        credit_score_required=720,
    ),
    LoanOffer(
        type=LoanType.EMERGENCY,
        name="Emergency Loan",
        description="Available to anyone, at a steep price",
        min_amount=1_000,
        max_amount=25_000,
        base_interest_rate=0.18,
        term_months=6,
        credit_score_required=300,
    ),
)

PROJECT_TYPES: Tuple[ProjectTypeInfo, ...] = (
    ProjectTypeInfo(
        type=ProjectType.MOVIE,
        name="Feature Film",
        min_budget=1_000_000,
        max_budget=300_000_000,
        production_time=timedelta(seconds=15),
        description="Big screen blockbusters with highest earning potential",
        examples="Indie ($1M-10M) • Mid-budget ($10M-75M) • Blockbuster ($100M+)",
    ),
    ProjectTypeInfo(
        type=ProjectType.SERIES,
        name="TV Series",
        min_budget=500_000,
        max_budget=20_000_000,
        production_time=timedelta(seconds=25),
        description="Streaming series with steady, reliable returns",
        examples="Cable TV ($500K-2M) • Premium TV ($5M-10M) • Prestige ($15M+)",
    ),
    ProjectTypeInfo(
        type=ProjectType.DOCUMENTARY,
        name="Documentary",
        min_budget=100_000,
        max_budget=5_000_000,
        production_time=timedelta(seconds=10),
        description="Lower budget but critically acclaimed productions",
        examples="Independent ($100K-500K) • Network ($1M-2M) • Major ($3M+)",
    ),
)

INDUSTRIES: Tuple[Industry, ...] = (
    Industry(id="lemonade", name="Lemonade Stand", base_cost=1_000, base_income=1, icon="🍋"),
    Industry(id="food-truck", name="Food Truck", base_cost=25_000, base_income=20, icon="🚚"),
    Industry(id="tech", name="Tech Startup", base_cost=250_000, base_income=180, icon="💻"),
    Industry(id="film", name="Film Studio", base_cost=1_000_000, base_income=600, icon="🎬"),
    Industry(id="real-estate", name="Real Estate", base_cost=5_000_000, base_income=2_500, icon="🏢"),
)

# Share steps offered per trade
VENTURE_SHARE_STEPS: Tuple[int, ...] = (5, 10, 20)
REAL_COMPANY_SHARE_STEPS: Tuple[int, ...] = (1, 5, 10)

_OFFERS_BY_TYPE: Mapping[LoanType, LoanOffer] = MappingProxyType({o.type: o for o in LOAN_OFFERS})
_PROJECT_TYPES_BY_TYPE: Mapping[ProjectType, ProjectTypeInfo] = MappingProxyType(
    {p.type: p for p in PROJECT_TYPES}
)
_INDUSTRIES_BY_ID: Mapping[str, Industry] = MappingProxyType({i.id: i for i in INDUSTRIES})


def get_loan_offer(loan_type: LoanType | str) -> LoanOffer:
    try:
        return _OFFERS_BY_TYPE[LoanType(loan_type)]
    except (KeyError, ValueError) as e:
        raise UnknownCatalogEntry(f"Unknown loan type: {loan_type}") from e


def get_project_type(project_type: ProjectType | str) -> ProjectTypeInfo:
    try:
        return _PROJECT_TYPES_BY_TYPE[ProjectType(project_type)]
    except (KeyError, ValueError) as e:
        raise UnknownCatalogEntry(f"Unknown project type: {project_type}") from e


def get_industry(industry_id: str) -> Industry:
    try:
        return _INDUSTRIES_BY_ID[industry_id]
    except KeyError as e:
        raise UnknownCatalogEntry(f"Unknown industry: {industry_id}") from e
