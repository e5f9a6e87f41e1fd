"""Auto-production planner - sizes what the studio autopilot would invest"""

from typing import Optional

from empire_finance.domain.catalogs import PROJECT_TYPES, get_project_type
from empire_finance.domain.exceptions import InvalidSettings
from empire_finance.domain.models import (
    AUTO_PROJECT_TYPE,
    Aggressiveness,
    AutoBoxOfficeSettings,
    InvestmentPlan,
    ProjectType,
)
from empire_finance.domain.production import budget_category
from empire_finance.domain.results import Result

# Cheapest viable production (documentary floor)
REALISTIC_PRODUCTION_FLOOR = 100_000

MIN_INVESTMENT_PERCENTAGE = 0.05
MAX_INVESTMENT_PERCENTAGE = 0.50

AGGRESSIVENESS_MULTIPLIERS = {
    Aggressiveness.CONSERVATIVE: 0.5,
    Aggressiveness.BALANCED: 1.0,
    Aggressiveness.AGGRESSIVE: 2.0,
}

# Display labels for a budget, richest first
RECOMMENDATION_LABELS = (
    (10_000_000, "Blockbuster Film"),
    (1_000_000, "Independent Film"),
    (500_000, "TV Series"),
    (100_000, "Documentary"),
)
INSUFFICIENT_LABEL = "Insufficient for realistic production"


def default_settings() -> AutoBoxOfficeSettings:
    """$100K reserve, 20% per project, auto type, balanced"""
    return AutoBoxOfficeSettings()


def validate_settings(settings: AutoBoxOfficeSettings) -> Result[AutoBoxOfficeSettings]:
    if settings.min_cash_reserve < 0:
        return Result.failure(
            InvalidSettings("Cash reserve cannot be negative", bound=0, actual=settings.min_cash_reserve)
        )

    pct = settings.max_investment_percentage
    if not MIN_INVESTMENT_PERCENTAGE <= pct <= MAX_INVESTMENT_PERCENTAGE:
        return Result.failure(
            InvalidSettings(
                f"Investment percentage must be between {MIN_INVESTMENT_PERCENTAGE:.0%} "
                f"and {MAX_INVESTMENT_PERCENTAGE:.0%}",
                bound=MIN_INVESTMENT_PERCENTAGE if pct < MIN_INVESTMENT_PERCENTAGE else MAX_INVESTMENT_PERCENTAGE,
                actual=pct,
            )
        )

    preferred = settings.preferred_project_type
    if preferred != AUTO_PROJECT_TYPE and preferred not in {t.value for t in ProjectType}:
        return Result.failure(InvalidSettings(f"Unknown preferred project type: {preferred}"))

    return Result.success(settings)


def available_cash(settings: AutoBoxOfficeSettings, current_cash: float) -> float:
    return max(0.0, current_cash - settings.min_cash_reserve)


def estimated_budget(settings: AutoBoxOfficeSettings, current_cash: float) -> float:
    """max(0, cash - reserve) * max_investment_percentage; never negative"""
    return available_cash(settings, current_cash) * settings.max_investment_percentage


def can_afford_realistic_production(settings: AutoBoxOfficeSettings, current_cash: float) -> bool:
    return estimated_budget(settings, current_cash) >= REALISTIC_PRODUCTION_FLOOR


def recommended_project_type(budget: float) -> Optional[ProjectType]:
    """Richest tier whose minimum budget fits, or None when nothing does"""
    affordable = [p for p in PROJECT_TYPES if p.min_budget <= budget]
    if not affordable:
        return None
    return max(affordable, key=lambda p: p.min_budget).type


def recommended_budget_label(budget: float) -> str:
    for floor, label in RECOMMENDATION_LABELS:
        if budget >= floor:
            return label
    return INSUFFICIENT_LABEL


def aggressiveness_multiplier(aggressiveness: Aggressiveness | str) -> float:
    return AGGRESSIVENESS_MULTIPLIERS[Aggressiveness(aggressiveness)]


def plan_investment(settings: AutoBoxOfficeSettings, current_cash: float) -> InvestmentPlan:
    """
    Describe the production autopilot would fund at this cash level.

    Advisory only: nothing is spent. A fixed preferred type is honoured when
    its minimum budget fits; with "auto" the richest affordable tier wins.
    The chosen budget is the estimate clamped into that tier's band. The
    aggressiveness multiplier is reported but not applied.
    """
    estimate = estimated_budget(settings, current_cash)
    enabled = settings.enabled

    if settings.preferred_project_type == AUTO_PROJECT_TYPE:
        project_type = recommended_project_type(estimate)
    else:
        info = get_project_type(settings.preferred_project_type)
        project_type = info.type if info.min_budget <= estimate else None

    budget = 0.0
    category = None
    if enabled and project_type is not None:
        info = get_project_type(project_type)
        budget = min(estimate, info.max_budget)
        category = budget_category(project_type, budget)

    return InvestmentPlan(
        enabled=enabled,
        available_cash=available_cash(settings, current_cash),
        estimated_budget=estimate,
        can_afford_realistic_production=estimate >= REALISTIC_PRODUCTION_FLOOR,
        project_type=project_type if enabled else None,
        budget=budget,
        budget_category=category,
        recommended_label=recommended_budget_label(estimate),
        aggressiveness_multiplier=aggressiveness_multiplier(settings.aggressiveness),
    )
