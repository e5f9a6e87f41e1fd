"""Box-office production model - budget bands, categories, outcome labels"""

import logging
import math
import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from empire_finance.domain.catalogs import get_project_type
from empire_finance.domain.exceptions import (
    AlreadyReleased,
    BudgetOutOfRange,
    InsufficientFunds,
    InvalidAmount,
    NotYetReleased,
)
from empire_finance.domain.models import (
    BoxOfficeProject,
    OutcomeBand,
    ProjectStatus,
    ProjectType,
)
from empire_finance.domain.results import Result

logger = logging.getLogger(__name__)

# (upper bound exclusive, label); the last label covers everything above
BUDGET_CATEGORIES = {
    ProjectType.MOVIE: ((10_000_000, "Independent"), (75_000_000, "Mid-Budget"), (None, "Blockbuster")),
    ProjectType.SERIES: ((2_000_000, "Cable TV"), (10_000_000, "Premium TV"), (None, "Prestige Series")),
    ProjectType.DOCUMENTARY: ((500_000, "Independent"), (2_000_000, "Network"), (None, "Major Production")),
}

# Gross / budget multiple floors, best first
OUTCOME_BANDS = (
    OutcomeBand("Legendary Hit", 10.0),
    OutcomeBand("Blockbuster", 5.0),
    OutcomeBand("Hit", 2.0),
    OutcomeBand("Moderate Success", 0.8),
)
FLOP_LABEL = "Flop"

SUCCESS_BONUS_PER_LEVEL = 5  # percent
MAX_POTENTIAL_MULTIPLIER = 15


def budget_category(project_type: ProjectType | str, budget: float) -> str:
    for upper, label in BUDGET_CATEGORIES[get_project_type(project_type).type]:
        if upper is None or budget < upper:
            return label
    raise AssertionError("unreachable: last category is open-ended")


def classify_outcome(gross_earnings: float, budget: float) -> str:
    """
    Label a released project by its return multiple.

    >=10x Legendary Hit, >=5x Blockbuster, >=2x Hit, >=0.8x Moderate Success,
    anything below is a Flop.
    """
    if budget <= 0:
        raise ValueError(f"budget must be positive, got {budget}")

    multiple = gross_earnings / budget
    for band in OUTCOME_BANDS:
        if multiple >= band.multiplier:
            return band.label
    return FLOP_LABEL


def production_time(project_type: ProjectType | str) -> timedelta:
    return get_project_type(project_type).production_time


def check_budget(project_type: ProjectType | str, budget: float, cash: float | None = None) -> Result[float]:
    """Band check first, then affordability"""
    info = get_project_type(project_type)

    if not math.isfinite(budget) or budget < info.min_budget or budget > info.max_budget:
        bound = info.min_budget if budget < info.min_budget else info.max_budget
        return Result.failure(
            BudgetOutOfRange(
                f"{info.name} budgets run from {info.min_budget:,.0f} to {info.max_budget:,.0f}",
                bound=bound,
                actual=budget,
                shortfall=abs(budget - bound),
            )
        )

    if cash is not None and budget > cash:
        return Result.failure(
            InsufficientFunds(
                f"Production needs {budget:,.0f}",
                bound=cash,
                actual=budget,
                shortfall=budget - cash,
            )
        )

    return Result.success(budget)


def start_production(
    company_id: str,
    project_type: ProjectType | str,
    budget: float,
    cash: float,
    title: str = "",
    genre: str = "",
    now: datetime | None = None,
    is_auto_generated: bool = False,
) -> Result[BoxOfficeProject]:
    """
    Validate and create a project that releases after its tier's production time.

    Fails with BudgetOutOfRange or InsufficientFunds; nothing is created then.
    """
    check = check_budget(project_type, budget, cash)
    if not check.ok:
        logger.debug(
            "Production rejected",
            extra={"company_id": company_id, "project_type": str(project_type), "reason": check.error.code},
        )
        return Result.failure(check.error)

    info = get_project_type(project_type)
    started = now or datetime.now(timezone.utc)

    return Result.success(
        BoxOfficeProject(
            id=str(uuid.uuid4()),
            company_id=company_id,
            title=title or f"Untitled {info.name}",
            genre=genre,
            type=info.type,
            budget=budget,
            production_time=info.production_time,
            release_date=started + info.production_time,
            is_auto_generated=is_auto_generated,
        )
    )


def release_project(
    project: BoxOfficeProject,
    gross_earnings: float,
    now: datetime | None = None,
) -> Result[BoxOfficeProject]:
    """
    Assign gross earnings once the release date has passed.

    A project is released exactly once. Fails with AlreadyReleased,
    NotYetReleased (shortfall is the seconds still to wait) or InvalidAmount
    for a negative or non-finite gross.
    """
    if project.status != ProjectStatus.IN_PRODUCTION:
        return Result.failure(
            AlreadyReleased(
                f"Project {project.id} was already released",
                actual=project.gross_earnings,
            )
        )

    remaining = time_remaining(project, now).total_seconds()
    if remaining > 0:
        return Result.failure(
            NotYetReleased(
                f"{project.title} is still in production",
                bound=0,
                actual=remaining,
                shortfall=remaining,
            )
        )

    if not math.isfinite(gross_earnings) or gross_earnings < 0:
        return Result.failure(
            InvalidAmount("Gross earnings must be zero or more", bound=0, actual=gross_earnings)
        )

    return Result.success(replace(project, status=ProjectStatus.RELEASED, gross_earnings=gross_earnings))


def time_remaining(project: BoxOfficeProject, now: datetime | None = None) -> timedelta:
    if project.status != ProjectStatus.IN_PRODUCTION:
        return timedelta(0)
    now = now or datetime.now(timezone.utc)
    return max(project.release_date - now, timedelta(0))


def production_progress(project: BoxOfficeProject, now: datetime | None = None) -> float:
    if project.status != ProjectStatus.IN_PRODUCTION or project.production_time <= timedelta(0):
        return 100.0
    elapsed = project.production_time - time_remaining(project, now)
    return elapsed / project.production_time * 100


def is_ready_for_release(project: BoxOfficeProject, now: datetime | None = None) -> bool:
    return project.status == ProjectStatus.IN_PRODUCTION and time_remaining(project, now) == timedelta(0)


def return_percentage(project: BoxOfficeProject) -> Optional[float]:
    """Net return on budget in percent, once released"""
    if project.status == ProjectStatus.IN_PRODUCTION:
        return None
    return (project.gross_earnings / project.budget) * 100 - 100


def success_bonus(company_level: int) -> int:
    """Studio level bonus, in percent"""
    return company_level * SUCCESS_BONUS_PER_LEVEL


def max_potential(budget: float) -> float:
    return budget * MAX_POTENTIAL_MULTIPLIER
