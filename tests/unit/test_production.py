"""Unit tests for the box-office production model"""

import pytest
from datetime import datetime, timedelta, timezone
from empire_finance.domain.exceptions import (
    AlreadyReleased,
    BudgetOutOfRange,
    InsufficientFunds,
    InvalidAmount,
    NotYetReleased,
)
from empire_finance.domain.models import ProjectStatus, ProjectType
from empire_finance.domain.production import (
    budget_category,
    classify_outcome,
    is_ready_for_release,
    max_potential,
    production_progress,
    production_time,
    release_project,
    return_percentage,
    start_production,
    success_bonus,
    time_remaining,
)

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
WRAPPED = NOW + timedelta(seconds=20)


def _movie(budget=5_000_000, cash=10_000_000):
    return start_production("studio-1", ProjectType.MOVIE, budget, cash, title="Night Shift", now=NOW)


def test_start_independent_movie():
    result = _movie()

    assert result.ok
    project = result.value
    assert project.status == ProjectStatus.IN_PRODUCTION
    assert project.release_date == NOW + timedelta(seconds=15)
    assert project.gross_earnings == 0
    assert budget_category(project.type, project.budget) == "Independent"


def test_mid_budget_movie():
    assert budget_category(ProjectType.MOVIE, 50_000_000) == "Mid-Budget"


def test_movie_below_floor_rejected():
    result = _movie(budget=80_000)

    assert isinstance(result.error, BudgetOutOfRange)
    assert result.error.code == "budget-out-of-range"
    assert result.error.bound == 1_000_000
    assert result.error.shortfall == 920_000


def test_budget_above_ceiling_rejected():
    result = start_production("s", ProjectType.DOCUMENTARY, 6_000_000, 10_000_000)
    assert result.error.bound == 5_000_000


def test_band_is_checked_before_funds():
    result = start_production("s", ProjectType.MOVIE, 80_000, 0)
    assert isinstance(result.error, BudgetOutOfRange)


@pytest.mark.parametrize("budget", [float("nan"), float("inf")])
def test_non_finite_budget_rejected(budget):
    result = _movie(budget=budget, cash=0)

    assert isinstance(result.error, BudgetOutOfRange)


def test_start_insufficient_funds():
    result = _movie(budget=5_000_000, cash=4_000_000)

    assert isinstance(result.error, InsufficientFunds)
    assert result.error.shortfall == 1_000_000


@pytest.mark.parametrize(
    "project_type, budget, category",
    [
        (ProjectType.MOVIE, 9_999_999, "Independent"),
        (ProjectType.MOVIE, 10_000_000, "Mid-Budget"),
        (ProjectType.MOVIE, 75_000_000, "Blockbuster"),
        (ProjectType.SERIES, 500_000, "Cable TV"),
        (ProjectType.SERIES, 2_000_000, "Premium TV"),
        (ProjectType.SERIES, 15_000_000, "Prestige Series"),
        (ProjectType.DOCUMENTARY, 100_000, "Independent"),
        (ProjectType.DOCUMENTARY, 500_000, "Network"),
        (ProjectType.DOCUMENTARY, 3_000_000, "Major Production"),
    ],
)
def test_budget_categories(project_type, budget, category):
    assert budget_category(project_type, budget) == category


@pytest.mark.parametrize(
    "gross, label",
    [
        (10_000_000, "Legendary Hit"),
        (5_000_000, "Blockbuster"),
        (2_000_000, "Hit"),
        (800_000, "Moderate Success"),
        (790_000, "Flop"),
        (0, "Flop"),
    ],
)
def test_classify_outcome(gross, label):
    assert classify_outcome(gross, 1_000_000) == label


def test_classify_outcome_requires_budget():
    with pytest.raises(ValueError):
        classify_outcome(100, 0)


def test_production_times():
    assert production_time(ProjectType.MOVIE) == timedelta(seconds=15)
    assert production_time("series") == timedelta(seconds=25)
    assert production_time(ProjectType.DOCUMENTARY) == timedelta(seconds=10)


def test_progress_and_release_readiness():
    project = _movie().unwrap()
    halfway = NOW + timedelta(seconds=7.5)

    assert time_remaining(project, halfway) == timedelta(seconds=7.5)
    assert production_progress(project, halfway) == pytest.approx(50)
    assert not is_ready_for_release(project, halfway)
    assert is_ready_for_release(project, NOW + timedelta(seconds=20))
    assert time_remaining(project, NOW + timedelta(seconds=20)) == timedelta(0)


def test_release_assigns_gross_once():
    project = _movie(budget=1_000_000).unwrap()

    released = release_project(project, 3_000_000, now=WRAPPED).unwrap()
    assert released.status == ProjectStatus.RELEASED
    assert released.gross_earnings == 3_000_000
    assert return_percentage(released) == pytest.approx(200)

    again = release_project(released, 9_000_000, now=WRAPPED)
    assert isinstance(again.error, AlreadyReleased)


def test_release_waits_for_release_date():
    project = _movie().unwrap()

    early = release_project(project, 60_000_000, now=NOW + timedelta(seconds=5))
    assert isinstance(early.error, NotYetReleased)
    assert early.error.code == "not-yet-released"
    assert early.error.shortfall == pytest.approx(10)
    assert project.status == ProjectStatus.IN_PRODUCTION

    assert release_project(project, 60_000_000, now=NOW + timedelta(seconds=15)).ok


@pytest.mark.parametrize("gross", [-1, float("nan")])
def test_release_rejects_invalid_gross(gross):
    result = release_project(_movie().unwrap(), gross, now=WRAPPED)

    assert isinstance(result.error, InvalidAmount)


def test_return_percentage_unknown_before_release():
    assert return_percentage(_movie().unwrap()) is None


def test_studio_bonus_and_potential():
    assert success_bonus(3) == 15
    assert max_potential(2_000_000) == 30_000_000
