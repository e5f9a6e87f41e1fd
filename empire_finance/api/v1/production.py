"""Box-office studio endpoints"""

from typing import List

from fastapi import APIRouter, Query, Request

from empire_finance.api.errors import resolve
from empire_finance.api.v1.schemas import (
    OutcomeResponse,
    ProjectSchema,
    ProjectTypeSchema,
    ReleaseRequest,
    ReleaseResponse,
    StartProductionRequest,
    StartProductionResponse,
)
from empire_finance.domain.catalogs import PROJECT_TYPES
from empire_finance.domain.production import (
    budget_category,
    classify_outcome,
    max_potential,
    release_project,
    return_percentage,
    start_production,
    success_bonus,
)
from empire_finance.infrastructure.observability.metrics import production_budget_histogram

router = APIRouter()


@router.get("/productions/types", response_model=List[ProjectTypeSchema])
def list_project_types():
    return [ProjectTypeSchema.from_domain(info) for info in PROJECT_TYPES]


@router.post("/productions", response_model=StartProductionResponse)
def create_production(body: StartProductionRequest, request: Request):
    """
    Start a movie, series or documentary.

    422 with `budget-out-of-range` or `insufficient-funds` when rejected.
    """
    project = resolve(
        start_production(
            company_id=body.company_id,
            project_type=body.project_type,
            budget=body.budget,
            cash=body.cash,
            title=body.title,
            genre=body.genre,
            is_auto_generated=body.is_auto_generated,
        ),
        request,
        "start_production",
        company_id=body.company_id,
        project_type=body.project_type.value,
        budget=body.budget,
    )
    production_budget_histogram.labels(project_type=project.type.value).observe(project.budget)

    return StartProductionResponse(
        project=ProjectSchema.from_domain(project),
        budget_category=budget_category(project.type, project.budget),
        success_bonus=success_bonus(body.company_level),
        max_potential=max_potential(project.budget),
    )


@router.post("/productions/release", response_model=ReleaseResponse)
def release(body: ReleaseRequest, request: Request):
    """
    Record gross earnings once and label the outcome.

    422 with `not-yet-released` while the project is still in production.
    """
    project = resolve(
        release_project(body.project.to_domain(), body.gross_earnings),
        request,
        "release_project",
        project_id=body.project.id,
    )
    return ReleaseResponse(
        project=ProjectSchema.from_domain(project),
        outcome=classify_outcome(project.gross_earnings, project.budget),
        return_percentage=return_percentage(project),
    )


@router.get("/productions/outcome", response_model=OutcomeResponse)
def outcome(
    gross_earnings: float = Query(..., ge=0),
    budget: float = Query(..., gt=0),
):
    return OutcomeResponse(
        gross_earnings=gross_earnings,
        budget=budget,
        multiple=gross_earnings / budget,
        outcome=classify_outcome(gross_earnings, budget),
    )
