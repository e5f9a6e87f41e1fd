"""Auto-production planning endpoints"""

from fastapi import APIRouter, Request

from empire_finance.api.errors import resolve
from empire_finance.api.v1.schemas import AutoSettingsSchema, PlanRequest, PlanResponse
from empire_finance.domain.auto_investment import default_settings, plan_investment, validate_settings

router = APIRouter()


@router.get("/auto-investment/defaults", response_model=AutoSettingsSchema)
def defaults():
    return AutoSettingsSchema.from_domain(default_settings())


@router.post("/auto-investment/plan", response_model=PlanResponse)
def plan(body: PlanRequest, request: Request):
    """
    What auto-production would fund at the given cash level.

    Advisory; nothing is spent. Settings outside their ranges are rejected
    with `invalid-settings`.
    """
    settings = resolve(validate_settings(body.settings.to_domain()), request, "plan_investment")
    return PlanResponse.from_domain(plan_investment(settings, body.current_cash))
