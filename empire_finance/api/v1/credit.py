"""GET /v1/credit/{score} - credit score label and rate multiplier"""

from fastapi import APIRouter, Path

from empire_finance.api.v1.schemas import CreditResponse
from empire_finance.domain.credit import credit_multiplier, score_label, score_position, score_tier

router = APIRouter()


@router.get("/credit/{score}", response_model=CreditResponse)
def describe_score(score: int = Path(..., ge=300, le=850)):
    return CreditResponse(
        score=score,
        label=score_label(score),
        tier=score_tier(score),
        position=score_position(score),
        multiplier=credit_multiplier(score),
    )
