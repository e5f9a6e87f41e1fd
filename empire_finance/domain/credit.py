"""Credit scoring - maps a 300-850 score to a tier, label and rate multiplier"""

from empire_finance.domain.exceptions import InvalidCreditScore
from empire_finance.domain.models import CreditTier

MIN_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 850

# Lower bound of each tier, best first
TIER_THRESHOLDS = (
    (800, CreditTier.EXCELLENT),
    (740, CreditTier.VERY_GOOD),
    (670, CreditTier.GOOD),
    (580, CreditTier.FAIR),
)

TIER_LABELS = {
    CreditTier.EXCELLENT: "Excellent",
    CreditTier.VERY_GOOD: "Very Good",
    CreditTier.GOOD: "Good",
    CreditTier.FAIR: "Fair",
    CreditTier.POOR: "Poor",
}


def _check_score(score: float) -> None:
    if not MIN_CREDIT_SCORE <= score <= MAX_CREDIT_SCORE:
        raise InvalidCreditScore(
            f"Credit score {score} is outside {MIN_CREDIT_SCORE}-{MAX_CREDIT_SCORE}",
            bound=MIN_CREDIT_SCORE if score < MIN_CREDIT_SCORE else MAX_CREDIT_SCORE,
            actual=score,
        )


def clamp_score(score: float) -> int:
    """Keep a score produced by the game loop inside the legal range"""
    return int(max(MIN_CREDIT_SCORE, min(MAX_CREDIT_SCORE, round(score))))


def score_tier(score: float) -> CreditTier:
    _check_score(score)
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return CreditTier.POOR


def score_label(score: float) -> str:
    """
    Human-readable label for a credit score.

    Thresholds: >=800 Excellent, >=740 Very Good, >=670 Good, >=580 Fair,
    anything lower is Poor.
    """
    return TIER_LABELS[score_tier(score)]


def score_position(score: float) -> float:
    """Where the score sits on the 300-850 scale, as a 0-100 percentage"""
    _check_score(score)
    return (score - MIN_CREDIT_SCORE) / (MAX_CREDIT_SCORE - MIN_CREDIT_SCORE) * 100


def credit_multiplier(score: float) -> float:
    """
    Interest penalty factor for a score, clamped to [0.5, 2.0].

    A perfect 850 still carries the 0.5 floor; every 350 points below 850
    adds 1.0 up to the 2.0 ceiling.
    """
    return max(0.5, min(2.0, (MAX_CREDIT_SCORE - score) / 350))
