"""Share trading ledger for owned ventures and listed real companies"""

import logging
import math
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from empire_finance.domain.catalogs import REAL_COMPANY_SHARE_STEPS, VENTURE_SHARE_STEPS
from empire_finance.domain.exceptions import (
    ExceedsAvailableShares,
    ExceedsOwnedShares,
    InsufficientFunds,
    InvalidPercentage,
)
from empire_finance.domain.models import Holding, HoldingKind, PortfolioSummary, TradeResult
from empire_finance.domain.results import Result

logger = logging.getLogger(__name__)

FULL_OWNERSHIP = 100.0
SECONDS_PER_DAY = 86_400

# Brokerage friction applies to market positions only; exiting your own venture is free
SELL_FEES = {
    HoldingKind.VENTURE: 0.0,
    HoldingKind.REAL_COMPANY: 0.02,
}

# Float slack when comparing share percentages
_SHARE_TOLERANCE = 1e-9


def sell_fee(kind: HoldingKind) -> float:
    return SELL_FEES[kind]


def share_value(holding: Holding, percentage: float) -> float:
    return holding.market_value * (percentage / 100)


def _check_percentage(percentage: float) -> Optional[InvalidPercentage]:
    if not math.isfinite(percentage) or percentage <= 0 or percentage > FULL_OWNERSHIP:
        return InvalidPercentage(
            f"Percentage must be in (0, 100], got {percentage}",
            bound=0 if percentage <= 0 else FULL_OWNERSHIP,
            actual=percentage,
        )
    return None


def buy_shares(holding: Holding, percentage: float, cash: float | None = None) -> Result[TradeResult]:
    """
    Buy `percentage` points of a company at its current market value.

    Cash is only checked when supplied; callers that already gate the buy
    button may omit it.
    """
    error = _check_percentage(percentage)
    if error:
        return Result.failure(error)

    available = FULL_OWNERSHIP - holding.shares_owned
    if percentage > available + _SHARE_TOLERANCE:
        return Result.failure(
            ExceedsAvailableShares(
                f"Only {available:.2f}% of {holding.name or holding.id} is available",
                bound=available,
                actual=percentage,
                shortfall=percentage - available,
            )
        )

    cost = share_value(holding, percentage)
    if cash is not None and cost > cash:
        logger.debug("Share purchase rejected", extra={"holding_id": holding.id, "cost": cost, "cash": cash})
        return Result.failure(
            InsufficientFunds(
                f"Buying {percentage}% costs {cost:,.2f}",
                bound=cash,
                actual=cost,
                shortfall=cost - cash,
            )
        )

    return Result.success(
        TradeResult(
            holding_id=holding.id,
            percentage=percentage,
            shares_before=holding.shares_owned,
            shares_after=min(holding.shares_owned + percentage, FULL_OWNERSHIP),
            cash_delta=-cost,
        )
    )


def sell_shares(holding: Holding, percentage: float) -> Result[TradeResult]:
    """
    Sell `percentage` points of a holding.

    Proceeds = market_value * percentage / 100 * (1 - fee), where the fee is
    0 for ventures and 2% for real companies.
    """
    error = _check_percentage(percentage)
    if error:
        return Result.failure(error)

    if percentage > holding.shares_owned + _SHARE_TOLERANCE:
        return Result.failure(
            ExceedsOwnedShares(
                f"Only {holding.shares_owned:.2f}% of {holding.name or holding.id} is owned",
                bound=holding.shares_owned,
                actual=percentage,
                shortfall=percentage - holding.shares_owned,
            )
        )

    gross = share_value(holding, percentage)
    fee = gross * sell_fee(holding.kind)

    return Result.success(
        TradeResult(
            holding_id=holding.id,
            percentage=percentage,
            shares_before=holding.shares_owned,
            shares_after=max(holding.shares_owned - percentage, 0.0),
            cash_delta=gross - fee,
            fee=fee,
        )
    )


def apply_trade(holding: Holding, trade: TradeResult) -> Holding:
    """Holding snapshot with the traded ownership applied"""
    return replace(holding, shares_owned=trade.shares_after)


def share_steps(kind: HoldingKind) -> Tuple[int, ...]:
    return VENTURE_SHARE_STEPS if kind == HoldingKind.VENTURE else REAL_COMPANY_SHARE_STEPS


def available_buy_steps(holding: Holding) -> List[int]:
    available = FULL_OWNERSHIP - holding.shares_owned
    return [step for step in share_steps(holding.kind) if step <= available + _SHARE_TOLERANCE]


def available_sell_steps(holding: Holding) -> List[int]:
    return [step for step in share_steps(holding.kind) if step <= holding.shares_owned + _SHARE_TOLERANCE]


def income_per_second(holding: Holding) -> float:
    return holding.current_income * (holding.shares_owned / 100)


def summarize_portfolio(holdings: Iterable[Holding]) -> PortfolioSummary:
    """Aggregate value and income across every holding with shares owned"""
    owned = [h for h in holdings if h.shares_owned > 0]
    per_second = sum(income_per_second(h) for h in owned)

    return PortfolioSummary(
        portfolio_value=sum(share_value(h, h.shares_owned) for h in owned),
        total_shares=sum(h.shares_owned for h in owned),
        income_per_second=per_second,
        daily_income=per_second * SECONDS_PER_DAY,
        holdings=len(owned),
    )
