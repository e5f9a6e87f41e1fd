"""Share trading endpoints for ventures and real companies"""

from fastapi import APIRouter, Request

from empire_finance.api.errors import resolve
from empire_finance.api.v1.schemas import (
    PortfolioRequest,
    PortfolioResponse,
    TradeRequest,
    TradeResponse,
)
from empire_finance.domain.models import Holding, TradeResult
from empire_finance.domain.trading import (
    apply_trade,
    available_buy_steps,
    available_sell_steps,
    buy_shares,
    sell_shares,
    summarize_portfolio,
)

router = APIRouter()


def _trade_response(holding: Holding, trade: TradeResult) -> TradeResponse:
    after = apply_trade(holding, trade)
    return TradeResponse(
        holding_id=trade.holding_id,
        percentage=trade.percentage,
        shares_before=trade.shares_before,
        shares_after=trade.shares_after,
        cash_delta=trade.cash_delta,
        fee=trade.fee,
        buy_steps=available_buy_steps(after),
        sell_steps=available_sell_steps(after),
    )


@router.post("/trades/buy", response_model=TradeResponse)
def buy(body: TradeRequest, request: Request):
    holding = body.holding.to_domain()
    trade = resolve(
        buy_shares(holding, body.percentage, body.cash),
        request,
        "buy_shares",
        holding_id=holding.id,
        percentage=body.percentage,
    )
    return _trade_response(holding, trade)


@router.post("/trades/sell", response_model=TradeResponse)
def sell(body: TradeRequest, request: Request):
    """Sell shares; real-company sales carry a 2% fee"""
    holding = body.holding.to_domain()
    trade = resolve(
        sell_shares(holding, body.percentage),
        request,
        "sell_shares",
        holding_id=holding.id,
        percentage=body.percentage,
    )
    return _trade_response(holding, trade)


@router.post("/portfolio/summary", response_model=PortfolioResponse)
def portfolio_summary(body: PortfolioRequest):
    summary = summarize_portfolio(h.to_domain() for h in body.holdings)
    return PortfolioResponse(
        portfolio_value=summary.portfolio_value,
        total_shares=summary.total_shares,
        income_per_second=summary.income_per_second,
        daily_income=summary.daily_income,
        holdings=summary.holdings,
    )
