"""Unit tests for share trading"""

import pytest
from dataclasses import replace
from empire_finance.domain.exceptions import (
    ExceedsAvailableShares,
    ExceedsOwnedShares,
    InsufficientFunds,
    InvalidPercentage,
)
from empire_finance.domain.trading import (
    apply_trade,
    available_buy_steps,
    available_sell_steps,
    buy_shares,
    income_per_second,
    sell_shares,
    summarize_portfolio,
)


def test_sell_real_company_charges_fee(real_company):
    """10% of a $1M company at 2% fee nets $98,000"""
    trade = sell_shares(real_company, 10).unwrap()

    assert trade.cash_delta == pytest.approx(98_000)
    assert trade.fee == pytest.approx(2_000)
    assert trade.shares_after == 10


def test_sell_venture_is_fee_free(venture):
    trade = sell_shares(venture, 20).unwrap()

    assert trade.fee == 0
    assert trade.cash_delta == pytest.approx(40_000)
    assert trade.shares_after == 40


def test_buy_costs_market_value_share(real_company):
    trade = buy_shares(real_company, 10, cash=150_000).unwrap()

    assert trade.cash_delta == pytest.approx(-100_000)
    assert trade.shares_before == 20
    assert trade.shares_after == 30


def test_buy_without_cash_skips_funds_check(real_company):
    assert buy_shares(real_company, 10).ok


def test_buy_beyond_full_ownership(real_company):
    nearly_full = replace(real_company, shares_owned=95)
    result = buy_shares(nearly_full, 10, cash=1_000_000)

    assert isinstance(result.error, ExceedsAvailableShares)
    assert result.error.bound == 5
    assert result.error.shortfall == 5


def test_buy_up_to_exactly_full_ownership(real_company):
    trade = buy_shares(replace(real_company, shares_owned=90), 10).unwrap()
    assert trade.shares_after == 100


def test_buy_insufficient_funds(real_company):
    result = buy_shares(real_company, 10, cash=50_000)

    assert isinstance(result.error, InsufficientFunds)
    assert result.error.code == "insufficient-funds"
    assert result.error.shortfall == pytest.approx(50_000)


@pytest.mark.parametrize("percentage", [0, -5, 150, float("nan"), float("inf")])
def test_invalid_percentages(real_company, percentage):
    assert isinstance(buy_shares(real_company, percentage).error, InvalidPercentage)
    assert isinstance(sell_shares(real_company, percentage).error, InvalidPercentage)


def test_sell_more_than_owned(real_company):
    result = sell_shares(real_company, 25)

    assert isinstance(result.error, ExceedsOwnedShares)
    assert result.error.bound == 20


def test_round_trip_venture_costs_nothing(venture):
    bought = buy_shares(venture, 10).unwrap()
    after_buy = apply_trade(venture, bought)
    sold = sell_shares(after_buy, 10).unwrap()

    assert apply_trade(after_buy, sold).shares_owned == venture.shares_owned
    assert bought.cash_delta + sold.cash_delta == pytest.approx(0)


def test_round_trip_real_company_loses_fee(real_company):
    bought = buy_shares(real_company, 5).unwrap()
    sold = sell_shares(apply_trade(real_company, bought), 5).unwrap()

    assert sold.shares_after == real_company.shares_owned
    assert bought.cash_delta + sold.cash_delta < 0


def test_share_steps(real_company, venture):
    assert available_buy_steps(replace(real_company, shares_owned=95)) == [1, 5]
    assert available_sell_steps(real_company) == [1, 5, 10]
    assert available_sell_steps(replace(real_company, shares_owned=3)) == [1]

    assert available_buy_steps(venture) == [5, 10, 20]
    assert available_buy_steps(replace(venture, shares_owned=90)) == [5, 10]
    assert available_sell_steps(replace(venture, shares_owned=0)) == []


def test_income_per_second_scales_with_ownership(real_company):
    assert income_per_second(real_company) == pytest.approx(100)


def test_summarize_portfolio(real_company, venture):
    unowned = replace(real_company, id="other", shares_owned=0)
    summary = summarize_portfolio([real_company, venture, unowned])

    assert summary.holdings == 2
    assert summary.portfolio_value == pytest.approx(320_000)
    assert summary.total_shares == 80
    assert summary.income_per_second == pytest.approx(106)
    assert summary.daily_income == pytest.approx(106 * 86_400)
