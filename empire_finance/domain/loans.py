"""Loan calculator - credit-adjusted rates, amortized payments, repayment"""

import logging
import math
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Iterable, Optional

from empire_finance.domain.credit import credit_multiplier
from empire_finance.domain.exceptions import (
    AmountOutOfRange,
    CreditTooLow,
    InvalidAmount,
    LoanNotActive,
)
from empire_finance.domain.models import (
    DebtSummary,
    Loan,
    LoanOffer,
    LoanQuote,
    LoanStatus,
    Repayment,
)
from empire_finance.domain.results import Result

logger = logging.getLogger(__name__)

# Balances below half a cent count as settled
BALANCE_EPSILON = 0.005

DEFAULT_MISSED_PAYMENT_THRESHOLD = 3


def adjusted_interest_rate(offer: LoanOffer, credit_score: float) -> float:
    """Annual rate after the credit penalty: base * (1 + multiplier * 0.5)"""
    return offer.base_interest_rate * (1 + credit_multiplier(credit_score) * 0.5)


def monthly_payment(amount: float, annual_rate: float, term_months: int) -> float:
    """
    Fixed payment that retires `amount` over `term_months`.

    payment = P * r / (1 - (1 + r)^-n) with r = annual_rate / 12. A zero
    rate degenerates to straight-line repayment, P / n.
    """
    if term_months <= 0:
        raise ValueError(f"term_months must be positive, got {term_months}")

    rate = annual_rate / 12
    if abs(rate) < 1e-12:
        return amount / term_months

    return amount * rate / (1 - (1 + rate) ** -term_months)


def payments_needed(balance: float, annual_rate: float, payment: float) -> Optional[int]:
    """
    Number of fixed payments required to amortize `balance`.

    Returns None when the payment does not even cover the monthly interest.
    """
    if balance <= BALANCE_EPSILON:
        return 0
    if payment <= 0:
        return None

    rate = annual_rate / 12
    if abs(rate) < 1e-12:
        return math.ceil(balance / payment - 1e-9)

    coverage = 1 - balance * rate / payment
    if coverage <= 0:
        return None

    return math.ceil(-math.log(coverage) / math.log(1 + rate) - 1e-9)


def quote_loan(offer: LoanOffer, credit_score: float, amount: float) -> LoanQuote:
    """Preview the terms of a loan without validating the request"""
    multiplier = credit_multiplier(credit_score)
    rate = adjusted_interest_rate(offer, credit_score)
    payment = monthly_payment(amount, rate, offer.term_months)
    total = payment * offer.term_months

    return LoanQuote(
        offer_type=offer.type,
        amount=amount,
        credit_multiplier=multiplier,
        adjusted_interest_rate=rate,
        monthly_payment=payment,
        total_repayment=total,
        total_interest=total - amount,
        qualifies=credit_score >= offer.credit_score_required,
    )


def check_qualification(offer: LoanOffer, credit_score: float, amount: float) -> Result[LoanOffer]:
    """Credit is checked first, then the amount; nothing is clamped"""
    if not math.isfinite(credit_score):
        return Result.failure(
            CreditTooLow(
                f"{offer.name} requires a credit score of {offer.credit_score_required}",
                bound=offer.credit_score_required,
                actual=credit_score,
            )
        )

    if credit_score < offer.credit_score_required:
        return Result.failure(
            CreditTooLow(
                f"{offer.name} requires a credit score of {offer.credit_score_required}",
                bound=offer.credit_score_required,
                actual=credit_score,
                shortfall=offer.credit_score_required - credit_score,
            )
        )

    if not math.isfinite(amount):
        return Result.failure(
            AmountOutOfRange(
                f"{offer.name} needs a finite amount",
                bound=offer.max_amount,
                actual=amount,
            )
        )

    if amount < offer.min_amount:
        return Result.failure(
            AmountOutOfRange(
                f"{offer.name} starts at {offer.min_amount:,.0f}",
                bound=offer.min_amount,
                actual=amount,
                shortfall=offer.min_amount - amount,
            )
        )

    if amount > offer.max_amount:
        return Result.failure(
            AmountOutOfRange(
                f"{offer.name} is capped at {offer.max_amount:,.0f}",
                bound=offer.max_amount,
                actual=amount,
                shortfall=amount - offer.max_amount,
            )
        )

    return Result.success(offer)


def take_loan(
    offer: LoanOffer,
    credit_score: float,
    amount: float,
    now: datetime | None = None,
    loan_id: str | None = None,
) -> Result[Loan]:
    """
    Originate a loan if the borrower qualifies.

    Returns a failure with CreditTooLow or AmountOutOfRange otherwise.
    """
    qualification = check_qualification(offer, credit_score, amount)
    if not qualification.ok:
        logger.debug(
            "Loan rejected",
            extra={"loan_type": offer.type.value, "reason": qualification.error.code},
        )
        return Result.failure(qualification.error)

    rate = adjusted_interest_rate(offer, credit_score)

    return Result.success(
        Loan(
            id=loan_id or str(uuid.uuid4()),
            loan_type=offer.type,
            amount=amount,
            original_amount=amount,
            interest_rate=rate,
            monthly_payment=monthly_payment(amount, rate, offer.term_months),
            total_payments=offer.term_months,
            remaining_payments=offer.term_months,
            taken_date=now or datetime.now(timezone.utc),
        )
    )


def _settle(loan: Loan, balance: float, remaining: int) -> Loan:
    if balance <= BALANCE_EPSILON:
        return replace(loan, amount=0.0, remaining_payments=0, status=LoanStatus.PAID_OFF)
    return replace(loan, amount=balance, remaining_payments=remaining)


def _scheduled_payment(loan: Loan) -> Repayment:
    interest = loan.amount * loan.interest_rate / 12
    principal = max(loan.monthly_payment - interest, 0.0)

    # Final installment absorbs whatever rounding residue is left
    if loan.remaining_payments <= 1 or principal >= loan.amount - BALANCE_EPSILON:
        principal = loan.amount

    updated = _settle(loan, loan.amount - principal, max(loan.remaining_payments - 1, 0))
    return Repayment(
        loan=updated,
        amount_paid=principal + interest,
        principal_paid=principal,
        interest_paid=interest,
    )


def _prepayment(loan: Loan, amount: float) -> Repayment:
    principal = min(amount, loan.amount)
    balance = loan.amount - principal

    needed = payments_needed(balance, loan.interest_rate, loan.monthly_payment)
    remaining = loan.remaining_payments if needed is None else min(needed, loan.remaining_payments)
    # A live balance always has at least one payment left
    remaining = max(remaining, 1)

    updated = _settle(loan, balance, remaining)
    return Repayment(loan=updated, amount_paid=principal, principal_paid=principal, interest_paid=0.0)


def repay_loan(loan: Loan, amount: float | None = None) -> Result[Repayment]:
    """
    Apply a payment to an active loan.

    Without an amount, one scheduled payment of `monthly_payment` is made:
    interest accrued for the month is charged and the rest retires
    principal. With an amount, up to that much principal is prepaid and the
    remaining payment count shrinks to what the new balance still needs.

    The caller is responsible for checking cash before calling.
    """
    if loan.status != LoanStatus.ACTIVE:
        return Result.failure(
            LoanNotActive(f"Loan {loan.id} is {loan.status.value}", actual=loan.amount)
        )

    if amount is None:
        return Result.success(_scheduled_payment(loan))

    if not math.isfinite(amount) or amount <= 0:
        return Result.failure(InvalidAmount("Payment must be positive", bound=0, actual=amount))

    return Result.success(_prepayment(loan, amount))


def record_missed_payment(
    loan: Loan,
    default_threshold: int = DEFAULT_MISSED_PAYMENT_THRESHOLD,
) -> Result[Loan]:
    """
    Count a missed payment; the loan defaults once the count reaches the threshold.

    The balance and remaining schedule are left untouched.
    """
    if loan.status != LoanStatus.ACTIVE:
        return Result.failure(
            LoanNotActive(f"Loan {loan.id} is {loan.status.value}", actual=loan.amount)
        )

    missed = loan.missed_payments + 1
    status = LoanStatus.DEFAULTED if missed >= default_threshold else LoanStatus.ACTIVE

    if status == LoanStatus.DEFAULTED:
        logger.info("Loan defaulted", extra={"loan_id": loan.id, "missed_payments": missed})

    return Result.success(replace(loan, missed_payments=missed, status=status))


def summarize_debt(loans: Iterable[Loan]) -> DebtSummary:
    active = [loan for loan in loans if loan.status == LoanStatus.ACTIVE]
    return DebtSummary(
        total_debt=sum(loan.amount for loan in active),
        total_monthly_payments=sum(loan.monthly_payment for loan in active),
        active_loans=len(active),
    )


def loan_progress(loan: Loan) -> float:
    """Share of scheduled payments already made, 0-100"""
    if loan.total_payments <= 0:
        return 100.0
    return (loan.total_payments - loan.remaining_payments) / loan.total_payments * 100
