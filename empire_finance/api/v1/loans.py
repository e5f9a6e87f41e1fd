"""Loan center endpoints - offers, quotes, origination, repayment"""

from typing import List

from fastapi import APIRouter, Depends, Request

from empire_finance.api.dependencies import get_settings
from empire_finance.api.errors import resolve
from empire_finance.api.v1.schemas import (
    DebtSummaryRequest,
    DebtSummaryResponse,
    LoanOfferSchema,
    LoanQuoteResponse,
    LoanRequest,
    LoanSchema,
    MissedPaymentRequest,
    RepaymentResponse,
    RepayRequest,
)
from empire_finance.config import Settings
from empire_finance.domain.catalogs import LOAN_OFFERS, get_loan_offer
from empire_finance.domain.loans import (
    loan_progress,
    quote_loan,
    record_missed_payment,
    repay_loan,
    summarize_debt,
    take_loan,
)
from empire_finance.infrastructure.observability.metrics import record_loan

router = APIRouter()


@router.get("/loans/offers", response_model=List[LoanOfferSchema])
def list_offers():
    """Loan products, in catalog order"""
    return [LoanOfferSchema.from_domain(offer) for offer in LOAN_OFFERS]


@router.post("/loans/quote", response_model=LoanQuoteResponse)
def create_quote(body: LoanRequest):
    """
    Preview credit-adjusted terms for an offer.

    Quotes never fail on eligibility; `qualifies` reports it instead.
    """
    offer = get_loan_offer(body.loan_type)
    return LoanQuoteResponse.from_domain(quote_loan(offer, body.credit_score, body.amount))


@router.post("/loans", response_model=LoanSchema)
def create_loan(body: LoanRequest, request: Request):
    """
    Originate a loan.

    422 with code `credit-too-low` or `amount-out-of-range` when rejected.
    """
    offer = get_loan_offer(body.loan_type)
    loan = resolve(
        take_loan(offer, body.credit_score, body.amount),
        request,
        "take_loan",
        loan_type=offer.type.value,
        amount=body.amount,
    )
    record_loan(loan.amount)
    return LoanSchema.from_domain(loan, loan_progress(loan))


@router.post("/loans/repay", response_model=RepaymentResponse)
def repay(body: RepayRequest, request: Request):
    repayment = resolve(
        repay_loan(body.loan.to_domain(), body.amount),
        request,
        "repay_loan",
        loan_id=body.loan.id,
    )
    return RepaymentResponse(
        loan=LoanSchema.from_domain(repayment.loan, loan_progress(repayment.loan)),
        amount_paid=repayment.amount_paid,
        principal_paid=repayment.principal_paid,
        interest_paid=repayment.interest_paid,
    )


@router.post("/loans/missed-payment", response_model=LoanSchema)
def missed_payment(
    body: MissedPaymentRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    loan = resolve(
        record_missed_payment(body.loan.to_domain(), config.loan_default_threshold),
        request,
        "missed_payment",
        loan_id=body.loan.id,
    )
    return LoanSchema.from_domain(loan, loan_progress(loan))


@router.post("/loans/summary", response_model=DebtSummaryResponse)
def debt_summary(body: DebtSummaryRequest):
    summary = summarize_debt(loan.to_domain() for loan in body.loans)
    return DebtSummaryResponse(
        total_debt=summary.total_debt,
        total_monthly_payments=summary.total_monthly_payments,
        active_loans=summary.active_loans,
    )
