"""Pydantic schemas for API request/response validation"""

from dataclasses import asdict
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from empire_finance.domain.models import (
    Aggressiveness,
    AutoBoxOfficeSettings,
    BoxOfficeProject,
    Company,
    CreditTier,
    Holding,
    HoldingKind,
    Industry,
    InvestmentPlan,
    Loan,
    LoanOffer,
    LoanQuote,
    LoanStatus,
    LoanType,
    ProjectStatus,
    ProjectType,
    ProjectTypeInfo,
    SaveSlot,
)


# Loans


class LoanOfferSchema(BaseModel):
    type: LoanType
    name: str
    description: str
    min_amount: float
    max_amount: float
    base_interest_rate: float
    term_months: int
    credit_score_required: int

    @classmethod
    def from_domain(cls, offer: LoanOffer) -> "LoanOfferSchema":
        return cls(**asdict(offer))


class LoanRequest(BaseModel):
    """Request body for POST /v1/loans/quote and POST /v1/loans"""

    model_config = ConfigDict(allow_inf_nan=False)

    loan_type: LoanType
    amount: float = Field(..., description="Requested principal")
    credit_score: int = Field(..., ge=300, le=850, description="Credit score, 300-850")


class LoanQuoteResponse(BaseModel):
    offer_type: LoanType
    amount: float
    credit_multiplier: float
    adjusted_interest_rate: float
    monthly_payment: float
    total_repayment: float
    total_interest: float
    qualifies: bool

    @classmethod
    def from_domain(cls, quote: LoanQuote) -> "LoanQuoteResponse":
        return cls(**asdict(quote))


class LoanSchema(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    loan_type: LoanType
    amount: float = Field(..., ge=0)
    original_amount: float = Field(..., gt=0)
    interest_rate: float = Field(..., ge=0)
    monthly_payment: float = Field(..., ge=0)
    total_payments: int = Field(..., gt=0)
    remaining_payments: int = Field(..., ge=0)
    missed_payments: int = Field(0, ge=0)
    status: LoanStatus = LoanStatus.ACTIVE
    taken_date: Optional[datetime] = None
    progress: float = 0.0

    @classmethod
    def from_domain(cls, loan: Loan, progress: float = 0.0) -> "LoanSchema":
        return cls(**asdict(loan), progress=progress)

    def to_domain(self) -> Loan:
        return Loan(**self.model_dump(exclude={"progress"}))


class RepayRequest(BaseModel):
    """Request body for POST /v1/loans/repay; omit amount for one scheduled payment"""

    model_config = ConfigDict(allow_inf_nan=False)

    loan: LoanSchema
    amount: Optional[float] = None


class RepaymentResponse(BaseModel):
    loan: LoanSchema
    amount_paid: float
    principal_paid: float
    interest_paid: float


class MissedPaymentRequest(BaseModel):
    loan: LoanSchema


class DebtSummaryRequest(BaseModel):
    loans: List[LoanSchema]


class DebtSummaryResponse(BaseModel):
    total_debt: float
    total_monthly_payments: float
    active_loans: int


# Credit


class CreditResponse(BaseModel):
    score: int
    label: str
    tier: CreditTier
    position: float
    multiplier: float


# Trading


class HoldingSchema(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    kind: HoldingKind
    market_value: float = Field(..., ge=0)
    shares_owned: float = Field(..., ge=0, le=100)
    current_income: float = 0.0
    name: str = ""
    industry: str = ""
    ticker: Optional[str] = None
    volatility: Optional[float] = None

    def to_domain(self) -> Holding:
        return Holding(**self.model_dump())


class TradeRequest(BaseModel):
    """Request body for POST /v1/trades/buy and /v1/trades/sell"""

    model_config = ConfigDict(allow_inf_nan=False)

    holding: HoldingSchema
    percentage: float
    cash: Optional[float] = Field(None, description="Checked against cost on buys when given")


class TradeResponse(BaseModel):
    holding_id: str
    percentage: float
    shares_before: float
    shares_after: float
    cash_delta: float
    fee: float
    buy_steps: List[int]
    sell_steps: List[int]


class PortfolioRequest(BaseModel):
    holdings: List[HoldingSchema]


class PortfolioResponse(BaseModel):
    portfolio_value: float
    total_shares: float
    income_per_second: float
    daily_income: float
    holdings: int


# Production


class ProjectTypeSchema(BaseModel):
    type: ProjectType
    name: str
    min_budget: float
    max_budget: float
    production_time_seconds: float
    description: str
    examples: str

    @classmethod
    def from_domain(cls, info: ProjectTypeInfo) -> "ProjectTypeSchema":
        return cls(
            type=info.type,
            name=info.name,
            min_budget=info.min_budget,
            max_budget=info.max_budget,
            production_time_seconds=info.production_time.total_seconds(),
            description=info.description,
            examples=info.examples,
        )


class StartProductionRequest(BaseModel):
    """Request body for POST /v1/productions"""

    model_config = ConfigDict(allow_inf_nan=False)

    company_id: str = Field(..., min_length=1)
    project_type: ProjectType
    budget: float
    cash: float
    title: str = ""
    genre: str = ""
    company_level: int = Field(1, ge=1)
    is_auto_generated: bool = False


class ProjectSchema(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    company_id: str
    title: str
    genre: str
    type: ProjectType
    budget: float = Field(..., gt=0)
    production_time_seconds: float
    release_date: datetime
    status: ProjectStatus = ProjectStatus.IN_PRODUCTION
    gross_earnings: float = 0.0
    is_auto_generated: bool = False

    @classmethod
    def from_domain(cls, project: BoxOfficeProject) -> "ProjectSchema":
        data = asdict(project)
        data["production_time_seconds"] = data.pop("production_time").total_seconds()
        return cls(**data)

    def to_domain(self) -> BoxOfficeProject:
        data = self.model_dump()
        data["production_time"] = timedelta(seconds=data.pop("production_time_seconds"))
        if data["release_date"].tzinfo is None:
            data["release_date"] = data["release_date"].replace(tzinfo=timezone.utc)
        return BoxOfficeProject(**data)


class StartProductionResponse(BaseModel):
    project: ProjectSchema
    budget_category: str
    success_bonus: int
    max_potential: float


class ReleaseRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    project: ProjectSchema
    gross_earnings: float = Field(..., ge=0)


class ReleaseResponse(BaseModel):
    project: ProjectSchema
    outcome: str
    return_percentage: float


class OutcomeResponse(BaseModel):
    gross_earnings: float
    budget: float
    multiple: float
    outcome: str


# Auto-production


class AutoSettingsSchema(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    enabled: bool = True
    min_cash_reserve: float = 100_000
    max_investment_percentage: float = 0.2
    preferred_project_type: Literal["movie", "series", "documentary", "auto"] = "auto"
    aggressiveness: Aggressiveness = Aggressiveness.BALANCED

    @classmethod
    def from_domain(cls, settings: AutoBoxOfficeSettings) -> "AutoSettingsSchema":
        return cls(**asdict(settings))

    def to_domain(self) -> AutoBoxOfficeSettings:
        return AutoBoxOfficeSettings(**self.model_dump())


class PlanRequest(BaseModel):
    """Request body for POST /v1/auto-investment/plan"""

    model_config = ConfigDict(allow_inf_nan=False)

    settings: AutoSettingsSchema
    current_cash: float


class PlanResponse(BaseModel):
    enabled: bool
    available_cash: float
    estimated_budget: float
    can_afford_realistic_production: bool
    project_type: Optional[ProjectType] = None
    budget: float
    budget_category: Optional[str] = None
    recommended_label: str
    aggressiveness_multiplier: float

    @classmethod
    def from_domain(cls, plan: InvestmentPlan) -> "PlanResponse":
        return cls(**asdict(plan))


# Companies


class IndustrySchema(BaseModel):
    id: str
    name: str
    base_cost: float
    base_income: float
    icon: str

    @classmethod
    def from_domain(cls, industry: Industry) -> "IndustrySchema":
        return cls(**asdict(industry))


class CreateCompanyRequest(BaseModel):
    """Request body for POST /v1/companies"""

    model_config = ConfigDict(allow_inf_nan=False)

    industry_id: str
    name: str
    cash: float


class CompanySchema(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    name: str
    industry: str
    level: int = Field(..., ge=1)
    market_value: float = Field(..., ge=0)
    current_income: float
    shares_owned: float = Field(..., ge=0, le=100)
    upgrade_cost: float
    icon: str = ""
    movies_produced: Optional[int] = None
    total_box_office_earnings: Optional[float] = None

    @classmethod
    def from_domain(cls, company: Company) -> "CompanySchema":
        return cls(**asdict(company))

    def to_domain(self) -> Company:
        return Company(**self.model_dump())


# Saves


class SaveRequest(BaseModel):
    """Request body for POST /v1/saves and PUT /v1/saves/{slot_id}"""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    cash: float
    companies: List[CompanySchema] = []
    play_time: int = Field(0, ge=0)
    state: Optional[Dict[str, Any]] = None


class SaveSlotSchema(BaseModel):
    id: str
    name: str
    last_played: datetime
    net_worth: float
    companies: int
    play_time: int
    deletable: bool

    @classmethod
    def from_domain(cls, slot: SaveSlot, deletable: bool) -> "SaveSlotSchema":
        return cls(**asdict(slot), deletable=deletable)


class SaveListResponse(BaseModel):
    slots: List[SaveSlotSchema]


class SaveDetailResponse(BaseModel):
    slot: SaveSlotSchema
    state: Optional[Dict[str, Any]] = None
