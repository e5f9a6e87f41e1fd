"""Domain models - pure Python dataclasses representing game-economy entities"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import List, Optional


class LoanType(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EMERGENCY = "emergency"


class LoanStatus(str, Enum):
    ACTIVE = "active"
    PAID_OFF = "paid-off"
    DEFAULTED = "defaulted"


class HoldingKind(str, Enum):
    """Who the player is trading with: their own venture or a listed company"""

    VENTURE = "venture"
    REAL_COMPANY = "real-company"


class ProjectType(str, Enum):
    MOVIE = "movie"
    SERIES = "series"
    DOCUMENTARY = "documentary"


class ProjectStatus(str, Enum):
    IN_PRODUCTION = "in-production"
    RELEASED = "released"
    COMPLETED = "completed"


class Aggressiveness(str, Enum):
    CONSERVATIVE = "conservative"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"


class CreditTier(str, Enum):
    """Credit score bands, best first"""

    EXCELLENT = "excellent"
    VERY_GOOD = "very_good"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


AUTO_PROJECT_TYPE = "auto"


@dataclass(frozen=True)
class LoanOffer:
    """Catalog entry describing a loan product"""

    type: LoanType
    name: str
    description: str
    min_amount: float
    max_amount: float
    base_interest_rate: float  # annual, fraction
    term_months: int
    credit_score_required: int


@dataclass(frozen=True)
class LoanQuote:
    """Terms a given credit score would get on an offer"""

    offer_type: LoanType
    amount: float
    credit_multiplier: float
    adjusted_interest_rate: float
    monthly_payment: float
    total_repayment: float
    total_interest: float
    qualifies: bool


@dataclass(frozen=True)
class Loan:
    """Outstanding (or settled) loan taken from an offer"""

    id: str
    loan_type: LoanType
    amount: float  # remaining principal
    original_amount: float
    interest_rate: float  # annual, after credit adjustment
    monthly_payment: float
    total_payments: int
    remaining_payments: int
    missed_payments: int = 0
    status: LoanStatus = LoanStatus.ACTIVE
    taken_date: Optional[datetime] = None


@dataclass(frozen=True)
class DebtSummary:
    total_debt: float
    total_monthly_payments: float
    active_loans: int


@dataclass(frozen=True)
class Holding:
    """
    Ownership snapshot of a tradeable company.

    Covers both player-created ventures and listed real companies; `kind`
    decides which fee schedule applies on sale.
    """

    id: str
    kind: HoldingKind
    market_value: float
    shares_owned: float  # percent, 0-100
    current_income: float = 0.0  # per second, at 100% ownership
    name: str = ""
    industry: str = ""
    ticker: Optional[str] = None
    volatility: Optional[float] = None


@dataclass(frozen=True)
class TradeResult:
    """Outcome of an accepted share trade"""

    holding_id: str
    percentage: float
    shares_before: float
    shares_after: float
    cash_delta: float  # negative on buys
    fee: float = 0.0


@dataclass(frozen=True)
class PortfolioSummary:
    portfolio_value: float
    total_shares: float
    income_per_second: float
    daily_income: float
    holdings: int


@dataclass(frozen=True)
class Industry:
    """Industry a new venture can be founded in"""

    id: str
    name: str
    base_cost: float
    base_income: float
    icon: str = ""


@dataclass(frozen=True)
class Company:
    """Player-operated venture"""

    id: str
    name: str
    industry: str
    level: int
    market_value: float
    current_income: float
    shares_owned: float
    upgrade_cost: float
    icon: str = ""
    movies_produced: Optional[int] = None
    total_box_office_earnings: Optional[float] = None


@dataclass(frozen=True)
class ProjectTypeInfo:
    """Production tier: budget band and simulated production time"""

    type: ProjectType
    name: str
    min_budget: float
    max_budget: float
    production_time: timedelta
    description: str = ""
    examples: str = ""


@dataclass(frozen=True)
class BoxOfficeProject:
    id: str
    company_id: str
    title: str
    genre: str
    type: ProjectType
    budget: float
    production_time: timedelta
    release_date: datetime
    status: ProjectStatus = ProjectStatus.IN_PRODUCTION
    gross_earnings: float = 0.0
    is_auto_generated: bool = False


@dataclass(frozen=True)
class OutcomeBand:
    label: str
    multiplier: float


@dataclass(frozen=True)
class AutoBoxOfficeSettings:
    enabled: bool = True
    min_cash_reserve: float = 100_000
    max_investment_percentage: float = 0.2
    preferred_project_type: str = AUTO_PROJECT_TYPE  # a ProjectType value or "auto"
    aggressiveness: Aggressiveness = Aggressiveness.BALANCED


@dataclass(frozen=True)
class InvestmentPlan:
    """What auto-production would spend right now, without spending it"""

    enabled: bool
    available_cash: float
    estimated_budget: float
    can_afford_realistic_production: bool
    project_type: Optional[ProjectType]
    budget: float
    budget_category: Optional[str]
    recommended_label: str
    aggressiveness_multiplier: float


@dataclass(frozen=True)
class SaveSlot:
    id: str
    name: str
    last_played: datetime
    net_worth: float
    companies: int
    play_time: int  # seconds


@dataclass
class GameSnapshot:
    """Minimal view of game state needed to describe a save"""

    cash: float
    companies: List[Company] = field(default_factory=list)
    play_time: int = 0


@dataclass(frozen=True)
class Repayment:
    """Loan state after a payment, plus how the cash was applied"""

    loan: Loan
    amount_paid: float
    principal_paid: float
    interest_paid: float
