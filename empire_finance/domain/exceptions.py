"""Domain-specific exceptions"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationFailure(DomainException):
    """
    A requested action was rejected before any state changed.

    Carries a stable `code` for callers plus the violated bound and the
    offending value so a specific message can be rendered.
    """

    code = "validation-failed"

    def __init__(
        self,
        message: str,
        bound: Optional[float] = None,
        actual: Optional[float] = None,
        shortfall: Optional[float] = None,
    ):
        super().__init__(message)
        self.message = message
        self.bound = bound
        self.actual = actual
        self.shortfall = shortfall

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "bound": self.bound,
            "actual": self.actual,
            "shortfall": self.shortfall,
        }


class CreditTooLow(ValidationFailure):
    """Credit score is below what the loan offer requires"""

    code = "credit-too-low"


class AmountOutOfRange(ValidationFailure):
    """Requested loan amount is outside the offer's limits"""

    code = "amount-out-of-range"


class InvalidAmount(ValidationFailure):
    """Payment amount is zero or negative"""

    code = "invalid-amount"


class LoanNotActive(ValidationFailure):
    """Loan is already paid off or defaulted"""

    code = "loan-not-active"


class BudgetOutOfRange(ValidationFailure):
    """Production budget is outside the project type's band"""

    code = "budget-out-of-range"


class ExceedsAvailableShares(ValidationFailure):
    """Buying would push ownership above 100%"""

    code = "exceeds-available-shares"


class ExceedsOwnedShares(ValidationFailure):
    """Selling more than is currently owned"""

    code = "exceeds-owned-shares"


class InsufficientFunds(ValidationFailure):
    """Cost of the action is more than the cash on hand"""

    code = "insufficient-funds"


class InvalidPercentage(ValidationFailure):
    """Share percentage is non-positive or above 100"""

    code = "invalid-percentage"


class InvalidCreditScore(ValidationFailure):
    """Credit score is outside 300-850"""

    code = "invalid-credit-score"


class InvalidSettings(ValidationFailure):
    """Auto-production settings are outside their allowed ranges"""

    code = "invalid-settings"


class AlreadyReleased(ValidationFailure):
    """Gross earnings were already assigned to this project"""

    code = "already-released"


class NotYetReleased(ValidationFailure):
    """Production is still running; the release date has not passed"""

    code = "not-yet-released"


class InvalidCompanyName(ValidationFailure):
    code = "invalid-company-name"


class InvalidSlotName(ValidationFailure):
    code = "invalid-slot-name"


class ProtectedSaveSlot(ValidationFailure):
    """The default save slot cannot be deleted"""

    code = "protected-save-slot"


class UnknownCatalogEntry(DomainException):
    """Loan type, project type or industry not present in the catalog"""

    pass


class SaveSlotNotFound(DomainException):
    pass
