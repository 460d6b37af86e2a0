"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureKind(str, Enum):
    """Reason a loan decision was not approved"""

    INVALID_PERSONAL_CODE = "invalid_personal_code"
    INVALID_LOAN_AMOUNT = "invalid_loan_amount"
    INVALID_LOAN_PERIOD = "invalid_loan_period"
    INVALID_AGE = "invalid_age"
    NO_VALID_LOAN = "no_valid_loan"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as submitted by the customer"""

    personal_code: str
    loan_amount: int  # EUR
    loan_period: int  # months


@dataclass(frozen=True)
class LoanDecision:
    """
    Outcome of a loan decision.

    Either approved_amount and approved_period are set, or failure_kind and
    failure_reason are set. Never both, never neither.
    """

    approved_amount: Optional[int] = None
    approved_period: Optional[int] = None
    failure_kind: Optional[FailureKind] = None
    failure_reason: Optional[str] = None

    def __post_init__(self) -> None:
        has_offer = self.approved_amount is not None and self.approved_period is not None
        has_partial_offer = (self.approved_amount is None) != (self.approved_period is None)
        has_failure = self.failure_kind is not None and self.failure_reason is not None
        has_partial_failure = (self.failure_kind is None) != (self.failure_reason is None)

        if has_partial_offer or has_partial_failure or has_offer == has_failure:
            raise ValueError(
                "LoanDecision must carry either an approved amount and period or a failure, not both"
            )

    @classmethod
    def approve(cls, amount: int, period: int) -> "LoanDecision":
        return cls(approved_amount=amount, approved_period=period)

    @classmethod
    def fail(cls, kind: FailureKind, reason: str) -> "LoanDecision":
        return cls(failure_kind=kind, failure_reason=reason)

    @property
    def approved(self) -> bool:
        return self.failure_kind is None
