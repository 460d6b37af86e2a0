"""Domain-specific exceptions"""

from loan_gateway.domain.models import FailureKind


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class LoanDecisionError(DomainException):
    """Terminal failure of a loan decision, tagged with its FailureKind"""

    kind: FailureKind = FailureKind.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPersonalCodeError(LoanDecisionError):
    """Personal ID code failed structural, checksum or birth date checks"""

    kind = FailureKind.INVALID_PERSONAL_CODE


class InvalidLoanAmountError(LoanDecisionError):
    """Requested amount is outside the configured bounds"""

    kind = FailureKind.INVALID_LOAN_AMOUNT


class InvalidLoanPeriodError(LoanDecisionError):
    """Requested period is outside the configured bounds"""

    kind = FailureKind.INVALID_LOAN_PERIOD


class InvalidAgeError(LoanDecisionError):
    """Customer age derived from the personal code is not eligible"""

    kind = FailureKind.INVALID_AGE


class NoValidLoanError(LoanDecisionError):
    """No amount/period combination satisfies the policy"""

    kind = FailureKind.NO_VALID_LOAN
