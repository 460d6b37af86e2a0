"""Loan decision engine - core business logic for loan approvals"""

from datetime import date
from typing import Callable, Optional

from stdnum.ee import ik

from loan_gateway.domain.exceptions import (
    InvalidAgeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    LoanDecisionError,
    NoValidLoanError,
)
from loan_gateway.domain.models import LoanDecision, LoanRequest
from loan_gateway.domain.personal_code import is_well_formed, parse_birth_date, segment_number
from loan_gateway.domain.policy import DecisionPolicy
from loan_gateway.utils.date_utils import calculate_age

PersonalCodeValidator = Callable[[str], bool]
Clock = Callable[[], date]


def credit_modifier_for(personal_code: str, policy: DecisionPolicy) -> int:
    """Credit modifier of the segment the personal code's last four digits fall into"""
    return policy.segment_for(segment_number(personal_code)).credit_modifier


def highest_valid_loan_amount(credit_modifier: int, loan_period: int) -> int:
    """Largest amount the customer can carry over loan_period months"""
    return credit_modifier * loan_period


def find_approvable_loan(credit_modifier: int, loan_period: int, policy: DecisionPolicy) -> tuple[int, int]:
    """
    Search for the loan to offer, starting at the requested period.

    Rules:
    - The period is only ever extended, never shortened
    - The first period whose capacity reaches min_loan_amount wins
    - The amount at that period is capped at max_loan_amount

    Returns: (approved_amount, approved_period)

    Raises:
        NoValidLoanError: Capacity stays below min_loan_amount up to max_loan_period
    """
    if credit_modifier <= 0:
        raise NoValidLoanError("No valid loan found!")

    for period in range(loan_period, policy.max_loan_period + 1):
        capacity = highest_valid_loan_amount(credit_modifier, period)
        if capacity >= policy.min_loan_amount:
            return min(policy.max_loan_amount, capacity), period

    raise NoValidLoanError("No valid loan found!")


class LoanDecisionCalculator:
    """
    Decides the maximum loan a customer qualifies for.

    Holds no per-call state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        policy: DecisionPolicy,
        validator: Optional[PersonalCodeValidator] = None,
        clock: Optional[Clock] = None,
    ):
        self.policy = policy
        self.validator = validator or ik.is_valid
        self.clock = clock or date.today

    def decide(self, personal_code: str, loan_amount: int, loan_period: int) -> LoanDecision:
        """Run the decision and report failures as a failed LoanDecision"""
        try:
            amount, period = self.calculate_approved_loan(personal_code, loan_amount, loan_period)
        except LoanDecisionError as e:
            return LoanDecision.fail(e.kind, e.message)
        return LoanDecision.approve(amount, period)

    def decide_request(self, request: LoanRequest) -> LoanDecision:
        return self.decide(request.personal_code, request.loan_amount, request.loan_period)

    def calculate_approved_loan(self, personal_code: str, loan_amount: int, loan_period: int) -> tuple[int, int]:
        """
        Main entry point: validate the request and compute the loan offer.

        Returns: (approved_amount, approved_period)

        Raises:
            InvalidPersonalCodeError: Personal code is malformed or fails its checksum
            InvalidLoanAmountError: Requested amount is out of bounds
            InvalidLoanPeriodError: Requested period is out of bounds
            InvalidAgeError: Customer is too young or too old
            NoValidLoanError: Customer is in debt or no period yields the minimum amount
        """
        self.verify_inputs(personal_code, loan_amount, loan_period)

        credit_modifier = credit_modifier_for(personal_code, self.policy)
        return find_approvable_loan(credit_modifier, loan_period, self.policy)

    def verify_inputs(self, personal_code: str, loan_amount: int, loan_period: int) -> None:
        """Check inputs in order: personal code, amount, period, age"""
        policy = self.policy

        if not is_well_formed(personal_code) or not self.validator(personal_code):
            raise InvalidPersonalCodeError("Invalid personal ID code!")
        if not policy.min_loan_amount <= loan_amount <= policy.max_loan_amount:
            raise InvalidLoanAmountError("Invalid loan amount!")
        if not policy.min_loan_period <= loan_period <= policy.max_loan_period:
            raise InvalidLoanPeriodError("Invalid loan period!")
        if not self.is_eligible_by_age(personal_code):
            raise InvalidAgeError("Invalid age!")

    def is_eligible_by_age(self, personal_code: str) -> bool:
        age = calculate_age(parse_birth_date(personal_code), self.clock())
        return self.policy.min_age <= age <= self.policy.max_age
