"""Business constants for loan decisions, grouped into an immutable policy"""

from dataclasses import dataclass, field
from typing import Tuple

# Segment number is the last four digits of the personal code
SEGMENT_NUMBER_LIMIT = 10_000


@dataclass(frozen=True)
class CreditSegment:
    """Range of segment numbers [lower_bound, next segment's lower_bound) sharing a credit modifier"""

    name: str
    lower_bound: int
    credit_modifier: int


DEFAULT_SEGMENTS: Tuple[CreditSegment, ...] = (
    CreditSegment(name="debt", lower_bound=0, credit_modifier=0),
    CreditSegment(name="segment_1", lower_bound=2500, credit_modifier=100),
    CreditSegment(name="segment_2", lower_bound=5000, credit_modifier=300),
    CreditSegment(name="segment_3", lower_bound=7500, credit_modifier=1000),
)


@dataclass(frozen=True)
class DecisionPolicy:
    """
    Bounds and credit segments the decision engine works with.

    Defaults:
    - Loan amount: 2000 - 10000 EUR (inclusive)
    - Loan period: 12 - 60 months (inclusive)
    - Customer age: 18 - 75 years (inclusive)
    - Segments: debt 0000-2499, segment 1 2500-4999, segment 2 5000-7499, segment 3 7500-9999
    """

    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 60
    min_age: int = 18
    max_age: int = 75
    segments: Tuple[CreditSegment, ...] = field(default=DEFAULT_SEGMENTS)

    def __post_init__(self) -> None:
        if not 0 < self.min_loan_amount <= self.max_loan_amount:
            raise ValueError("Loan amount bounds must satisfy 0 < min <= max")
        if not 0 < self.min_loan_period <= self.max_loan_period:
            raise ValueError("Loan period bounds must satisfy 0 < min <= max")
        if not 0 <= self.min_age <= self.max_age:
            raise ValueError("Age bounds must satisfy 0 <= min <= max")

        if not self.segments or self.segments[0].lower_bound != 0:
            raise ValueError("First credit segment must start at 0")
        bounds = [segment.lower_bound for segment in self.segments]
        if any(lower >= upper for lower, upper in zip(bounds, bounds[1:])):
            raise ValueError("Credit segment bounds must be strictly ascending")
        if bounds[-1] >= SEGMENT_NUMBER_LIMIT:
            raise ValueError(f"Credit segment bounds must be below {SEGMENT_NUMBER_LIMIT}")
        if any(segment.credit_modifier < 0 for segment in self.segments):
            raise ValueError("Credit modifiers cannot be negative")

    def segment_for(self, segment_number: int) -> CreditSegment:
        """Return the segment whose range contains segment_number"""
        matched = self.segments[0]
        for segment in self.segments:
            if segment.lower_bound <= segment_number:
                matched = segment
        return matched
