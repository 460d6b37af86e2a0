"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_gateway.domain.policy import CreditSegment, DecisionPolicy


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-gateway"
    log_level: str = "INFO"
    cors_origins: List[str] = ["http://localhost:3000"]

    # Loan bounds (EUR / months, inclusive)
    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 60

    # Eligible customer age (years, inclusive)
    min_age: int = 18
    max_age: int = 75

    # Credit segments by last four digits of the personal code; 0 up to segment 1 is debt
    segment_1_lower_bound: int = 2500
    segment_2_lower_bound: int = 5000
    segment_3_lower_bound: int = 7500
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000

    def decision_policy(self) -> DecisionPolicy:
        """Build the decision policy; raises ValueError on inconsistent bounds"""
        return DecisionPolicy(
            min_loan_amount=self.min_loan_amount,
            max_loan_amount=self.max_loan_amount,
            min_loan_period=self.min_loan_period,
            max_loan_period=self.max_loan_period,
            min_age=self.min_age,
            max_age=self.max_age,
            segments=(
                CreditSegment(name="debt", lower_bound=0, credit_modifier=0),
                CreditSegment(
                    name="segment_1",
                    lower_bound=self.segment_1_lower_bound,
                    credit_modifier=self.segment_1_credit_modifier,
                ),
                CreditSegment(
                    name="segment_2",
                    lower_bound=self.segment_2_lower_bound,
                    credit_modifier=self.segment_2_credit_modifier,
                ),
                CreditSegment(
                    name="segment_3",
                    lower_bound=self.segment_3_lower_bound,
                    credit_modifier=self.segment_3_credit_modifier,
                ),
            ),
        )


settings = Settings()
