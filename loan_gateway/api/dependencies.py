"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from loan_gateway.domain.decision import LoanDecisionCalculator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_loan_calculator(request: Request) -> LoanDecisionCalculator:
    """Provide the shared, stateless loan decision calculator built at startup"""
    return request.app.state.loan_calculator
