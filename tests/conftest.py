"""Pytest fixtures for testing"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from loan_gateway.api.dependencies import get_loan_calculator
from loan_gateway.api.main import create_app
from loan_gateway.domain.decision import LoanDecisionCalculator
from loan_gateway.domain.policy import DecisionPolicy

# Valid Estonian personal codes below are all born 1990-02-01;
# the last four digits pick the credit segment.


@pytest.fixture
def debt_code() -> str:
    """0965 -> debt"""
    return "49002010965"


@pytest.fixture
def segment_1_code() -> str:
    """3455 -> modifier 100"""
    return "49002013455"


@pytest.fixture
def segment_1_low_code() -> str:
    """2501 -> modifier 100"""
    return "49002012501"


@pytest.fixture
def segment_2_code() -> str:
    """6010 -> modifier 300"""
    return "49002016010"


@pytest.fixture
def segment_3_code() -> str:
    """8004 -> modifier 1000"""
    return "49002018004"


@pytest.fixture
def birth_date() -> date:
    """Birth date encoded in every sample personal code"""
    return date(1990, 2, 1)


@pytest.fixture
def today() -> date:
    """Fixed clock date for decisions"""
    return date(2026, 10, 18)


@pytest.fixture
def policy() -> DecisionPolicy:
    """Default business constants"""
    return DecisionPolicy()


@pytest.fixture
def calculator(policy: DecisionPolicy, today: date) -> LoanDecisionCalculator:
    """Calculator with a fixed clock and the real personal code validator"""
    return LoanDecisionCalculator(policy, clock=lambda: today)


@pytest.fixture
def client(calculator: LoanDecisionCalculator) -> TestClient:
    """Create FastAPI test client with a deterministic calculator"""
    app = create_app()
    app.dependency_overrides[get_loan_calculator] = lambda: calculator
    return TestClient(app)
