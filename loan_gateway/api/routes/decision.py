"""POST /loan/decision - loan decision endpoint"""

import logging
import time
from typing import Dict

from fastapi import APIRouter, Depends, Request, Response, status

from loan_gateway.api.dependencies import get_loan_calculator, get_request_id
from loan_gateway.api.schemas import DecisionRequest, DecisionResponse
from loan_gateway.domain.decision import LoanDecisionCalculator
from loan_gateway.domain.models import FailureKind, LoanRequest
from loan_gateway.infrastructure.observability.logging import log_decision
from loan_gateway.infrastructure.observability.metrics import decision_counter, record_decision

router = APIRouter()

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

FAILURE_STATUS_CODES: Dict[FailureKind, int] = {
    FailureKind.INVALID_PERSONAL_CODE: status.HTTP_400_BAD_REQUEST,
    FailureKind.INVALID_LOAN_AMOUNT: status.HTTP_400_BAD_REQUEST,
    FailureKind.INVALID_LOAN_PERIOD: status.HTTP_400_BAD_REQUEST,
    FailureKind.INVALID_AGE: status.HTTP_400_BAD_REQUEST,
    FailureKind.NO_VALID_LOAN: status.HTTP_404_NOT_FOUND,
    FailureKind.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post("/decision", response_model=DecisionResponse)
async def request_decision(
    request_body: DecisionRequest,
    request: Request,
    response: Response,
    calculator: LoanDecisionCalculator = Depends(get_loan_calculator),
):
    """
    Decide the maximum loan amount and period for a customer.

    Flow:
    1. Validate personal code, amount, period and age
    2. Pick the credit modifier from the personal code's segment
    3. Extend the period until the minimum loan amount is reachable
    4. Return the approved amount and period, or the reason for refusal

    Status codes:
    - 200: loan approved
    - 400: invalid personal code, amount, period or age
    - 404: no valid loan for this customer
    - 500: unexpected error
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        decision = calculator.decide_request(
            LoanRequest(
                personal_code=request_body.personal_code,
                loan_amount=request_body.loan_amount,
                loan_period=request_body.loan_period,
            )
        )
    except Exception as e:
        decision_counter.labels(outcome=FailureKind.INTERNAL_ERROR.value).inc()
        logging.exception(f"Unexpected error: {e}", extra={"request_id": request_id})
        response.status_code = FAILURE_STATUS_CODES[FailureKind.INTERNAL_ERROR]
        return DecisionResponse(error_message=UNEXPECTED_ERROR_MESSAGE)

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_decision(decision)
    log_decision(request_id, decision, duration_ms)

    if not decision.approved:
        response.status_code = FAILURE_STATUS_CODES[decision.failure_kind]
        return DecisionResponse(error_message=decision.failure_reason)

    return DecisionResponse(
        loan_amount=decision.approved_amount,
        loan_period=decision.approved_period,
    )
