"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from loan_gateway.domain.models import LoanDecision


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "loan-gateway", **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "loan-gateway") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_decision(request_id: str, decision: LoanDecision, duration_ms: float) -> None:
    """Log structured decision outcome for analysis (personal codes are never logged)"""
    logging.info(
        "Loan decision completed",
        extra={
            "request_id": request_id,
            "step": "decision_complete",
            "outcome": "approved" if decision.approved else decision.failure_kind.value,
            "approved_amount": decision.approved_amount,
            "approved_period": decision.approved_period,
            "duration_ms": duration_ms,
        },
    )
