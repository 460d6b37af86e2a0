"""Pydantic schemas for API request/response validation"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase JSON while keeping snake_case attributes"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DecisionRequest(CamelModel):
    """Request body for POST /loan/decision"""

    personal_code: str = Field(..., description="Estonian personal ID code")
    loan_amount: int = Field(..., description="Requested loan amount in EUR")
    loan_period: int = Field(..., description="Requested loan period in months")


class DecisionResponse(CamelModel):
    """Response for POST /loan/decision"""

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None
