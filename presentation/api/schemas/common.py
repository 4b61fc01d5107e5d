"""Common response schemas used across all API endpoints."""

from typing import List

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(..., description="Error message")


class FieldError(BaseModel):
    field: str = Field(..., description="Offending request field")
    msg: str = Field(..., description="Why the field was rejected")


class ValidationErrorResponse(BaseModel):
    """Returned with 422 when profile fields fail validation."""

    errors: List[FieldError] = Field(default_factory=list)
