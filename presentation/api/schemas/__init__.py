"""Pydantic v2 request/response schemas for REST API."""

from presentation.api.schemas.common import ErrorResponse, FieldError, ValidationErrorResponse
from presentation.api.schemas.system import HealthResponse
from presentation.api.schemas.users import UserProfile, UserProfileRequest
from presentation.api.schemas.auth import LoginRequest, LoginResponse
from presentation.api.schemas.movies import (
    DirectorResponse,
    GenreResponse,
    MovieResponse,
)

__all__ = [
    "ErrorResponse",
    "FieldError",
    "ValidationErrorResponse",
    "HealthResponse",
    "UserProfile",
    "UserProfileRequest",
    "LoginRequest",
    "LoginResponse",
    "DirectorResponse",
    "GenreResponse",
    "MovieResponse",
]
