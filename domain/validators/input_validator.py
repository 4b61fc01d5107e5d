"""
Input validation for user profile fields.

Registration and profile updates run through the same rules, so both
go through ValidatedProfile.
"""

import logging
import re
from datetime import date
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError

from domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 5
USERNAME_PATTERN = re.compile(r"[A-Za-z0-9]+")


class ValidatedProfile(BaseModel):
    """Validated registration / profile update fields"""
    username: str
    password: str
    email: str
    birthday: Optional[date] = None

    @field_validator('username')
    @classmethod
    def validate_username(cls, v: str) -> str:
        if len(v) < USERNAME_MIN_LENGTH:
            raise ValueError(
                f'Username must be at least {USERNAME_MIN_LENGTH} characters'
            )
        if not USERNAME_PATTERN.fullmatch(v):
            raise ValueError(
                'Username contains non alphanumeric characters - not allowed'
            )
        return v

    @field_validator('password')
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v:
            raise ValueError('Password is required')
        return v

    @field_validator('email')
    @classmethod
    def validate_email_address(cls, v: str) -> str:
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError('Email does not appear to be valid')
        return v


def validate_profile(
    username: str,
    password: str,
    email: str,
    birthday: Optional[date] = None,
) -> ValidatedProfile:
    """
    Validate profile fields, collecting every failure.

    Raises:
        ValidationError: with one {"field", "msg"} entry per failed field.
    """
    try:
        return ValidatedProfile(
            username=username,
            password=password,
            email=email,
            birthday=birthday,
        )
    except PydanticValidationError as e:
        errors = []
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "__root__"
            ctx_error = err.get("ctx", {}).get("error")
            errors.append({
                "field": field,
                "msg": str(ctx_error) if ctx_error is not None else err["msg"],
            })
        logger.info("Profile validation failed: %s", [e["field"] for e in errors])
        raise ValidationError(errors) from e
