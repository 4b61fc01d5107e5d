"""Value objects for authentication and account requests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from domain.entities.user import User


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as asserted by a verified access token."""

    username: str  # token subject
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class AccessToken:
    token: str
    expires_at: datetime
    expires_in: int  # seconds
    token_type: str = "bearer"


@dataclass(frozen=True)
class LoginResult:
    user: User
    access_token: AccessToken


@dataclass(frozen=True)
class RegistrationData:
    """Raw profile fields for registration or profile update."""

    username: str
    password: str
    email: str
    birthday: Optional[date] = None

    def __repr__(self) -> str:
        return (
            f"RegistrationData(username={self.username!r}, password='***', "
            f"email={self.email!r}, birthday={self.birthday!r})"
        )
