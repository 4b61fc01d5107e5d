"""Domain value objects"""

from domain.value_objects.auth import (
    AccessToken,
    Credentials,
    Identity,
    LoginResult,
    RegistrationData,
)

__all__ = [
    "AccessToken",
    "Credentials",
    "Identity",
    "LoginResult",
    "RegistrationData",
]
