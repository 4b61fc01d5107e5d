"""AuthService: login and request authorization."""

from __future__ import annotations

import logging

from domain.exceptions import InvalidCredentials, StoreUnavailable
from domain.repositories.user_repository import UserRepository
from domain.value_objects.auth import Credentials, Identity, LoginResult
from application.services.token_service import TokenService
from infrastructure.security.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class AuthService:
    """Application service for credential checks and access tokens."""

    def __init__(
        self,
        repository: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._repo = repository
        self._hasher = hasher
        self._tokens = tokens

    # --- Authentication ---

    async def authenticate(self, credentials: Credentials) -> LoginResult:
        """
        Verify username/password and issue an access token.

        Unknown user and wrong password raise the same InvalidCredentials,
        and both pay for one argon2 verification.
        """
        user = await self._repo.find_by_username(credentials.username)
        if user is None:
            self._hasher.verify_dummy(credentials.password)
            logger.warning("Failed login for user '%s'", credentials.username)
            raise InvalidCredentials()

        if not self._hasher.verify(credentials.password, user.password_hash):
            logger.warning("Failed login for user '%s'", credentials.username)
            raise InvalidCredentials()

        # Rehash if needed (argon2 parameter upgrade)
        if self._hasher.needs_rehash(user.password_hash):
            user.change_password(self._hasher.hash(credentials.password))
            try:
                await self._repo.update(user)
            except StoreUnavailable:
                logger.warning("Could not store rehashed password for '%s'", user.username)

        token = self._tokens.issue(user.username)
        logger.info("User '%s' logged in successfully", user.username)
        return LoginResult(user=user, access_token=token)

    # --- Authorization ---

    def authorize(self, raw_token: str) -> Identity:
        """
        Resolve a bearer token to the caller's identity.

        The identity is not re-checked against the credential store.
        """
        return self._tokens.verify(raw_token)
