"""UserService: registration, profile updates and deregistration."""

from __future__ import annotations

import logging

from domain.entities.user import User
from domain.exceptions import DuplicateUsername, UserNotFound
from domain.repositories.user_repository import UserRepository
from domain.validators.input_validator import validate_profile
from domain.value_objects.auth import RegistrationData
from infrastructure.security.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class UserService:
    """
    Drives the account lifecycle:
    Unregistered -> Registered -> (Updated)* -> Deregistered.
    """

    def __init__(self, repository: UserRepository, hasher: PasswordHasher) -> None:
        self._repo = repository
        self._hasher = hasher

    async def register(self, data: RegistrationData) -> User:
        profile = validate_profile(
            data.username, data.password, data.email, data.birthday
        )

        if await self._repo.find_by_username(profile.username):
            raise DuplicateUsername(profile.username)

        user = User.create(
            username=profile.username,
            password_hash=self._hasher.hash(profile.password),
            email=profile.email,
            birthday=profile.birthday,
        )
        # The store's unique constraint catches a concurrent registration
        await self._repo.save(user)
        logger.info("User '%s' registered", user.username)
        return user

    async def update(self, username: str, data: RegistrationData) -> User:
        profile = validate_profile(
            data.username, data.password, data.email, data.birthday
        )

        user = await self._repo.find_by_username(username)
        if user is None:
            raise UserNotFound(username)

        if profile.username != user.username:
            existing = await self._repo.find_by_username(profile.username)
            if existing and existing.id != user.id:
                raise DuplicateUsername(profile.username)

        user.update_profile(
            username=profile.username,
            password_hash=self._hasher.hash(profile.password),
            email=profile.email,
            birthday=profile.birthday,
        )
        if not await self._repo.update(user):
            raise UserNotFound(username)

        logger.info("User '%s' updated (now '%s')", username, user.username)
        return await self._repo.find_by_username(user.username) or user

    async def deregister(self, username: str) -> None:
        if not await self._repo.delete_by_username(username):
            raise UserNotFound(username)
        logger.info("User '%s' deregistered", username)

    async def get_user(self, username: str) -> User:
        user = await self._repo.find_by_username(username)
        if user is None:
            raise UserNotFound(username)
        return user

    async def list_users(self) -> list[User]:
        return await self._repo.find_all()
