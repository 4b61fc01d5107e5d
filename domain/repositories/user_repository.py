"""Repository interface for the User entity (the credential store)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities.user import User


class UserRepository(ABC):
    """
    Credential store.

    Implementations must make ``save`` and ``update`` fail with
    DuplicateUsername on a username collision, and must implement the
    favorites mutations as single atomic set operations rather than
    read-modify-write.
    """

    @abstractmethod
    async def save(self, user: User) -> None:
        ...

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    async def find_all(self) -> list[User]:
        ...

    @abstractmethod
    async def update(self, user: User) -> bool:
        """Persist profile fields; False if the user no longer exists."""
        ...

    @abstractmethod
    async def delete_by_username(self, username: str) -> bool:
        ...

    @abstractmethod
    async def add_favorite(self, username: str, movie_id: str) -> Optional[User]:
        """Set-add; returns the updated user or None if no such user."""
        ...

    @abstractmethod
    async def remove_favorite(self, username: str, movie_id: str) -> Optional[User]:
        """Set-remove; returns the updated user or None if no such user."""
        ...
