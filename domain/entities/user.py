"""User entity: a registered catalog user and their favorites set."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    id: str
    username: str
    password_hash: str
    email: str
    birthday: Optional[date] = None
    favorite_movies: set[str] = field(default_factory=set)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(
        cls,
        username: str,
        password_hash: str,
        email: str,
        birthday: Optional[date] = None,
    ) -> User:
        """Build a freshly registered user. Fields must already be validated."""
        now = _utcnow()
        return cls(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=password_hash,
            email=email,
            birthday=birthday,
            favorite_movies=set(),
            created_at=now,
            updated_at=now,
        )

    def update_profile(
        self,
        username: str,
        password_hash: str,
        email: str,
        birthday: Optional[date] = None,
    ) -> None:
        # Favorites follow the user id and are left as is
        self.username = username
        self.password_hash = password_hash
        self.email = email
        self.birthday = birthday
        self.updated_at = _utcnow()

    def change_password(self, new_password_hash: str) -> None:
        self.password_hash = new_password_hash
        self.updated_at = _utcnow()
