"""Argon2 password hashing."""

from __future__ import annotations

import logging
import secrets
from typing import Optional

from argon2 import PasswordHasher as _Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """
    One-way password hashing on argon2id.

    ``verify`` never raises: a wrong password and a malformed digest
    both come back as False. argon2 compares in constant time.
    """

    def __init__(
        self,
        time_cost: Optional[int] = None,
        memory_cost: Optional[int] = None,
        parallelism: Optional[int] = None,
    ) -> None:
        params = {}
        if time_cost is not None:
            params["time_cost"] = time_cost
        if memory_cost is not None:
            params["memory_cost"] = memory_cost
        if parallelism is not None:
            params["parallelism"] = parallelism
        self._ph = _Argon2Hasher(**params)
        # Verified against when the username is unknown
        self._dummy_hash = self._ph.hash(secrets.token_urlsafe(16))

    def hash(self, plaintext: str) -> str:
        if not plaintext:
            raise ValueError("password must not be empty")
        return self._ph.hash(plaintext)

    def verify(self, plaintext: str, digest: str) -> bool:
        try:
            return self._ph.verify(digest, plaintext)
        except (VerificationError, InvalidHashError):
            return False

    def needs_rehash(self, digest: str) -> bool:
        try:
            return self._ph.check_needs_rehash(digest)
        except InvalidHashError:
            return False

    def verify_dummy(self, plaintext: str) -> bool:
        """Spend a verification on the dummy digest. Always False."""
        self.verify(plaintext, self._dummy_hash)
        return False
