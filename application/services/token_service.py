"""TokenService: issue and verify signed, time-limited access tokens."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import jwt

from domain.exceptions import MalformedToken, TokenExpired
from domain.value_objects.auth import AccessToken, Identity

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class TokenService:
    """
    Stateless JWT access tokens.

    Tokens are trusted on signature and expiry alone. The subject is not
    looked up again, so a deregistered user's token keeps working until
    it expires.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def issue(self, username: str) -> AccessToken:
        # exp is encoded in whole seconds
        now = datetime.now(timezone.utc).replace(microsecond=0)
        expires_at = now + timedelta(minutes=self._expire_minutes)
        payload = {
            "sub": username,
            "iat": now,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return AccessToken(
            token=token,
            expires_at=expires_at,
            expires_in=self._expire_minutes * 60,
        )

    def verify(self, raw_token: str) -> Identity:
        """
        Check signature and expiry of ``raw_token``.

        Raises:
            TokenExpired: signature is fine but now >= exp.
            MalformedToken: anything else wrong with the token.
        """
        if not raw_token:
            raise MalformedToken("Missing token.")
        try:
            payload = jwt.decode(
                raw_token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpired()
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise MalformedToken()

        subject = payload["sub"]
        if not isinstance(subject, str) or not subject:
            raise MalformedToken()

        return Identity(
            username=subject,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
