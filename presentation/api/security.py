"""JWT Bearer authorization guard for protected routes."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from application.services.auth_service import AuthService
from domain.exceptions import AuthError
from domain.value_objects.auth import Identity
from presentation.api.dependencies import get_auth_service

logger = logging.getLogger(__name__)

BEARER_SCHEME = HTTPBearer(auto_error=False)


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(BEARER_SCHEME),
    auth: AuthService = Depends(get_auth_service),
) -> Identity:
    """
    Verify the Bearer token and return the caller's identity.

    Runs before the route body, so a rejected token never reaches a
    service and nothing is mutated.
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization header.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return auth.authorize(credentials.credentials)
    except AuthError as e:
        logger.info("Rejected bearer token: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
