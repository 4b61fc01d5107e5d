"""Login route.

Endpoints:
  POST /login — public, returns {user, token}
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from application.services.auth_service import AuthService
from domain.value_objects.auth import Credentials
from presentation.api.dependencies import get_auth_service
from presentation.api.schemas.auth import LoginRequest, LoginResponse
from presentation.api.schemas.common import ErrorResponse
from presentation.api.schemas.users import UserProfile

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(body: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    # InvalidCredentials is turned into a 401 by the app's exception handler
    result = await auth.authenticate(
        Credentials(username=body.username, password=body.password)
    )
    return LoginResponse(
        user=UserProfile.from_entity(result.user),
        token=result.access_token.token,
        token_type=result.access_token.token_type,
        expires_in=result.access_token.expires_in,
    )
