"""User account and favorites routes.

Endpoints:
  POST   /users                               — public registration
  GET    /users                               — JWT
  GET    /users/{username}                    — JWT
  PUT    /users/{username}                    — JWT
  DELETE /users/{username}                    — JWT
  POST   /users/{username}/movies/{movie_id}  — JWT
  DELETE /users/{username}/movies/{movie_id}  — JWT

Domain errors raised by the services (validation, conflict, not found)
are mapped to responses by the app's exception handlers.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from application.services.favorites_service import FavoritesService
from application.services.user_service import UserService
from domain.value_objects.auth import Identity
from presentation.api.dependencies import get_favorites_service, get_user_service
from presentation.api.schemas.common import ErrorResponse, ValidationErrorResponse
from presentation.api.schemas.users import UserProfile, UserProfileRequest
from presentation.api.security import get_current_identity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

_PROFILE_ERRORS = {
    409: {"model": ErrorResponse},
    422: {"model": ValidationErrorResponse},
}
_NOT_FOUND = {404: {"model": ErrorResponse}}


# ── Public endpoints ──────────────────────────────────────────────────────


@router.post(
    "",
    response_model=UserProfile,
    status_code=status.HTTP_201_CREATED,
    responses=_PROFILE_ERRORS,
)
async def register_user(
    body: UserProfileRequest,
    users: UserService = Depends(get_user_service),
):
    user = await users.register(body.to_registration())
    return UserProfile.from_entity(user)


# ── Authenticated endpoints ───────────────────────────────────────────────


@router.get("", response_model=list[UserProfile])
async def list_users(
    identity: Identity = Depends(get_current_identity),
    users: UserService = Depends(get_user_service),
):
    return [UserProfile.from_entity(u) for u in await users.list_users()]


@router.get("/{username}", response_model=UserProfile, responses=_NOT_FOUND)
async def get_user(
    username: str,
    identity: Identity = Depends(get_current_identity),
    users: UserService = Depends(get_user_service),
):
    return UserProfile.from_entity(await users.get_user(username))


@router.put(
    "/{username}",
    response_model=UserProfile,
    responses={**_PROFILE_ERRORS, **_NOT_FOUND},
)
async def update_user(
    username: str,
    body: UserProfileRequest,
    identity: Identity = Depends(get_current_identity),
    users: UserService = Depends(get_user_service),
):
    user = await users.update(username, body.to_registration())
    return UserProfile.from_entity(user)


@router.delete("/{username}", response_class=PlainTextResponse, responses=_NOT_FOUND)
async def deregister_user(
    username: str,
    identity: Identity = Depends(get_current_identity),
    users: UserService = Depends(get_user_service),
):
    await users.deregister(username)
    return PlainTextResponse(f"User {username} was deleted.")


# ── Favorites ─────────────────────────────────────────────────────────────


@router.post(
    "/{username}/movies/{movie_id}",
    response_class=PlainTextResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_NOT_FOUND,
)
async def add_favorite(
    username: str,
    movie_id: str,
    identity: Identity = Depends(get_current_identity),
    favorites: FavoritesService = Depends(get_favorites_service),
):
    await favorites.add_favorite(username, movie_id)
    return PlainTextResponse(
        f"Movie ID {movie_id} was added to favorite movies for user {username}",
        status_code=status.HTTP_201_CREATED,
    )


@router.delete(
    "/{username}/movies/{movie_id}",
    response_class=PlainTextResponse,
    responses=_NOT_FOUND,
)
async def remove_favorite(
    username: str,
    movie_id: str,
    identity: Identity = Depends(get_current_identity),
    favorites: FavoritesService = Depends(get_favorites_service),
):
    await favorites.remove_favorite(username, movie_id)
    return PlainTextResponse(f"Movie ID {movie_id} was deleted from user {username}")
