"""FavoritesService: add / remove movies on a user's favorites set."""

from __future__ import annotations

import logging

from application.services.catalog_service import CatalogService
from domain.entities.user import User
from domain.exceptions import UserNotFound
from domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class FavoritesService:
    """
    Both operations check the movie first and touch the user only if it
    exists. The set mutation itself is delegated to the repository's
    atomic add/remove, so concurrent calls on one user cannot lose
    updates. Repeating either call is a no-op.
    """

    def __init__(self, users: UserRepository, catalog: CatalogService) -> None:
        self._users = users
        self._catalog = catalog

    async def add_favorite(self, username: str, movie_id: str) -> User:
        # Raises MovieNotFound before the user is touched
        await self._catalog.get_movie(movie_id)

        user = await self._users.add_favorite(username, movie_id)
        if user is None:
            raise UserNotFound(username)

        logger.info("Movie %s added to favorites of '%s'", movie_id, username)
        return user

    async def remove_favorite(self, username: str, movie_id: str) -> User:
        await self._catalog.get_movie(movie_id)

        user = await self._users.remove_favorite(username, movie_id)
        if user is None:
            raise UserNotFound(username)

        logger.info("Movie %s removed from favorites of '%s'", movie_id, username)
        return user
