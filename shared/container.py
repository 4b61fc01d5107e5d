"""
Dependency Injection Container

Centralizes all dependency creation and wiring. Services receive their
repositories at construction time; nothing reaches for a global store
handle.

Usage:
    container = Container(Settings.from_env())
    await container.init()
    app = create_app(container)
"""

import logging
from typing import Optional

from shared.config.settings import Settings

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency Injection Container.

    Each dependency is created lazily on first use and cached.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings.from_env()
        self._cache = {}

    # === Repository Layer ===

    def user_repository(self):
        """Get or create UserRepository"""
        if "user_repository" not in self._cache:
            from infrastructure.persistence.sqlite_user_repository import SQLiteUserRepository
            self._cache["user_repository"] = SQLiteUserRepository(self.settings.database.path)
        return self._cache["user_repository"]

    def movie_repository(self):
        """Get or create MovieRepository"""
        if "movie_repository" not in self._cache:
            from infrastructure.persistence.sqlite_movie_repository import SQLiteMovieRepository
            self._cache["movie_repository"] = SQLiteMovieRepository(self.settings.database.path)
        return self._cache["movie_repository"]

    # === Security ===

    def password_hasher(self):
        """Get or create PasswordHasher"""
        if "password_hasher" not in self._cache:
            from infrastructure.security.password_hasher import PasswordHasher
            auth = self.settings.auth
            self._cache["password_hasher"] = PasswordHasher(
                time_cost=auth.argon2_time_cost,
                memory_cost=auth.argon2_memory_cost,
                parallelism=auth.argon2_parallelism,
            )
        return self._cache["password_hasher"]

    def token_service(self):
        """Get or create TokenService"""
        if "token_service" not in self._cache:
            from application.services.token_service import TokenService
            auth = self.settings.auth
            self._cache["token_service"] = TokenService(
                secret_key=auth.jwt_secret_key,
                algorithm=auth.jwt_algorithm,
                expire_minutes=auth.access_token_expire_minutes,
            )
        return self._cache["token_service"]

    # === Service Layer ===

    def auth_service(self):
        """Get or create AuthService"""
        if "auth_service" not in self._cache:
            from application.services.auth_service import AuthService
            self._cache["auth_service"] = AuthService(
                repository=self.user_repository(),
                hasher=self.password_hasher(),
                tokens=self.token_service(),
            )
        return self._cache["auth_service"]

    def user_service(self):
        """Get or create UserService"""
        if "user_service" not in self._cache:
            from application.services.user_service import UserService
            self._cache["user_service"] = UserService(
                repository=self.user_repository(),
                hasher=self.password_hasher(),
            )
        return self._cache["user_service"]

    def favorites_service(self):
        """Get or create FavoritesService"""
        if "favorites_service" not in self._cache:
            from application.services.favorites_service import FavoritesService
            self._cache["favorites_service"] = FavoritesService(
                users=self.user_repository(),
                catalog=self.catalog_service(),
            )
        return self._cache["favorites_service"]

    def catalog_service(self):
        """Get or create CatalogService"""
        if "catalog_service" not in self._cache:
            from application.services.catalog_service import CatalogService
            self._cache["catalog_service"] = CatalogService(
                repository=self.movie_repository(),
            )
        return self._cache["catalog_service"]

    # === Lifecycle ===

    async def init(self) -> None:
        """Create tables and seed the catalog if it is empty."""
        await self.user_repository().init_db()
        movies = self.movie_repository()
        await movies.init_db()

        seed_path = self.settings.catalog.seed_path
        if seed_path and await movies.count() == 0:
            from infrastructure.persistence.catalog_seed import seed_catalog
            await seed_catalog(movies, seed_path)

        logger.info("Container initialized (database: %s)", self.settings.database.path)
