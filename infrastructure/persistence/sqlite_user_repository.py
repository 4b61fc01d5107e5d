"""SQLite implementation of the credential store (users + favorites)."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Optional

import aiosqlite

from domain.entities.user import User
from domain.exceptions import DuplicateUsername
from domain.repositories.user_repository import UserRepository
from infrastructure.persistence.sqlite_base import SQLiteRepository

logger = logging.getLogger(__name__)


class SQLiteUserRepository(SQLiteRepository, UserRepository):
    """
    Users live in ``users``; each user's favorites set is the rows of
    ``favorite_movies`` keyed by (user_id, movie_id). The composite
    primary key gives set semantics, so add/remove are single atomic
    statements and never read-modify-write.
    """

    async def init_db(self) -> None:
        """Create tables: users, favorite_movies."""
        async with self._connect() as db:
            await db.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id TEXT PRIMARY KEY,
                    username TEXT UNIQUE NOT NULL,
                    password_hash TEXT NOT NULL,
                    email TEXT NOT NULL,
                    birthday TEXT,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )
            await db.execute(
                """
                CREATE TABLE IF NOT EXISTS favorite_movies (
                    user_id TEXT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
                    movie_id TEXT NOT NULL,
                    added_at TEXT NOT NULL,
                    PRIMARY KEY (user_id, movie_id)
                )
                """
            )
            await db.commit()
            logger.info("User tables initialized")

    # --- Profile ---

    async def save(self, user: User) -> None:
        try:
            async with self._connect() as db:
                await db.execute(
                    """
                    INSERT INTO users
                    (id, username, password_hash, email, birthday, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        user.id,
                        user.username,
                        user.password_hash,
                        user.email,
                        user.birthday.isoformat() if user.birthday else None,
                        user.created_at.isoformat(),
                        user.updated_at.isoformat(),
                    ),
                )
                await db.executemany(
                    """
                    INSERT OR IGNORE INTO favorite_movies (user_id, movie_id, added_at)
                    VALUES (?, ?, ?)
                    """,
                    [
                        (user.id, movie_id, user.created_at.isoformat())
                        for movie_id in user.favorite_movies
                    ],
                )
                await db.commit()
        except aiosqlite.IntegrityError as e:
            raise DuplicateUsername(user.username) from e

    async def find_by_username(self, username: str) -> Optional[User]:
        async with self._connect() as db:
            return await self._load_user(db, username)

    async def find_all(self) -> list[User]:
        async with self._connect() as db:
            async with db.execute("SELECT * FROM users ORDER BY created_at") as cursor:
                rows = await cursor.fetchall()
            async with db.execute("SELECT user_id, movie_id FROM favorite_movies") as cursor:
                favorite_rows = await cursor.fetchall()

        favorites: dict[str, set[str]] = {}
        for row in favorite_rows:
            favorites.setdefault(row["user_id"], set()).add(row["movie_id"])
        return [self._row_to_user(row, favorites.get(row["id"], set())) for row in rows]

    async def update(self, user: User) -> bool:
        try:
            async with self._connect() as db:
                cursor = await db.execute(
                    """
                    UPDATE users SET
                        username = ?, password_hash = ?, email = ?,
                        birthday = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        user.username,
                        user.password_hash,
                        user.email,
                        user.birthday.isoformat() if user.birthday else None,
                        user.updated_at.isoformat(),
                        user.id,
                    ),
                )
                await db.commit()
                return cursor.rowcount > 0
        except aiosqlite.IntegrityError as e:
            raise DuplicateUsername(user.username) from e

    async def delete_by_username(self, username: str) -> bool:
        async with self._connect() as db:
            await db.execute(
                """
                DELETE FROM favorite_movies
                WHERE user_id IN (SELECT id FROM users WHERE username = ?)
                """,
                (username,),
            )
            cursor = await db.execute(
                "DELETE FROM users WHERE username = ?", (username,)
            )
            await db.commit()
            return cursor.rowcount > 0

    # --- Favorites ---

    async def add_favorite(self, username: str, movie_id: str) -> Optional[User]:
        async with self._connect() as db:
            await db.execute(
                """
                INSERT OR IGNORE INTO favorite_movies (user_id, movie_id, added_at)
                SELECT id, ?, ? FROM users WHERE username = ?
                """,
                (movie_id, datetime.now(timezone.utc).isoformat(), username),
            )
            await db.commit()
            return await self._load_user(db, username)

    async def remove_favorite(self, username: str, movie_id: str) -> Optional[User]:
        async with self._connect() as db:
            await db.execute(
                """
                DELETE FROM favorite_movies
                WHERE movie_id = ?
                  AND user_id = (SELECT id FROM users WHERE username = ?)
                """,
                (movie_id, username),
            )
            await db.commit()
            return await self._load_user(db, username)

    # --- Helpers ---

    async def _load_user(self, db: aiosqlite.Connection, username: str) -> Optional[User]:
        async with db.execute(
            "SELECT * FROM users WHERE username = ?", (username,)
        ) as cursor:
            row = await cursor.fetchone()
        if not row:
            return None
        async with db.execute(
            "SELECT movie_id FROM favorite_movies WHERE user_id = ?", (row["id"],)
        ) as cursor:
            favorites = {r["movie_id"] for r in await cursor.fetchall()}
        return self._row_to_user(row, favorites)

    @staticmethod
    def _row_to_user(row: aiosqlite.Row, favorites: set[str]) -> User:
        return User(
            id=row["id"],
            username=row["username"],
            password_hash=row["password_hash"],
            email=row["email"],
            birthday=date.fromisoformat(row["birthday"]) if row["birthday"] else None,
            favorite_movies=favorites,
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
