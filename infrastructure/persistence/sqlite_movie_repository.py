"""SQLite implementation of the catalog store."""

from __future__ import annotations

import logging
from typing import Optional

import aiosqlite

from domain.entities.movie import Director, Genre, Movie
from domain.repositories.movie_repository import MovieRepository
from infrastructure.persistence.sqlite_base import SQLiteRepository

logger = logging.getLogger(__name__)


class SQLiteMovieRepository(SQLiteRepository, MovieRepository):
    """Movies with their genre and director flattened into columns."""

    async def init_db(self) -> None:
        async with self._connect() as db:
            await db.execute(
                """
                CREATE TABLE IF NOT EXISTS movies (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL,
                    genre_name TEXT NOT NULL,
                    genre_description TEXT NOT NULL,
                    director_name TEXT NOT NULL,
                    director_bio TEXT NOT NULL,
                    director_birth_year INTEGER,
                    director_death_year INTEGER,
                    image_url TEXT
                )
                """
            )
            await db.execute(
                "CREATE INDEX IF NOT EXISTS idx_movies_title ON movies(title)"
            )
            await db.execute(
                "CREATE INDEX IF NOT EXISTS idx_movies_genre ON movies(genre_name)"
            )
            await db.execute(
                "CREATE INDEX IF NOT EXISTS idx_movies_director ON movies(director_name)"
            )
            await db.commit()
            logger.info("Movie tables initialized")

    async def save(self, movie: Movie) -> None:
        async with self._connect() as db:
            await db.execute(
                """
                INSERT OR REPLACE INTO movies
                (id, title, description, genre_name, genre_description,
                 director_name, director_bio, director_birth_year,
                 director_death_year, image_url)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    movie.id,
                    movie.title,
                    movie.description,
                    movie.genre.name,
                    movie.genre.description,
                    movie.director.name,
                    movie.director.bio,
                    movie.director.birth_year,
                    movie.director.death_year,
                    movie.image_url,
                ),
            )
            await db.commit()

    async def find_by_id(self, movie_id: str) -> Optional[Movie]:
        return await self._find_one("SELECT * FROM movies WHERE id = ?", (movie_id,))

    async def find_by_title(self, title: str) -> Optional[Movie]:
        return await self._find_one(
            "SELECT * FROM movies WHERE title = ? ORDER BY rowid LIMIT 1", (title,)
        )

    async def find_all(self) -> list[Movie]:
        async with self._connect() as db:
            async with db.execute("SELECT * FROM movies ORDER BY rowid") as cursor:
                rows = await cursor.fetchall()
                return [self._row_to_movie(row) for row in rows]

    async def find_genre(self, name: str) -> Optional[Genre]:
        movie = await self._find_one(
            "SELECT * FROM movies WHERE genre_name = ? ORDER BY rowid LIMIT 1", (name,)
        )
        return movie.genre if movie else None

    async def find_director(self, name: str) -> Optional[Director]:
        movie = await self._find_one(
            "SELECT * FROM movies WHERE director_name = ? ORDER BY rowid LIMIT 1", (name,)
        )
        return movie.director if movie else None

    async def count(self) -> int:
        async with self._connect() as db:
            async with db.execute("SELECT COUNT(*) FROM movies") as cursor:
                row = await cursor.fetchone()
                return row[0] if row else 0

    # --- Helpers ---

    async def _find_one(self, query: str, params: tuple) -> Optional[Movie]:
        async with self._connect() as db:
            async with db.execute(query, params) as cursor:
                row = await cursor.fetchone()
                return self._row_to_movie(row) if row else None

    @staticmethod
    def _row_to_movie(row: aiosqlite.Row) -> Movie:
        return Movie(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            genre=Genre(
                name=row["genre_name"],
                description=row["genre_description"],
            ),
            director=Director(
                name=row["director_name"],
                bio=row["director_bio"],
                birth_year=row["director_birth_year"],
                death_year=row["director_death_year"],
            ),
            image_url=row["image_url"],
        )
