"""CatalogService: read-only movie, genre and director lookups."""

from __future__ import annotations

from domain.entities.movie import Director, Genre, Movie
from domain.exceptions import DirectorNotFound, GenreNotFound, MovieNotFound
from domain.repositories.movie_repository import MovieRepository


class CatalogService:

    def __init__(self, repository: MovieRepository) -> None:
        self._repo = repository

    async def list_movies(self) -> list[Movie]:
        return await self._repo.find_all()

    async def get_movie(self, movie_id: str) -> Movie:
        movie = await self._repo.find_by_id(movie_id)
        if movie is None:
            raise MovieNotFound(movie_id=movie_id)
        return movie

    async def get_movie_by_title(self, title: str) -> Movie:
        movie = await self._repo.find_by_title(title)
        if movie is None:
            raise MovieNotFound(title=title)
        return movie

    async def get_genre(self, name: str) -> Genre:
        genre = await self._repo.find_genre(name)
        if genre is None:
            raise GenreNotFound(name)
        return genre

    async def get_director(self, name: str) -> Director:
        director = await self._repo.find_director(name)
        if director is None:
            raise DirectorNotFound(name)
        return director
