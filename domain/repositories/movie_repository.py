"""Repository interface for the Movie entity (the catalog store)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities.movie import Director, Genre, Movie


class MovieRepository(ABC):

    @abstractmethod
    async def save(self, movie: Movie) -> None:
        ...

    @abstractmethod
    async def find_by_id(self, movie_id: str) -> Optional[Movie]:
        ...

    @abstractmethod
    async def find_by_title(self, title: str) -> Optional[Movie]:
        ...

    @abstractmethod
    async def find_all(self) -> list[Movie]:
        ...

    @abstractmethod
    async def find_genre(self, name: str) -> Optional[Genre]:
        ...

    @abstractmethod
    async def find_director(self, name: str) -> Optional[Director]:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...
