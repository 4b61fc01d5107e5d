"""Movie entity and its embedded genre / director values."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Genre:
    name: str
    description: str


@dataclass(frozen=True)
class Director:
    name: str
    bio: str
    birth_year: Optional[int] = None
    death_year: Optional[int] = None


@dataclass
class Movie:
    """
    Catalog movie.

    Read-only as far as the API is concerned; movies enter the store
    through catalog seeding only.
    """

    id: str
    title: str
    description: str
    genre: Genre
    director: Director
    image_url: Optional[str] = None

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        genre: Genre,
        director: Director,
        image_url: Optional[str] = None,
        movie_id: Optional[str] = None,
    ) -> Movie:
        if not title or not title.strip():
            raise ValueError("title must not be empty")
        return cls(
            id=movie_id or str(uuid.uuid4()),
            title=title.strip(),
            description=description,
            genre=genre,
            director=director,
            image_url=image_url,
        )

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> Movie:
        """
        Build a Movie from a catalog document.

        Documents use the wire field names (Title, Genre.Name, ...).
        An ``_id`` key, if present, becomes the movie id.
        """
        genre = doc.get("Genre") or {}
        director = doc.get("Director") or {}
        return cls.create(
            title=doc["Title"],
            description=doc.get("Description", ""),
            genre=Genre(
                name=genre.get("Name", ""),
                description=genre.get("Description", ""),
            ),
            director=Director(
                name=director.get("Name", ""),
                bio=director.get("Bio", ""),
                birth_year=director.get("BirthYear"),
                death_year=director.get("DeathYear"),
            ),
            image_url=doc.get("ImageUrl"),
            movie_id=doc.get("_id"),
        )
