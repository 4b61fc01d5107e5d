"""Load catalog movies from a JSON file into the movie repository."""

import json
import logging
from pathlib import Path

from domain.entities.movie import Movie
from domain.repositories.movie_repository import MovieRepository

logger = logging.getLogger(__name__)


async def seed_catalog(repository: MovieRepository, path: str) -> int:
    """
    Upsert every movie document found in ``path``.

    The file holds a JSON array of movie documents in the wire format
    (Title, Description, Genre, Director, ImageUrl, optional _id).

    Returns:
        Number of movies written.
    """
    seed_file = Path(path)
    with seed_file.open(encoding="utf-8") as f:
        documents = json.load(f)

    if not isinstance(documents, list):
        raise ValueError(f"Catalog seed {path} must contain a JSON array")

    written = 0
    for doc in documents:
        movie = Movie.from_document(doc)
        await repository.save(movie)
        written += 1

    logger.info("Seeded %d movies from %s", written, seed_file)
    return written
