"""Movie catalog routes. All require a Bearer token.

Endpoints:
  GET /movies                    — every movie
  GET /movies/{title}            — description of one movie
  GET /movies/genres/{name}      — description of a genre
  GET /movies/directors/{name}   — director details
"""

import logging

from fastapi import APIRouter, Depends

from application.services.catalog_service import CatalogService
from domain.value_objects.auth import Identity
from presentation.api.dependencies import get_catalog_service
from presentation.api.schemas.common import ErrorResponse
from presentation.api.schemas.movies import DirectorResponse, MovieResponse
from presentation.api.security import get_current_identity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("", response_model=list[MovieResponse])
async def list_movies(
    identity: Identity = Depends(get_current_identity),
    catalog: CatalogService = Depends(get_catalog_service),
):
    movies = await catalog.list_movies()
    return [MovieResponse.from_entity(m) for m in movies]


@router.get("/genres/{name}", response_model=str, responses=_NOT_FOUND)
async def get_genre(
    name: str,
    identity: Identity = Depends(get_current_identity),
    catalog: CatalogService = Depends(get_catalog_service),
):
    genre = await catalog.get_genre(name)
    return genre.description


@router.get("/directors/{name}", response_model=DirectorResponse, responses=_NOT_FOUND)
async def get_director(
    name: str,
    identity: Identity = Depends(get_current_identity),
    catalog: CatalogService = Depends(get_catalog_service),
):
    director = await catalog.get_director(name)
    return DirectorResponse.from_entity(director)


@router.get("/{title}", response_model=str, responses=_NOT_FOUND)
async def get_movie_description(
    title: str,
    identity: Identity = Depends(get_current_identity),
    catalog: CatalogService = Depends(get_catalog_service),
):
    movie = await catalog.get_movie_by_title(title)
    return movie.description
