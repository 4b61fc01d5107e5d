"""Movie catalog response schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.movie import Director, Genre, Movie


class GenreResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="Name")
    description: str = Field(..., alias="Description")

    @classmethod
    def from_entity(cls, genre: Genre) -> "GenreResponse":
        return cls(name=genre.name, description=genre.description)


class DirectorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="Name")
    bio: str = Field(..., alias="Bio")
    birth_year: Optional[int] = Field(None, alias="BirthYear")
    death_year: Optional[int] = Field(None, alias="DeathYear")

    @classmethod
    def from_entity(cls, director: Director) -> "DirectorResponse":
        return cls(
            name=director.name,
            bio=director.bio,
            birth_year=director.birth_year,
            death_year=director.death_year,
        )


class MovieResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: str = Field(..., alias="Title")
    description: str = Field(..., alias="Description")
    genre: GenreResponse = Field(..., alias="Genre")
    director: DirectorResponse = Field(..., alias="Director")
    image_url: Optional[str] = Field(None, alias="ImageUrl")

    @classmethod
    def from_entity(cls, movie: Movie) -> "MovieResponse":
        return cls(
            id=movie.id,
            title=movie.title,
            description=movie.description,
            genre=GenreResponse.from_entity(movie.genre),
            director=DirectorResponse.from_entity(movie.director),
            image_url=movie.image_url,
        )
