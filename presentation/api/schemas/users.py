"""User request/response schemas.

Wire names keep the capitalised form clients already send
(Username, Password, Email, Birthday, FavoriteMovies).
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.user import User
from domain.value_objects.auth import RegistrationData


class UserProfileRequest(BaseModel):
    """Body of POST /users and PUT /users/{username}.

    Only presence and types are checked here; format rules are applied
    by the user service so that both routes report the same errors.
    """

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., alias="Username")
    password: str = Field(..., alias="Password")
    email: str = Field(..., alias="Email")
    birthday: Optional[date] = Field(None, alias="Birthday")

    def to_registration(self) -> RegistrationData:
        return RegistrationData(
            username=self.username,
            password=self.password,
            email=self.email,
            birthday=self.birthday,
        )


class UserProfile(BaseModel):
    """Public view of a user. The password hash is never included."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    username: str = Field(..., alias="Username")
    email: str = Field(..., alias="Email")
    birthday: Optional[date] = Field(None, alias="Birthday")
    favorite_movies: List[str] = Field(default_factory=list, alias="FavoriteMovies")

    @classmethod
    def from_entity(cls, user: User) -> "UserProfile":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            birthday=user.birthday,
            favorite_movies=sorted(user.favorite_movies),
        )
