"""Login request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from presentation.api.schemas.users import UserProfile


class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., alias="Username")
    password: str = Field(..., alias="Password")


class LoginResponse(BaseModel):
    user: UserProfile
    token: str
    token_type: str = "bearer"
    expires_in: int
