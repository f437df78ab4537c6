"""Request models for the API handlers."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictInt


class MovieIn(BaseModel):
    """Movie payload for POST /movies. Attributes besides id pass through."""

    model_config = ConfigDict(extra="allow")

    id: StrictInt

    def to_item(self) -> Dict[str, Any]:
        return self.model_dump()


class SignUpRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    email: EmailStr


class ConfirmSignUpRequest(BaseModel):
    username: str = Field(min_length=1)
    code: str = Field(min_length=1)


class SignInRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class SignOutRequest(BaseModel):
    access_token: Optional[str] = Field(default=None, alias="accessToken")
