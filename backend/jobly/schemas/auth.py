from __future__ import annotations

from pydantic import BaseModel, Field


USERNAME_PATTERN = r"^[A-Za-z0-9_.-]+$"


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=25, pattern=USERNAME_PATTERN)
    password: str = Field(min_length=5, max_length=256)
    first_name: str = Field(alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(alias="lastName", min_length=1, max_length=30)
    email: str = Field(min_length=6, max_length=60, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    class Config:
        extra = "forbid"


class TokenRequest(BaseModel):
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=1, max_length=256)

    class Config:
        extra = "forbid"


class TokenResponse(BaseModel):
    token: str
