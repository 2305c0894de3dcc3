"""Request body models for Wall API."""

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class RegisterRequest(BaseModel):
    username: RequiredText
    first_name: RequiredText
    last_name: RequiredText
    password: str = Field(min_length=1)


class SignInRequest(BaseModel):
    username: RequiredText
    password: str = Field(min_length=1)


class PostCreate(BaseModel):
    content: RequiredText
