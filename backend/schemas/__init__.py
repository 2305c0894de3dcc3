"""Pydantic schemas for API request/response."""

from .requests import (
    PostCreate,
    RegisterRequest,
    SignInRequest,
)

__all__ = [
    "PostCreate",
    "RegisterRequest",
    "SignInRequest",
]
