"""
Pydantic models for user data.

``User`` is the record handed to and returned by the repository; its
``id`` is empty until the store assigns one.  ``UserCreate`` validates
request bodies for both creation and replacement, and ``UserRead`` is
what the API returns.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255


class UserBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, examples=["John Doe"])
    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LENGTH, examples=["john.doe@example.com"])


class UserCreate(UserBase):
    """Body of ``POST /api/users`` and ``PUT /api/users/{id}``."""

    @field_validator("name", "email")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def contains_at_sign(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("must contain '@'")
        return value


class User(BaseModel):
    """A user as stored in the ``users`` table."""

    id: Optional[int] = None
    name: str
    email: str


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
