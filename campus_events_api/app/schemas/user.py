"""
Pydantic models for user data.

Passwords are accepted on sign up and login but never returned:
``UserRead`` only exposes ``id``, ``username`` and ``email``.
"""

from pydantic import BaseModel, EmailStr, Field

from ..core.storage import User


class UserBase(BaseModel):
    username: str = Field(..., min_length=1, examples=["jdoe"])
    email: EmailStr = Field(..., examples=["jdoe@university.edu"])


class UserCreate(UserBase):
    """Schema for registering a user."""

    password: str = Field(..., min_length=1, examples=["password123"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    username: str
    email: str

    @classmethod
    def from_record(cls, user: User) -> "UserRead":
        return cls(id=user.id, username=user.username, email=user.email)


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
