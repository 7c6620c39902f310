"""User Schemas — registration, authentication, and public user DTOs.

Invariants:
    - Usernames: 3-50 chars of letters, digits, '_', '.', '-'
    - Passwords: 8-128 chars, never echoed back in any response
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

USERNAME_PATTERN = r"^[A-Za-z0-9_.\-]+$"


class RegisterRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50, pattern=USERNAME_PATTERN)
    password: str = Field(min_length=8, max_length=128)


class AuthenticateRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=128)


class UserResponse(BaseModel):
    """Public view of a user."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    date_created: datetime


class TokenResponse(BaseModel):
    """Successful authentication result."""
    access_token: str
    token_type: Literal["bearer"] = "bearer"
    user: UserResponse
