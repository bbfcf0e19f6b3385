"""DTOs for the Auth feature."""
from datetime import datetime
from typing import Optional

from pydantic import Field

from api.shared.dtos import BaseDTO


class RegisterRequest(BaseDTO):
    """Fields accepted on registration; anything else in the body is ignored."""

    username: str = Field(description="Unique username")
    password: str = Field(description="Plain-text password, hashed before storage")
    email: Optional[str] = Field(default=None, description="Contact email")


class LoginRequest(BaseDTO):
    """Credentials for login."""

    username: str = Field(description="Username")
    password: str = Field(description="Plain-text password")


class UserDTO(BaseDTO):
    """User as returned to clients. Has no password field."""

    id: int = Field(description="User identifier")
    username: str = Field(description="Username")
    email: Optional[str] = Field(default=None, description="Contact email")
    created_at: Optional[datetime] = Field(
        default=None, alias="createdAt", description="Registration timestamp"
    )
