"""Request/response schemas for auth endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Role = Literal["user", "admin"]


class Credentials(BaseModel):
    """Username and password, used by register, register-admin and login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username must not be blank")
        return v


class RegisterRequest(Credentials):
    """Registration credentials; passwords need at least 6 characters."""

    password: str = Field(..., min_length=6, max_length=128, description="Password (6-128 chars)")


class LoginRequest(Credentials):
    """Credentials for login."""


class RegisteredUser(BaseModel):
    """Public view of a newly registered user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class LoginResponse(BaseModel):
    """JWT returned after successful login. Send it as: Authorization: Bearer <token>"""

    message: str = "Login successful"
    token: str = Field(..., description="JWT access token")


class Identity(BaseModel):
    """Authenticated user claims (id, username, role) carried inside the token."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: Role
