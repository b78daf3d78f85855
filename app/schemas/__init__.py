"""Pydantic request/response schemas."""

from app.schemas.auth import (
    Credentials,
    Identity,
    LoginRequest,
    LoginResponse,
    RegisteredUser,
    RegisterRequest,
    Role,
)
from app.schemas.health import HealthResponse, StatusResponse
from app.schemas.products import ProductCreate, ProductRead, ProductUpdate

__all__ = [
    "Credentials",
    "HealthResponse",
    "Identity",
    "LoginRequest",
    "LoginResponse",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
    "RegisteredUser",
    "RegisterRequest",
    "Role",
    "StatusResponse",
]
