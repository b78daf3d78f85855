"""Registration and JWT login endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_app_settings, get_token_codec
from app.core.config import Settings
from app.core.database import get_db
from app.core.security import TokenCodec
from app.models.user import ROLE_ADMIN, ROLE_USER
from app.schemas.auth import LoginRequest, LoginResponse, RegisteredUser, RegisterRequest
from app.services.users import authenticate, register_user

router = APIRouter()


@router.post("/register", response_model=RegisteredUser, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> RegisteredUser:
    """Create a regular account. Usernames are case-insensitive; duplicates return 409."""
    user = register_user(db, body.username, body.password, ROLE_USER, settings.BCRYPT_ROUNDS)
    return RegisteredUser.model_validate(user)


@router.post("/register-admin", response_model=RegisteredUser, status_code=status.HTTP_201_CREATED)
def register_admin(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> RegisteredUser:
    """Create an admin account."""
    user = register_user(db, body.username, body.password, ROLE_ADMIN, settings.BCRYPT_ROUNDS)
    return RegisteredUser.model_validate(user)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT carrying {id, username, role}.
    Include the token in the Authorization header as: Bearer <token>
    """
    identity = authenticate(db, body.username, body.password)
    return LoginResponse(token=codec.encode(identity))
