"""Account registration and credential checks against the users table."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, UnauthenticatedError
from app.core.security import DEFAULT_BCRYPT_ROUNDS, hash_password, verify_password
from app.models.user import User
from app.schemas.auth import Identity

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."


def normalize_username(username: str) -> str:
    return username.strip().lower()


def register_user(
    db: Session,
    username: str,
    password: str,
    role: str,
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS,
) -> User:
    """
    Create an account with a bcrypt-hashed password.

    Duplicate usernames (case-insensitive, since usernames are stored lowercased)
    are detected by the unique index and raised as ConflictError.
    """
    user = User(
        username=normalize_username(username),
        password_hash=hash_password(password, rounds=bcrypt_rounds),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Registration rejected: username=%s already taken", user.username)
        raise ConflictError("Username already taken.") from e
    db.refresh(user)
    logger.info("User registered: id=%s username=%s role=%s", user.id, user.username, user.role)
    return user


def authenticate(db: Session, username: str, password: str) -> Identity:
    """
    Return the identity for valid credentials.
    Unknown usernames and wrong passwords raise the same UnauthenticatedError.
    """
    user = db.query(User).filter(User.username == normalize_username(username)).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login failed for username=%s", normalize_username(username))
        raise UnauthenticatedError(INVALID_CREDENTIALS)
    return Identity.model_validate(user)
