"""ORM model for registered accounts; the credential store behind login."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base

ROLE_USER = "user"
ROLE_ADMIN = "admin"


class User(Base):
    """
    Account created by /auth/register or /auth/register-admin.

    username is unique and stored lowercased, so duplicates differing only in
    case hit the unique index. Rows are never updated through the API.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(16), nullable=False, default=ROLE_USER)
