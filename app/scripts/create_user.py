"""
Create an account (e.g. the first admin) without going through HTTP. Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m app.scripts.create_user admin your-secure-password admin
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import create_db_engine, create_session_factory
from app.core.errors import ConflictError
from app.core.logging_config import configure_logging
from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, USERNAME_MAX_LEN
from app.models.user import ROLE_ADMIN, ROLE_USER
from app.services.users import register_user

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Fashion API user.")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars, stored lowercased)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default=ROLE_USER, choices=[ROLE_USER, ROLE_ADMIN])
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    session_factory = create_session_factory(create_db_engine(settings))
    db = session_factory()
    try:
        user = register_user(db, username, args.password, args.role, settings.BCRYPT_ROUNDS)
    except ConflictError:
        print(f"User '{username.lower()}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
