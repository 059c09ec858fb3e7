"""
Account operations: registration and credential checks.

Both functions take the database handle explicitly so routers, the seed
command and tests can all hand in whatever connection they hold.
"""

from typing import Optional

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.config import settings
from app.errors import AuthError, ConflictError
from app.models import USERS_COLLECTION, new_user
from app.services.security import create_access_token, hash_password, verify_password

USER_EXISTS_MESSAGE = "User with this email already exists"


def register_user(db: Database, email: str, password: str) -> str:
    """Create an account and return its email.

    Raises:
        ConflictError: the email is already registered, including a
            concurrent sign-up that slipped past the lookup and hit the
            unique index.
    """
    users = db[USERS_COLLECTION]

    if users.find_one({"email": email}, projection={"_id": 1}) is not None:
        raise ConflictError(USER_EXISTS_MESSAGE)

    try:
        users.insert_one(new_user(email, hash_password(password)))
    except DuplicateKeyError as e:
        raise ConflictError(USER_EXISTS_MESSAGE) from e

    return email


def authenticate_user(db: Database, email: str, password: str) -> Optional[str]:
    """Verify credentials.

    Returns a signed access token when the deployment issues them, None
    otherwise.

    Raises:
        AuthError: unknown email or wrong password (same error for both).
    """
    user = db[USERS_COLLECTION].find_one({"email": email})
    if user is None or not verify_password(password, user.get("password", "")):
        raise AuthError()

    if not settings.ISSUE_ACCESS_TOKENS:
        return None
    return create_access_token(str(user["_id"]))
