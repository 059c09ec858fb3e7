"""
Account API endpoints.

1. POST /api/auth/signup: create an account (bcrypt-hashed password)
2. POST /api/auth/signin: check credentials, optionally issue a token

Design notes:
- Routers are THIN: they validate the body (Pydantic does that before we
  run) and call services.
- Each handler is one try-scope. APIErrors (409, 400) pass straight
  through to the app's handler; anything else is logged with its traceback
  and answered with a generic 500 so internals never reach the client.
- Handlers are plain `def`: pymongo blocks, so FastAPI runs them in its
  threadpool instead of on the event loop.
"""

import logging

from fastapi import APIRouter, Depends
from pymongo.database import Database

from app.database import get_db
from app.errors import APIError, InternalError
from app.schemas.auth import SignInRequest, SignInResponse, SignUpRequest, SignUpResponse
from app.services.users import authenticate_user, register_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", response_model=SignUpResponse, status_code=201)
def sign_up(
    payload: SignUpRequest,
    db: Database = Depends(get_db),
):
    """Register a new user.

    Returns 409 if the email is taken. The password is never echoed back,
    in any form.
    """
    try:
        email = register_user(db, payload.email, payload.password)
    except APIError as e:
        logger.warning("Sign up rejected: %s", e.message, extra={"status_code": e.status_code})
        raise
    except Exception as e:
        logger.exception("Sign up error", extra={"error_type": type(e).__name__})
        raise InternalError() from e

    logger.info("User registered")
    return SignUpResponse(message="User registered successfully", user=email)


@router.post("/signin", response_model=SignInResponse, response_model_exclude_none=True)
def sign_in(
    payload: SignInRequest,
    db: Database = Depends(get_db),
):
    """Check credentials.

    Unknown email and wrong password produce the same 400 response.
    When ISSUE_ACCESS_TOKENS is on, the body also carries a bearer token.
    """
    try:
        token = authenticate_user(db, payload.email, payload.password)
    except APIError as e:
        logger.warning("Sign in rejected: %s", e.message, extra={"status_code": e.status_code})
        raise
    except Exception as e:
        logger.exception("Sign in error", extra={"error_type": type(e).__name__})
        raise InternalError() from e

    return SignInResponse(message="Sign in successful", token=token)
