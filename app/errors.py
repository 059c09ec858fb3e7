"""
Error taxonomy for the API.

Every error a handler raises on purpose is an APIError: it knows its HTTP
status code and the human-readable message that goes into the JSON body.
main.py registers one exception handler that renders all of them as
{"message": ...}, so routers never build error responses by hand.
"""

from typing import Optional


class APIError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[list[dict]] = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(APIError):
    """Missing or malformed request fields."""
    status_code = 400
    default_message = "Invalid request"


class ConflictError(APIError):
    """A uniqueness constraint (user email, video id) was violated."""
    status_code = 409
    default_message = "Resource already exists"


class AuthError(APIError):
    """Sign-in failed.

    Deliberately the same for "no such user" and "wrong password" so the
    response cannot be used to discover which emails are registered.
    """
    status_code = 400
    default_message = "Invalid credentials"


class InternalError(APIError):
    status_code = 500
    default_message = "Internal server error"


class DatabaseConnectionError(APIError, ConnectionError):
    """The document database is not configured or cannot be reached."""
    status_code = 500
    default_message = "Database unavailable"
