"""
Pydantic schemas for the sign-up / sign-in API.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Local part (unquoted dot-atoms or a quoted string) @ an IPv4 literal or
# dotted labels with a 2+ letter TLD.
EMAIL_PATTERN = re.compile(
    r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
    r"|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)

MIN_PASSWORD_LENGTH = 6


# --- Request Schemas ---

class SignUpRequest(BaseModel):
    """New account details. Email format and password length are enforced here."""
    email: str
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Please provide a valid email address.")
        return v


class SignInRequest(BaseModel):
    """Credentials for sign-in.

    Only presence is checked. Applying the sign-up rules here would let a
    malformed attempt fail differently from a wrong password.
    """
    email: str
    password: str


# --- Response Schemas ---

class SignUpResponse(BaseModel):
    message: str
    user: str


class SignInResponse(BaseModel):
    """`token` is only present when the deployment issues access tokens."""
    message: str
    token: Optional[str] = None
