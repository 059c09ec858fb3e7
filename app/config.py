"""
Application configuration loaded from environment variables.

Uses Pydantic Settings to:
1. Read from .env file automatically
2. Check required combinations when the API server starts
3. Provide type-safe access throughout the app

Usage:
    from app.config import settings
    print(settings.MONGODB_URI)

Note: a custom validator prefers .env values over empty shell environment
variables, so an exported-but-blank MONGODB_URI does not hide the real
value in .env.
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All application configuration in one place."""

    model_config = SettingsConfigDict(
        env_file=".env",        # Load from .env file
        env_file_encoding="utf-8",
        case_sensitive=True,     # ENV_VAR must match exactly
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def prefer_dotenv_over_empty_env(cls, data):
        """If an env var is empty but .env has a value, use the .env value.

        Pydantic Settings prioritizes real env vars over .env file values,
        so `export SECRET_KEY=` in a shell would otherwise win over the
        secret configured in .env.
        """
        from dotenv import dotenv_values

        dotenv_vals = dotenv_values(".env")
        for key, dotenv_value in dotenv_vals.items():
            # If the field is missing or empty, use the .env value
            if dotenv_value and (key not in data or not data.get(key)):
                data[key] = dotenv_value
        return data

    # --- Database ---
    # Empty means unconfigured; connect() reports it as a connection error.
    MONGODB_URI: str = ""
    MONGODB_DB: str = "youtube_clone"
    MONGODB_TIMEOUT_MS: int = 5000

    # --- Security ---
    ISSUE_ACCESS_TOKENS: bool = True
    SECRET_KEY: str = ""
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 10

    # --- Application ---
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:3000"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def check_token_settings(self) -> None:
        """Fail fast when sign-in would have to sign tokens without a secret.

        Called from the API server's startup, not at import, so tools that
        never sign tokens (the seed command) run without a SECRET_KEY.
        """
        if self.ISSUE_ACCESS_TOKENS and not self.SECRET_KEY:
            raise ValueError("SECRET_KEY must be set when ISSUE_ACCESS_TOKENS is enabled")


# Singleton instance — import this everywhere
settings = Settings()
