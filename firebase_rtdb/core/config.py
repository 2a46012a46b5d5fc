"""Library configuration (settings and environment).

Optional: a Location can always be built directly from a URL and token.
Settings are only read by Location.from_settings() and setup_logging().
Uses pydantic-settings with .env support.
"""

from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment and .env.

    Nothing is required at load time; Location.from_settings() raises
    ConfigurationException when the database URL is missing.
    """

    debug: bool = False

    # Realtime Database root, e.g. https://<project>-default-rtdb.firebaseio.com
    firebase_database_url: str = ""
    # Opaque credential sent as the ``auth`` query parameter.
    firebase_auth_token: SecretStr | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("firebase_database_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store the root without a trailing slash so child paths join cleanly."""
        return v.strip().rstrip("/")

    def auth_token(self) -> str | None:
        """Return the plain auth token, or None when unset or empty."""
        if self.firebase_auth_token is None:
            return None
        return self.firebase_auth_token.get_secret_value() or None


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    In tests, call get_settings.cache_clear() after overriding env vars so
    the next get_settings() uses the new values.
    """
    return Settings()
