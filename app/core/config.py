"""Application configuration via pydantic-settings.

Loads all settings from environment variables (or a local ``.env``).
A global, frozen ``settings`` object is built at import time, so a missing
Supabase credential or signing secret stops the process at startup instead
of failing individual requests.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Supabase
    SUPABASE_URL: str
    SUPABASE_SERVICE_ROLE_KEY: str

    # Tokens
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    TOKEN_TTL_DAYS: int = 30

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()  # type: ignore[call-arg]
