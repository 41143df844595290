import secrets

from pydantic_settings import BaseSettings


def _generate_secret() -> str:
    """Generate a random secret key if none is provided via env."""
    return secrets.token_urlsafe(64)


class Settings(BaseSettings):
    PROJECT_NAME: str = "Inventory Dashboard"
    SECRET_KEY: str = _generate_secret()  # tokens do not survive a restart unless set via .env
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480
    ALGORITHM: str = "HS256"
    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # Display mode persistence (one durable key-value slot)
    PREFERENCE_FILE: str = "data/preferences.json"
    PREFERENCE_KEY: str = "themeMode"
    # Signal assumed until the browser reports prefers-color-scheme
    DEFAULT_SYSTEM_PREFERS_DARK: bool = True

    SEED_SAMPLE_ITEMS: bool = True

    class Config:
        env_file = ".env"


settings = Settings()
