from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Application configuration settings.
    Loads from environment variables or .env file.
    """
    PROJECT_NAME: str = "Issue Board API"
    PROJECT_VERSION: str = "0.1.0"
    PORT: int = 8000

    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Reload the built-in demo dataset on every start
    SEED_DATA: bool = True

    AVATAR_BASE_URL: str = "https://api.dicebear.com/7.x/avataaars/svg"

    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

settings = Settings()
