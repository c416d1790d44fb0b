"""Application configuration via environment variables."""
from pathlib import Path
from pydantic_settings import BaseSettings

BUNDLED_DATA_FILE = Path(__file__).resolve().parent / "data" / "data.json"


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    PORT: int = 3000
    HOST: str = "0.0.0.0"
    DATA_FILE: Path = BUNDLED_DATA_FILE
    CORS_ORIGINS: str = "http://localhost:3000"
    GRAPHIQL: bool = True
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
