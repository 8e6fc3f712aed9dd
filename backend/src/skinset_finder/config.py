"""Application configuration via pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

# backend/src/skinset_finder/config.py -> repo root
REPO_ROOT = Path(__file__).parents[3]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Settings
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS - comma-separated origins (env var: CORS_ORIGINS)
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Reference data directory (skinsets.json, champion_lanes.json)
    knowledge_dir: str = "knowledge"

    # Enumeration is exponential in roster size; the UI never has more than 5
    max_players: int = Field(default=5, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_knowledge_dir(settings: Settings | None = None) -> Path:
    """Resolve the knowledge directory, relative paths from the repo root."""
    settings = settings or get_settings()
    path = Path(settings.knowledge_dir)
    if path.is_absolute():
        return path
    return REPO_ROOT / path


# Global settings instance
settings = get_settings()
