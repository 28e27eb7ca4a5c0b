"""
Application Configuration

Pydantic Settings for environment variable management.
"""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_DATA_DIR = Path.home() / ".local" / "share" / "planetas" / "databases"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # App
    app_name: str = "Gerenciador de Planetas"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database
    data_dir: Path = DEFAULT_DATA_DIR
    database_name: str = "planetas.db"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False
    log_level: str = "info"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PLANETAS_",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def database_path(self) -> Path:
        """Full path of the SQLite file"""
        return self.data_dir.expanduser() / self.database_name

    @property
    def database_url(self) -> str:
        return f"sqlite:///{self.database_path}"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance for easy import
settings = get_settings()
