from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuración de logging para el proceso host.

    Solo la lee configure_logging(); el ranking no depende de ella.
    """

    model_config = SettingsConfigDict(
        env_prefix="STACKMATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_dir: Optional[Path] = Field(default=None)


@lru_cache
def get_settings() -> Settings:
    """Singleton cacheado para evitar recargar .env en cada llamada."""
    return Settings()
