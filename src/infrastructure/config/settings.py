"""Application settings.

La configuración se lee de variables de entorno y de un archivo .env.
get_settings() es el único punto de entrada.
"""

import json

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.infrastructure.importers._constants import DEFAULT_ANSWER_PARTITIONS


PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_DATA_DIR = PROJECT_ROOT / "data"


def find_env_file(start: Path | None = None) -> Path | None:
    """Busca un archivo .env desde start hacia arriba."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseSettings):
    """Configuración del catálogo."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    CATALOG_DATA_DIR: Path = Field(default=DEFAULT_DATA_DIR / "catalog")
    ANSWERS_DIR: Path = Field(default=DEFAULT_DATA_DIR / "respuestas")
    WORDCLOUDS_DIR: Path = Field(default=DEFAULT_DATA_DIR / "wordclouds")
    ANSWER_PARTITIONS: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_ANSWER_PARTITIONS)
    )
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("ANSWER_PARTITIONS", mode="before")
    @classmethod
    def _split_partitions(cls, value: object) -> object:
        # ANSWER_PARTITIONS=a,b,c o ANSWER_PARTITIONS=["a", "b"]
        if not isinstance(value, str):
            return value
        if value.lstrip().startswith("["):
            return json.loads(value)
        return [item.strip() for item in value.split(",") if item.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def reload_settings() -> Settings:
    """Descarta la configuración cacheada y la vuelve a leer."""
    get_settings.cache_clear()
    return get_settings()


settings = get_settings()
