from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "WARNING"
    output: Literal["text", "json"] = "text"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CEDULA_")


@lru_cache
def get_settings() -> Settings:
    return Settings()
