from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    SAVINGS_GOAL_APP_NAME: str = "savings-goal"
    # Origins allowed to call /api/* (JSON list when set from the environment).
    SAVINGS_GOAL_CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    SAVINGS_GOAL_LOG_LEVEL: str = "INFO"
    SAVINGS_GOAL_PORT: int = 5000

    @property
    def app_name(self) -> str:
        return self.SAVINGS_GOAL_APP_NAME

    @property
    def cors_origins(self) -> List[str]:
        return self.SAVINGS_GOAL_CORS_ORIGINS

    @property
    def log_level(self) -> str:
        return self.SAVINGS_GOAL_LOG_LEVEL

    @property
    def port(self) -> int:
        return self.SAVINGS_GOAL_PORT


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
