from __future__ import annotations
import logging
from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SHOPPING_LIST_", env_file=".env", extra="ignore")

    lists_dir: Path = Path.home() / ".shopping_lists"
    # Upper bound offered by the quantity selector; the list itself accepts any count.
    max_quantity: int = 10
    log_level: str = "WARNING"

    @field_validator("max_quantity", mode="after")
    @classmethod
    def require_positive_max(cls, v: int) -> int:
        if v < 1:
            raise ValueError("SHOPPING_LIST_MAX_QUANTITY must be at least 1")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def require_known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
