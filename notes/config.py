"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

from .storage import (
    DEFAULT_SLOT_KEY,
    FileBackend,
    MemoryBackend,
    RedisBackend,
    SlotBackend,
)


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # Persistence
    notes_backend: Literal["file", "memory", "redis"] = "file"
    notes_data_dir: Path = Path("~/.notes")
    notes_slot_key: str = DEFAULT_SLOT_KEY

    # Redis (only used when notes_backend == "redis")
    redis_url: str = "redis://localhost:6379/0"

    log_level: str = "INFO"


def build_backend(config: Settings) -> SlotBackend:
    """Return the slot backend selected by ``config.notes_backend``."""
    if config.notes_backend == "memory":
        return MemoryBackend()
    if config.notes_backend == "redis":
        return RedisBackend(config.redis_url)
    return FileBackend(config.notes_data_dir)


settings = Settings()
