"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from trilattice.engine.constants import DEFAULT_CHUNK_SIZE


class Settings(BaseSettings):
    trilattice_env: str = "development"
    trilattice_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Search
    search_chunk_size: int = DEFAULT_CHUNK_SIZE
    replace_running_search: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
