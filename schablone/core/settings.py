from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCHABLONE_", case_sensitive=False)

    log_level: str = "INFO"
    file_mode: str = "0644"
    parameters_file: Path | None = None
