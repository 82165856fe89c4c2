from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SPARKY_",
        env_file=str(BASE_DIR / ".env"),
        extra="ignore",
    )

    env: str = Field(default="dev")
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    # absolute links for "next step" flows between mounted modules
    flow_base_url: str | None = Field(default=None)
    shared_templates: Path | None = Field(default=None)

    byte_convert_max_input: int = Field(default=20000, gt=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: Any) -> str:
        return str(v or "INFO").strip().upper()


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def shared_templates_dir(root_dir: Path) -> Path:
    settings = get_settings()
    if settings.shared_templates:
        return Path(settings.shared_templates)
    return root_dir / "universe" / "templates"


def configure_templates(templates: Any) -> None:
    templates.env.auto_reload = True
    templates.env.cache = {}
