# work_api/config.py

import logging
import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field

ENV_PREFIX = "WORK_API_"
DEFAULT_PORT = 8090


class Settings(BaseModel):
    """Runtime settings, overridable through ``WORK_API_*`` env variables."""

    title: str = "Example API"
    version: str = "1.2.3"
    server_url: str = "https://example.com"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "DEBUG"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    docs_path: str = "/documentation"
    strict_status_codes: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        data = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is None:
                continue
            if name == "cors_origins":
                data[name] = [origin.strip() for origin in raw.split(",") if origin.strip()]
            else:
                data[name] = raw
        return cls(**data)


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
