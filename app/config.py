# app/config.py
import os
from dataclasses import dataclass
from typing import List


def _origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


@dataclass(frozen=True)
class Settings:
    fetch_timeout: float
    cors_allow_origins: List[str]
    log_level: str
    host: str
    port: int


def load_settings() -> Settings:
    return Settings(
        fetch_timeout=float(os.getenv("FETCH_TIMEOUT_SECONDS", "30")),
        cors_allow_origins=_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


settings = load_settings()
