from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "tauri://localhost",
)


@dataclass(frozen=True)
class Settings:
    cors_origins: tuple[str, ...]
    log_level: str
    report_page_size: int


def _parse_cors_origins(raw_origins: str) -> tuple[str, ...]:
    configured = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
    return tuple(dict.fromkeys(DEFAULT_CORS_ORIGINS + tuple(configured)))


def _parse_log_level(raw_level: str) -> str:
    level = raw_level.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"IMPORTMGR_LOG_LEVEL must be a logging level name, got {raw_level!r}")
    return level


def _parse_page_size(raw_page_size: str) -> int:
    try:
        page_size = int(raw_page_size)
    except ValueError as exc:
        raise ValueError("IMPORTMGR_REPORT_PAGE_SIZE must be an integer") from exc
    if page_size < 1:
        raise ValueError("IMPORTMGR_REPORT_PAGE_SIZE must be positive")
    return page_size


@lru_cache
def get_settings() -> Settings:
    return Settings(
        cors_origins=_parse_cors_origins(os.getenv("IMPORTMGR_CORS_ORIGINS", "")),
        log_level=_parse_log_level(os.getenv("IMPORTMGR_LOG_LEVEL", "INFO")),
        report_page_size=_parse_page_size(os.getenv("IMPORTMGR_REPORT_PAGE_SIZE", "50")),
    )
