from __future__ import annotations

import pytest
from importmgr_api.settings import DEFAULT_CORS_ORIGINS, get_settings


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("IMPORTMGR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("IMPORTMGR_REPORT_PAGE_SIZE", raising=False)
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.log_level == "INFO"
    assert settings.report_page_size == 50


def test_cors_origins_extend_defaults_without_duplicates(monkeypatch) -> None:
    monkeypatch.setenv(
        "IMPORTMGR_CORS_ORIGINS",
        "https://imports.example.com, http://localhost:3000,,",
    )
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS + ("https://imports.example.com",)


def test_log_level_is_normalized(monkeypatch) -> None:
    monkeypatch.setenv("IMPORTMGR_LOG_LEVEL", "warning")
    get_settings.cache_clear()
    assert get_settings().log_level == "WARNING"


def test_invalid_log_level_rejected(monkeypatch) -> None:
    monkeypatch.setenv("IMPORTMGR_LOG_LEVEL", "chatty")
    get_settings.cache_clear()
    with pytest.raises(ValueError, match="IMPORTMGR_LOG_LEVEL"):
        get_settings()


@pytest.mark.parametrize("raw", ["0", "-3", "many"])
def test_invalid_report_page_size_rejected(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("IMPORTMGR_REPORT_PAGE_SIZE", raw)
    get_settings.cache_clear()
    with pytest.raises(ValueError, match="IMPORTMGR_REPORT_PAGE_SIZE"):
        get_settings()
