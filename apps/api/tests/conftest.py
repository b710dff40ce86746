from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from importmgr_api.main import create_app
from importmgr_api.settings import get_settings


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("IMPORTMGR_CORS_ORIGINS", raising=False)
    monkeypatch.setenv("IMPORTMGR_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("IMPORTMGR_REPORT_PAGE_SIZE", "50")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
