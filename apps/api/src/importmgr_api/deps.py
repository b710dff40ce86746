from __future__ import annotations

import logging

from fastapi import FastAPI, Request

from importmgr_api.settings import Settings

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("importmgr_core").setLevel(level)
    logging.getLogger("importmgr_api").setLevel(level)


def init_app_state(app: FastAPI, settings: Settings) -> None:
    configure_logging(settings.log_level)
    app.state.settings = settings


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings
