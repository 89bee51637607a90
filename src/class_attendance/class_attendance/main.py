from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging_setup import setup_logging
from .container import build_container

logger = logging.getLogger(__name__)


def create_app(*, container=None, mount: bool = True) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    api_config = getattr(settings, "API_CONFIG")

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(f"settings={settings_module} api={api_config.get('base_url')}")

    container = container or build_container(api_config=api_config)
    if mount:
        container.attendance_view.mount()

    register_attendance(app, container)

    return app
