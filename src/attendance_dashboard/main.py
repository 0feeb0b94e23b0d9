from __future__ import annotations

import importlib
import logging
import logging.config
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_logging_config, get_settings_module
from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="templates")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.config.dictConfig(
        get_logging_config(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FORMAT"))
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logger.info("settings=%s backend=%s", settings_module, getattr(settings, "SUPABASE_URL", ""))

    container = container or build_container(settings=settings)

    register_auth(app, container)
    register_attendance(app, container)

    return app
