from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from loguru import logger

from config import get_settings_module

from .container import Container, build_container
from .events.controller import register as register_events
from .ledger.controller import register as register_ledger
from .logging_setup import configure_logging
from .shifts.controller import register as register_shifts
from .summaries.controller import register as register_summaries
from .templates.controller import register as register_templates


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    data_dir = getattr(settings, "DATA_DIR")

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings={} data_dir={}", settings_module, data_dir)

    container = container or build_container(data_dir=data_dir)
    app.extensions["worktime"] = container

    register_events(app, container)
    register_templates(app, container)
    register_summaries(app, container)
    register_ledger(app, container)
    register_shifts(app, container)

    return app
