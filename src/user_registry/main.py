from __future__ import annotations

import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from .common.http_errors import register_error_handlers
from .config import get_settings_module
from .container import build_container
from .database.bootstrap import init_schema, register_cli
from .database.extensions import db
from .users.controller import register as register_users

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def create_app(settings_module: Optional[str] = None, **overrides: Any) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    app.config.from_object(settings_module)
    app.config.update(overrides)
    app.config.setdefault("USER_STORE", "sql")
    app.config.setdefault("DEFAULT_PAGE_SIZE", 20)
    app.config.setdefault("MAX_PAGE_SIZE", 1000)

    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("user_registry").setLevel(app.config.get("LOG_LEVEL", "INFO"))
    logger = logging.getLogger("user_registry.main")
    logger.debug("settings=%s store=%s", settings_module, app.config["USER_STORE"])

    if app.config["USER_STORE"] == "sql":
        db.init_app(app)
        register_cli(app)
        if app.config.get("AUTO_INIT_DB"):
            init_schema(app)

    container = build_container(settings=app.config)
    app.extensions["user_registry"] = container

    register_error_handlers(app)
    register_users(app, container)

    return app
