from __future__ import annotations

import atexit
import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .config import get_settings_module

from .common.http import register_error_handlers
from .common.json_provider import DecimalJSONProvider
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables

from .auth.controller import register as register_auth
from .labours.controller import register as register_labours
from .payments.controller import register as register_payments
from .projects.controller import register as register_projects
from .work_days.controller import register as register_work_days

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)
    app.json = DecimalJSONProvider(app)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(db_config=db_config, settings=settings)
        atexit.register(container.close)

    app.extensions["thekedar"] = container
    register_error_handlers(app)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_auth(app, container)
    register_projects(app, container)
    register_labours(app, container)
    register_work_days(app, container)
    register_payments(app, container)

    return app
