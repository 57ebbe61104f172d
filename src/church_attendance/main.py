from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .api.errors import register_error_handlers
from .app_settings.controller import register as register_settings
from .attendance.controller import register as register_attendance
from .config import get_settings_module, load_settings
from .container import Container, build_container, build_memory_container
from .database.bootstrap import apply_schema, list_tables, seed_demo_data
from .database.connection import DBConfig
from .database.demo_data import DEMO_USERS
from .events.controller import register as register_events
from .guests.controller import register as register_guests
from .insights.controller import register as register_insights
from .insights.gemini_client import GeminiTextGenerator
from .members.controller import register as register_members
from .public.controller import register as register_public
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _build_container(settings) -> Container:
    generator = GeminiTextGenerator(
        getattr(settings, "GEMINI_API_KEY", None),
        model=getattr(settings, "GEMINI_MODEL", "gemini-2.5-flash"),
        timeout=getattr(settings, "INSIGHT_TIMEOUT", 15.0),
    )
    auto_seed_db = bool(getattr(settings, "AUTO_SEED_DB", False))

    if getattr(settings, "STORE_BACKEND", "mysql") == "memory":
        logger.warning("Using the in-memory store; data is lost on restart")
        container = build_memory_container(seed=auto_seed_db, insight_generator=generator)
    else:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("db=%s", DBConfig.from_dict(db_config).describe())
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(db_config=db_config, insight_generator=generator)
        if auto_seed_db:
            seed_demo_data(container)

    # Login must work on a fresh install.
    container.user_service.ensure_seed_users(DEMO_USERS)
    return container


def build_api_app(container: Container, *, public_base_url: str = "") -> Flask:
    """Routes and error handlers over ``container``.

    Touches no process state: no dotenv, logging setup or settings module.
    """
    app = Flask(__name__)
    app.config["PUBLIC_BASE_URL"] = public_base_url
    app.extensions["church_attendance.container"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_settings(app, container)
    register_members(app, container)
    register_events(app, container)
    register_attendance(app, container)
    register_guests(app, container)
    register_reports(app, container)
    register_insights(app, container)
    register_public(app, container)
    return app


def create_app(settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = load_settings(settings_module)

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)
    logger.info("settings=%s", settings_module)

    container = container or _build_container(settings)
    app = build_api_app(container, public_base_url=getattr(settings, "PUBLIC_BASE_URL", ""))
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 5000))
    return app
