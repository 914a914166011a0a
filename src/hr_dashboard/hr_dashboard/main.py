from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.formatting import register_filters
from .container import Container, build_container
from .core.constants import DEFAULT_RECENT_LEAVES, DEFAULT_SESSION_DAYS
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SESSION_DAYS"] = int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS))
    app.permanent_session_lifetime = timedelta(days=app.config["SESSION_DAYS"])

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s debug=%s", settings_module, app.config["DEBUG"])

    container = container or build_container(recent_leaves=int(getattr(settings, "RECENT_LEAVES", DEFAULT_RECENT_LEAVES)))

    register_filters(app)
    register_auth(app, container)
    register_dashboard(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_payroll(app, container)

    return app
