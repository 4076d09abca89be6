from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .confirmations.controller import register as register_confirmations
from .container import build_container
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .reports.controller import register as register_reports
from .store.client import SheetStore

logger = logging.getLogger(__name__)


def create_app(*, store: Optional[SheetStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", 7)))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    sheets_config = getattr(settings, "SHEETS_CONFIG")
    if store is None:
        logger.info(
            "settings=%s spreadsheet=%s api_key=%s",
            settings_module, sheets_config.get("spreadsheet_id"), bool(sheets_config.get("api_key")),
        )

    container = build_container(
        sheets_config=sheets_config,
        store=store,
        enforce_gates=bool(getattr(settings, "ENFORCE_GATES", True)),
        overwrite_on_approval=bool(getattr(settings, "OVERWRITE_ON_APPROVAL", True)),
    )
    app.extensions["container"] = container

    register_employees(app, container)
    register_confirmations(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_reports(app, container)

    return app
