from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    app.config.from_object(importlib.import_module(settings_module))
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=str(app.config.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(
        "settings=%s storage=%s data_dir=%s",
        settings_module,
        app.config["STORAGE_BACKEND"],
        app.config["DATA_DIR"],
    )

    container = build_container(
        storage_backend=app.config["STORAGE_BACKEND"],
        data_dir=app.config["DATA_DIR"],
    )
    app.extensions["employee_vcard"] = container

    register_employees(app, container)

    return app
