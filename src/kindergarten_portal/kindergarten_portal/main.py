from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .absences.controller import register as register_absences
from .attendance.controller import register as register_attendance


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_PREFIX"] = getattr(settings, "API_PREFIX", "/api")
    app.config["PING_MESSAGE"] = getattr(settings, "PING_MESSAGE", "ping")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if app.config["DEBUG"]:
        print("[kindergarten-portal] settings=", settings_module, " api=", app.config["API_PREFIX"])

    # One container per process: the in-memory stores live as long as the app.
    container = container or build_container()

    @app.route(f"{app.config['API_PREFIX']}/ping", methods=["GET"], endpoint="ping")
    def ping():
        return jsonify({"message": app.config["PING_MESSAGE"]})

    register_absences(app, container)
    register_attendance(app, container)

    return app
