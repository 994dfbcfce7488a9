"""Application factory and app-wide configuration."""

#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app backend.app run --port 5000 --debug

from __future__ import annotations

import logging
import uuid
from typing import Optional

from flask import Flask, request
from flask_cors import CORS

from backend.app.api.routes import api_bp
from backend.app.config import Settings, load_settings
from backend.app.log_setup import request_id_var, set_request_id, setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["TESTING"] = settings.testing

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
        expose_headers=["Content-Disposition", "X-Request-ID"],
    )

    @app.before_request
    def _bind_request_id() -> None:
        set_request_id(request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12])

    @app.after_request
    def _echo_request_id(response):
        response.headers["X-Request-ID"] = request_id_var.get()
        return response

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("app created env=%s origins=%s", settings.env, ",".join(settings.cors_origins))
    return app
