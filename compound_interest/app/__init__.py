"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from compound_interest.app.api.routes import api_bp
from compound_interest.app.cli import calculate_command
from compound_interest.app.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["DEFAULT_LANGUAGE"] = settings.DEFAULT_LANGUAGE

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    app.cli.add_command(calculate_command)

    logger.debug("Application created with CORS origins %s", settings.CORS_ORIGINS)
    return app
