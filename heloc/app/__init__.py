"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from heloc.app.api.routes import api_bp
from heloc.app.ui.routes import ui_bp
from heloc.config import Settings, get_settings
from heloc.logging_config import setup_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = Flask(__name__)
    app.config["HELOC_SETTINGS"] = settings
    app.json.sort_keys = False

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(ui_bp)
    return app
