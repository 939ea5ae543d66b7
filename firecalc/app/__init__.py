"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS
from loguru import logger

from firecalc.app.api.routes import api_bp
from firecalc.config import AppConfig, load_config
from firecalc.logging_setup import configure_logging


def create_app(config: Optional[AppConfig] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or load_config()
    configure_logging(config.log_level)

    app = Flask(__name__)
    app.extensions["firecalc_config"] = config

    CORS(
        app,
        resources={r"/api/*": {"origins": config.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info(f"firecalc API ready, CORS origins: {', '.join(config.cors_origins)}")
    return app
