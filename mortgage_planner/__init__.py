"""Home Purchase Planner Flask Application Factory."""

import logging
from typing import Optional

from flask import Flask

from mortgage_planner.config import get_global_settings


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_name: Configuration name (development, testing, production),
            overrides APP_ENV when given

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    settings = get_global_settings()
    app_env = config_name or settings.app_env
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["ENV"] = app_env
    app.config["DEBUG"] = app_env == "development"
    app.config["TESTING"] = app_env == "testing"
    app.config["PROJECTION_YEARS"] = settings.projection_years
    app.config["SHARE_BASE_URL"] = settings.share_base_url

    logging.basicConfig(level=settings.log_level)
    app.logger.setLevel(settings.log_level)

    # Register blueprints
    from mortgage_planner.blueprints.health import health_bp
    from mortgage_planner.blueprints.scenarios import scenarios_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(scenarios_bp)

    return app
