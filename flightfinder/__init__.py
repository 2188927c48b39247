"""Flask app factory for the FlightFinder API."""

import logging

from flask import Flask

from flightfinder.config import get_config
from flightfinder.data import AirportProvider
from flightfinder.errors import register_error_handlers
from flightfinder.pipeline import build_pipeline

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def create_app(config_name=None, provider=None):
    """Create and configure Flask application.

    Args:
        config_name: Configuration name ('development', 'production', 'testing',
            or None to read FLASK_ENV)
        provider: Optional AirportProvider; built from configuration when omitted

    Returns:
        Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    app.json.sort_keys = False

    configure_logging(app)

    # Airport data is built once and shared by every request
    if provider is None:
        provider = load_provider(app)
    app.extensions['airport_provider'] = provider
    app.logger.info(f"Serving {len(provider)} airports")

    build_pipeline(app.config).init_app(app)

    register_blueprints(app)
    register_error_handlers(app)

    return app


def configure_logging(app):
    """Set the app logger level from LOG_LEVEL.

    The app logger is the "flightfinder" logger, so module loggers inherit it.
    """
    level = str(app.config.get('LOG_LEVEL', 'INFO')).upper()
    if level not in VALID_LOG_LEVELS:
        raise ValueError(f"Log level must be one of: {VALID_LOG_LEVELS}")

    if not logging.getLogger().handlers:
        logging.basicConfig(
            format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
        )
    app.logger.setLevel(level)


def load_provider(app):
    """Build the airport provider from AIRPORTS_FILE, or the built-in table."""
    airports_file = app.config.get('AIRPORTS_FILE')
    if airports_file:
        return AirportProvider.from_json(airports_file)
    return AirportProvider.default()


def register_blueprints(app):
    """Register application blueprints."""
    from flightfinder.routes import api_bp, main_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp, url_prefix='/api')
