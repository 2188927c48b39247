"""Configuration settings for the FlightFinder API."""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_list(name, default):
    """Read a comma separated list from the environment."""
    value = os.environ.get(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(',') if item.strip()]


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in ('true', '1', 'yes', 'on')


# Compressible content types, plus the generic binary type
DEFAULT_COMPRESS_MIMETYPES = [
    'text/plain',
    'text/css',
    'application/javascript',
    'text/html',
    'application/xml',
    'text/xml',
    'application/json',
    'text/json',
    'application/wasm',
    'application/octet-stream',
]


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Airport data: None serves the built-in table
    AIRPORTS_FILE = os.environ.get('AIRPORTS_FILE') or None

    # CORS settings, '*' allows anything. Tighten CORS_ORIGINS in production.
    CORS_ORIGINS = _env_list('CORS_ORIGINS', ['*'])
    CORS_ALLOW_HEADERS = _env_list('CORS_ALLOW_HEADERS', ['*'])
    CORS_ALLOW_METHODS = _env_list('CORS_ALLOW_METHODS', ['*'])

    # Response compression settings
    COMPRESS_MIMETYPES = _env_list('COMPRESS_MIMETYPES', DEFAULT_COMPRESS_MIMETYPES)
    COMPRESS_LEVEL = int(os.environ.get('COMPRESS_LEVEL', '6'))
    COMPRESS_ENABLE_FOR_HTTPS = _env_flag('COMPRESS_ENABLE_FOR_HTTPS')


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    DEBUG = False
    AIRPORTS_FILE = None
    LOG_LEVEL = 'WARNING'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """
    Resolve a configuration class by name.

    Args:
        config_name: Configuration name, or None to read FLASK_ENV

    Returns:
        Configuration class

    Raises:
        ValueError: If the name is not a known configuration
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    try:
        return config[config_name]
    except KeyError:
        raise ValueError(
            f"Unknown configuration '{config_name}', expected one of: {sorted(config)}"
        ) from None
