"""
Request pipeline package.

``build_pipeline`` composes the default chain from app configuration:
access log, then compression, then CORS.
"""

from .access_log import AccessLogStage
from .base import RequestPipeline, Stage
from .compression import CompressionStage
from .cors import CorsStage


def build_pipeline(config):
    """
    Compose the default request pipeline.

    Args:
        config: Mapping with the COMPRESS_* and CORS_* settings, usually app.config

    Returns:
        RequestPipeline: Stages in outermost-first order
    """
    return RequestPipeline([
        AccessLogStage(),
        CompressionStage(
            mimetypes=config['COMPRESS_MIMETYPES'],
            level=config['COMPRESS_LEVEL'],
            enable_for_https=config['COMPRESS_ENABLE_FOR_HTTPS'],
        ),
        CorsStage(
            origins=config['CORS_ORIGINS'],
            headers=config['CORS_ALLOW_HEADERS'],
            methods=config['CORS_ALLOW_METHODS'],
        ),
    ])


__all__ = [
    "AccessLogStage",
    "CompressionStage",
    "CorsStage",
    "RequestPipeline",
    "Stage",
    "build_pipeline",
]
