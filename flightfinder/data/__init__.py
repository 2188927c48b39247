"""Airport data sources."""

from .provider import AirportDataError, AirportProvider
from .sample_data import SAMPLE_AIRPORTS

__all__ = [
    "AirportDataError",
    "AirportProvider",
    "SAMPLE_AIRPORTS",
]
