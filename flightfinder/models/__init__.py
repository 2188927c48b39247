"""
FlightFinder Pydantic models package.
"""

from .airport import AirportModel

__all__ = [
    "AirportModel",
]
