"""Shared fixtures for the FlightFinder API tests."""

import pytest

from flightfinder import create_app
from flightfinder.data import AirportProvider
from flightfinder.models import AirportModel


@pytest.fixture
def app():
    """Application built with the testing configuration."""
    return create_app('testing')


@pytest.fixture
def client(app):
    """Test client for the testing application."""
    return app.test_client()


@pytest.fixture
def small_provider():
    """Provider with a short, known airport table."""
    return AirportProvider([
        AirportModel(code='SEA', name='Seattle-Tacoma International', city='Seattle'),
        AirportModel(code='PDX', name='Portland International', city='Portland'),
        AirportModel(code='YVR', name='Vancouver International', city='Vancouver'),
    ])
