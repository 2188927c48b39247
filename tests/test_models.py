"""
Pytest tests for the airport model.
Run with: pytest tests/test_models.py -v
"""

import pytest
from pydantic import ValidationError

from flightfinder.models import AirportModel


class TestAirportModel:
    """Test AirportModel creation and validation."""

    def test_airport_model(self):
        """Test AirportModel creation."""
        airport = AirportModel(code='SEA', name='Seattle-Tacoma International', city='Seattle')
        assert airport.code == 'SEA'
        assert airport.name == 'Seattle-Tacoma International'
        assert airport.city == 'Seattle'

    def test_serialized_shape(self):
        """Test the serialized field set and order."""
        airport = AirportModel(code='LHR', name='London Heathrow', city='London')
        assert list(airport.model_dump()) == ['code', 'name', 'city']

    def test_whitespace_is_stripped(self):
        airport = AirportModel(code=' JFK ', name=' John F. Kennedy International ', city='New York')
        assert airport.code == 'JFK'
        assert airport.name == 'John F. Kennedy International'

    @pytest.mark.parametrize('code', ['SE', 'SEAT', 'sea', '12A', ''])
    def test_invalid_code(self, code):
        """Test that codes must be three uppercase letters."""
        with pytest.raises(ValidationError):
            AirportModel(code=code, name='Somewhere', city='Somewhere')

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            AirportModel(code='SEA', name='', city='Seattle')

    def test_model_is_frozen(self):
        """Test that records cannot be changed after construction."""
        airport = AirportModel(code='SEA', name='Seattle-Tacoma International', city='Seattle')
        with pytest.raises(ValidationError):
            airport.name = 'Changed'
        assert airport.name == 'Seattle-Tacoma International'

    def test_models_are_hashable_and_comparable(self):
        first = AirportModel(code='SEA', name='Seattle-Tacoma International', city='Seattle')
        second = AirportModel(code='SEA', name='Seattle-Tacoma International', city='Seattle')
        assert first == second
        assert hash(first) == hash(second)
