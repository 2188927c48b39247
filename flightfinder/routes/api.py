"""API routes for the FlightFinder API."""

from flask import Blueprint, current_app, jsonify

from flightfinder.data import AirportProvider

# Create blueprint
api_bp = Blueprint('api', __name__)


def get_provider() -> AirportProvider:
    """Airport provider attached to the running app."""
    return current_app.extensions['airport_provider']


@api_bp.route('/airports', methods=['GET'])
def list_airports():
    """JSON list of every airport, in serving order."""
    airports = get_provider().list()
    return jsonify([airport.model_dump() for airport in airports])
