"""Root route for the FlightFinder API."""

from flask import Blueprint, Response

STATUS_MESSAGE = "FlightFinder API is running. Try GET /api/airports"

# Create blueprint
main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Plain-text status message."""
    return Response(STATUS_MESSAGE, mimetype='text/plain')
