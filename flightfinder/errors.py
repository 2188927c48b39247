"""Error handlers for the FlightFinder API."""

from flask import jsonify, request
from werkzeug.exceptions import HTTPException, InternalServerError

API_PREFIX = '/api/'


def _wants_json():
    return request.path.startswith(API_PREFIX)


def register_error_handlers(app):
    """
    Register HTTP error handlers.

    Errors under /api/ are answered as JSON; other paths keep the framework's
    default pages. In debug mode unhandled exceptions propagate to the
    interactive debugger, so the 500 handler only runs outside it.
    """

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        if not _wants_json():
            return exc.get_response()
        response = jsonify({'error': exc.name, 'status': exc.code})
        response.status_code = exc.code
        # 405 must still advertise the allowed methods
        if getattr(exc, 'valid_methods', None):
            response.allow.update(exc.valid_methods)
        return response

    @app.errorhandler(InternalServerError)
    def handle_internal_error(exc):
        original = getattr(exc, 'original_exception', None)
        if original is not None:
            app.logger.error(
                f"Unhandled error on {request.method} {request.path}: {original}",
                exc_info=original,
            )
        return jsonify({'error': 'Internal Server Error', 'status': 500}), 500
