"""
Test suite for HTTP error handling.
"""

import pytest

from flightfinder import create_app


class TestNotFound:
    """Test cases for undefined paths."""

    def test_api_path_returns_json(self, client):
        response = client.get('/api/flights')

        assert response.status_code == 404
        assert response.get_json() == {'error': 'Not Found', 'status': 404}

    def test_other_path_uses_default_page(self, client):
        response = client.get('/nowhere')

        assert response.status_code == 404
        assert response.mimetype == 'text/html'


class TestUnhandledErrors:
    """Test cases for faults raised inside handlers."""

    @staticmethod
    def add_failing_route(app):
        @app.route('/api/boom')
        def boom():
            raise RuntimeError('kaboom')

    def test_generic_500_in_production(self, caplog):
        app = create_app('production')
        self.add_failing_route(app)

        response = app.test_client().get('/api/boom')

        assert response.status_code == 500
        assert response.get_json() == {'error': 'Internal Server Error', 'status': 500}
        assert 'kaboom' not in response.get_data(as_text=True)
        assert any('kaboom' in record.getMessage() for record in caplog.records)

    def test_errors_propagate_in_development(self):
        """Test that debug mode hands faults to the interactive debugger."""
        app = create_app('development')
        self.add_failing_route(app)

        with pytest.raises(RuntimeError, match='kaboom'):
            app.test_client().get('/api/boom')

    def test_500_response_still_gets_cors_headers(self):
        app = create_app('production')
        self.add_failing_route(app)

        response = app.test_client().get('/api/boom', headers={'Origin': 'http://localhost:3000'})

        assert response.status_code == 500
        assert response.headers['Access-Control-Allow-Origin'] == '*'
