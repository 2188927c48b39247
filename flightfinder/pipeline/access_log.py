"""Access logging stage."""

import time

from flask import Request, Response, current_app, g

from flightfinder.pipeline.base import Stage


class AccessLogStage(Stage):
    """Log method, path, status and duration of every request."""

    name = "access_log"

    def process(self, request: Request):
        g.request_started_at = time.perf_counter()
        return None

    def finalize(self, request: Request, response: Response) -> Response:
        started = g.get("request_started_at")
        duration = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        current_app.logger.info(
            f"{request.method} {request.full_path.rstrip('?')} {response.status_code} ({duration:.1f}ms)"
        )
        return response
