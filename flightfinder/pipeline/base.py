"""
Request pipeline: an ordered chain of request-processing stages.

Each stage sees the request on the way in and may answer it directly, in
which case later stages and routing are skipped. On the way out every stage
sees the response, in reverse order, so the first stage in the chain is the
outermost one.
"""

import logging
from typing import Iterable, Optional, Tuple

from flask import Flask, Request, Response, request

logger = logging.getLogger(__name__)


class Stage:
    """Base class for pipeline stages. Both hooks pass through by default."""

    name = "stage"

    def process(self, request: Request) -> Optional[Response]:
        """Handle the inbound request. Return a response to short-circuit."""
        return None

    def finalize(self, request: Request, response: Response) -> Response:
        """Adjust the outbound response."""
        return response

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class RequestPipeline:
    """Immutable ordered chain of stages, installed on a Flask app."""

    extension_name = "request_pipeline"

    def __init__(self, stages: Iterable[Stage] = ()):
        self._stages: Tuple[Stage, ...] = tuple(stages)

    @property
    def stages(self) -> Tuple[Stage, ...]:
        return self._stages

    def process(self, request: Request) -> Optional[Response]:
        """Run the inbound leg; the first stage that answers wins."""
        for stage in self._stages:
            response = stage.process(request)
            if response is not None:
                logger.debug(f"Stage {stage.name} answered {request.method} {request.path}")
                return response
        return None

    def finalize(self, request: Request, response: Response) -> Response:
        """Run the outbound leg through every stage, innermost first."""
        for stage in reversed(self._stages):
            response = stage.finalize(request, response)
        return response

    def init_app(self, app: Flask) -> None:
        """Hook the pipeline into the app's request lifecycle."""
        app.before_request(self._before_request)
        app.after_request(self._after_request)
        app.extensions[self.extension_name] = self
        app.logger.info(
            f"Request pipeline: {' -> '.join(stage.name for stage in self._stages) or '(empty)'}"
        )

    def _before_request(self) -> Optional[Response]:
        return self.process(request)

    def _after_request(self, response: Response) -> Response:
        return self.finalize(request, response)

    def __len__(self) -> int:
        return len(self._stages)

    def __repr__(self) -> str:
        return f"RequestPipeline(stages={list(self._stages)!r})"
