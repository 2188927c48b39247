"""Cross-origin resource sharing stage."""

from typing import Iterable, Optional

from flask import Request, Response

from flightfinder.pipeline.base import Stage

ANY = "*"


class CorsStage(Stage):
    """
    Answer CORS preflights and tag cross-origin responses.

    A ``"*"`` entry in any of the lists allows everything for that list.
    """

    name = "cors"

    def __init__(self, origins: Iterable[str] = (ANY,), headers: Iterable[str] = (ANY,),
                 methods: Iterable[str] = (ANY,)):
        self.origins = frozenset(origins)
        self.headers = tuple(headers)
        self.methods = tuple(method.upper() for method in methods)

    @property
    def allow_any_origin(self) -> bool:
        return ANY in self.origins

    @property
    def allow_any_header(self) -> bool:
        return ANY in self.headers

    @property
    def allow_any_method(self) -> bool:
        return ANY in self.methods

    def process(self, request: Request) -> Optional[Response]:
        if not self.is_preflight(request):
            return None

        response = Response(status=204)
        origin = self.allowed_origin(request.headers["Origin"])
        if origin is None:
            return response

        self._set_origin(response, origin)

        requested_method = request.headers["Access-Control-Request-Method"].upper()
        if self.allow_any_method:
            response.headers["Access-Control-Allow-Methods"] = requested_method
        else:
            response.headers["Access-Control-Allow-Methods"] = ", ".join(self.methods)

        requested_headers = request.headers.get("Access-Control-Request-Headers")
        if self.allow_any_header:
            if requested_headers:
                response.headers["Access-Control-Allow-Headers"] = requested_headers
        else:
            response.headers["Access-Control-Allow-Headers"] = ", ".join(self.headers)

        return response

    def finalize(self, request: Request, response: Response) -> Response:
        origin = request.headers.get("Origin")
        if not origin or "Access-Control-Allow-Origin" in response.headers:
            return response

        allowed = self.allowed_origin(origin)
        if allowed is not None:
            self._set_origin(response, allowed)
        return response

    @staticmethod
    def is_preflight(request: Request) -> bool:
        return (
            request.method == "OPTIONS"
            and "Origin" in request.headers
            and "Access-Control-Request-Method" in request.headers
        )

    def allowed_origin(self, origin: str) -> Optional[str]:
        """Value for Access-Control-Allow-Origin, or None if not allowed."""
        if self.allow_any_origin:
            return ANY
        if origin in self.origins:
            return origin
        return None

    @staticmethod
    def _set_origin(response: Response, origin: str) -> None:
        response.headers["Access-Control-Allow-Origin"] = origin
        if origin != ANY:
            response.vary.add("Origin")

    def __repr__(self) -> str:
        return f"CorsStage(origins={sorted(self.origins)!r})"
