"""Gzip response compression stage."""

import gzip
from typing import Iterable

from flask import Request, Response

from flightfinder.pipeline.base import Stage


class CompressionStage(Stage):
    """
    Gzip-encode response bodies for clients that accept it.

    Only responses whose mimetype is listed are eligible. Eligible responses
    always carry ``Vary: Accept-Encoding`` so caches keep the encoded and
    identity forms apart.
    """

    name = "compression"
    encoding = "gzip"

    def __init__(self, mimetypes: Iterable[str], level: int = 6, enable_for_https: bool = False):
        if not 0 <= level <= 9:
            raise ValueError(f"Compression level must be between 0 and 9, got {level}")
        self.mimetypes = frozenset(mimetype.lower() for mimetype in mimetypes)
        self.level = level
        self.enable_for_https = enable_for_https

    def finalize(self, request: Request, response: Response) -> Response:
        if not self.is_eligible(response):
            return response

        response.vary.add("Accept-Encoding")

        if request.is_secure and not self.enable_for_https:
            return response
        if not self.accepts_gzip(request):
            return response

        body = response.get_data()
        if not body:
            return response

        response.set_data(gzip.compress(body, compresslevel=self.level, mtime=0))
        response.headers["Content-Encoding"] = self.encoding
        return response

    def is_eligible(self, response: Response) -> bool:
        """Whether the response could be compressed for some client."""
        if response.direct_passthrough or response.is_streamed:
            return False
        if "Content-Encoding" in response.headers or "Content-Range" in response.headers:
            return False
        return (response.mimetype or "").lower() in self.mimetypes

    def accepts_gzip(self, request: Request) -> bool:
        """Whether Accept-Encoding gives gzip a non-zero quality."""
        return request.accept_encodings.quality(self.encoding) > 0

    def __repr__(self) -> str:
        return f"CompressionStage(level={self.level}, mimetypes={len(self.mimetypes)})"
