"""
Origin allow-list policy for cross-origin requests.

The policy itself is a pure function of the request's ``Origin`` header, so it
can be tested without a server. ``CorsPolicyMiddleware`` applies it to every
response; preflight responders in the routers add the allowed methods.

A request from an origin that is not listed is still served. It simply gets
no permission headers and the browser blocks the cross-origin read.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOWED_METHODS = "GET, POST, PUT, DELETE, PATCH"


@dataclass(frozen=True)
class CorsPolicy:
    """Immutable set of origins allowed to read responses cross-origin."""

    allowed_origins: FrozenSet[str]

    @classmethod
    def from_origins(cls, origins: Iterable[str]) -> "CorsPolicy":
        return cls(allowed_origins=frozenset(origins))

    def is_allowed(self, origin: Optional[str]) -> bool:
        """True when the origin is present and on the allow-list."""
        return bool(origin) and origin in self.allowed_origins

    def allow_origin_headers(self, origin: Optional[str]) -> Dict[str, str]:
        """
        Headers for a simple (non-preflight) request.

        No Origin header means a same-origin or non-browser client, which
        needs no cross-origin grant, so nothing is emitted either way.
        """
        if not self.is_allowed(origin):
            return {}
        return {ALLOW_ORIGIN: origin}

    def preflight_headers(self, origin: Optional[str]) -> Dict[str, str]:
        """
        Headers for an OPTIONS preflight request.

        An absent origin is granted the methods; there is no origin to echo.
        """
        if not origin:
            return {ALLOW_METHODS: ALLOWED_METHODS}
        if not self.is_allowed(origin):
            return {}
        return {ALLOW_ORIGIN: origin, ALLOW_METHODS: ALLOWED_METHODS}


class CorsPolicyMiddleware(BaseHTTPMiddleware):
    """Echo allowed origins on every response."""

    def __init__(self, app: ASGIApp, policy: CorsPolicy):
        super().__init__(app)
        self.policy = policy

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        origin = request.headers.get("origin")
        headers = self.policy.allow_origin_headers(origin)
        if origin and not headers:
            logger.debug("Origin %s not allowed, omitting CORS headers", origin)

        for name, value in headers.items():
            response.headers[name] = value
        return response
