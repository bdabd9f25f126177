"""
Cross-origin gating for storefront requests.

Allowed origins are echoed back exactly with `Vary: Origin`. Other origins
get no CORS headers; with strict mode on they are also refused before any
state-changing handler runs.
"""
import logging
import re
from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

SAFE_METHODS = ('GET', 'HEAD', 'OPTIONS')
ALLOW_METHODS = 'POST, OPTIONS'
ALLOW_HEADERS = 'Content-Type'


class OriginPolicy:
    """Regex allow-list for the `Origin` header."""

    def __init__(self, patterns: Iterable[str], strict: bool = True):
        self.patterns = [re.compile(p, re.IGNORECASE) for p in patterns]
        self.strict = strict

    def allows(self, origin: str) -> bool:
        if not origin:
            return False
        return any(rx.search(origin) for rx in self.patterns)

    def rejects(self, origin: str, method: str) -> bool:
        """True when a request must be refused before it does any work."""
        if not self.strict or not origin or method.upper() in SAFE_METHODS:
            return False
        return not self.allows(origin)

    def cors_headers(self, origin: str) -> dict[str, str]:
        return {
            'Access-Control-Allow-Origin': origin,
            'Vary': 'Origin',
            'Access-Control-Allow-Methods': ALLOW_METHODS,
            'Access-Control-Allow-Headers': ALLOW_HEADERS,
        }


def install_origin_gate(app: FastAPI, policy: OriginPolicy) -> None:
    """Register the CORS middleware on `app`."""

    @app.middleware("http")
    async def origin_gate(request: Request, call_next):
        origin = request.headers.get('origin', '')
        allowed = policy.allows(origin)

        if request.method == 'OPTIONS':
            response = Response(status_code=204)
        elif policy.rejects(origin, request.method):
            logger.warning(f"Refused {request.method} {request.url.path} from origin {origin}")
            return JSONResponse(status_code=403, content={"error": "Origin not allowed"})
        else:
            response = await call_next(request)

        if allowed:
            response.headers.update(policy.cors_headers(origin))
        return response
