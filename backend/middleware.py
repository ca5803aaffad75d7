"""
Security headers middleware.

Adds a conservative set of HTTP security headers to every relay response:

- X-Content-Type-Options: stops MIME-type sniffing
- X-Frame-Options / CSP frame-ancestors: stops clickjacking
- Referrer-Policy: never leak the referring URL
- Cross-Origin-Resource-Policy: only same-origin documents may embed responses
- X-DNS-Prefetch-Control: disable speculative DNS lookups
- Strict-Transport-Security: keep browsers on HTTPS for a year
- Cross-Origin-Opener-Policy: isolate the browsing context
- X-Permitted-Cross-Domain-Policies, X-Download-Options, Origin-Agent-Cluster
  and X-XSS-Protection: 0 (the filter is disabled, CSP replaces it)

These are the defaults helmet applies in Express.

The relay only serves JSON, so the Content-Security-Policy can be strict.
"""

from typing import Callable
import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

DEFAULT_CSP = (
    "default-src 'self'; "
    "base-uri 'self'; "
    "frame-ancestors 'self'; "
    "form-action 'self'; "
    "object-src 'none'"
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add security headers to all HTTP responses.

    Example:
        app.add_middleware(SecurityHeadersMiddleware)
    """

    def __init__(self, app, csp_policy: str | None = None):
        """
        Args:
            app: ASGI application
            csp_policy: Custom CSP policy (if None, uses DEFAULT_CSP)
        """
        super().__init__(app)
        self.headers = {
            "X-Content-Type-Options": "nosniff",
            "X-Frame-Options": "SAMEORIGIN",
            "Referrer-Policy": "no-referrer",
            "Cross-Origin-Resource-Policy": "same-origin",
            "X-DNS-Prefetch-Control": "off",
            "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
            "Cross-Origin-Opener-Policy": "same-origin",
            "X-Permitted-Cross-Domain-Policies": "none",
            "Origin-Agent-Cluster": "?1",
            "X-Download-Options": "noopen",
            "X-XSS-Protection": "0",
            "Content-Security-Policy": csp_policy or DEFAULT_CSP,
        }
        logger.debug("Security headers middleware initialized")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for header, value in self.headers.items():
            # Routes may set their own values
            response.headers.setdefault(header, value)
        return response
