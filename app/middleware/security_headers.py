#!/usr/bin/env python3

"""
Security headers middleware for the webhooks API.

Every response (JSON or error) gets the browser hardening headers enabled in
settings. Deployments behind a proxy that already sets them can switch the
whole middleware off with ``SECURITY_HEADERS_ENABLED=false``.
"""

import logging
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


def build_security_headers(config) -> dict[str, str]:
    """
    Return the header name/value pairs enabled by ``config``.

    Args:
        config: Settings object carrying the ``security_header_*`` fields

    Returns:
        Mapping of header name to value; empty when the middleware is disabled
    """
    if not config.security_headers_enabled:
        return {}

    headers: dict[str, str] = {}
    if config.security_header_hsts_enabled:
        headers["Strict-Transport-Security"] = config.security_header_hsts_value
    if config.security_header_csp_enabled:
        headers["Content-Security-Policy"] = config.security_header_csp_value
    if config.security_header_x_frame_options_enabled:
        headers["X-Frame-Options"] = config.security_header_x_frame_options_value
    if config.security_header_x_content_type_options_enabled:
        headers["X-Content-Type-Options"] = "nosniff"
    return headers


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add the configured security headers to every HTTP response."""

    def __init__(self, app, config):
        super().__init__(app)
        self.headers = build_security_headers(config)

        if self.headers:
            logger.info("Security headers middleware enabled: %s", ", ".join(self.headers))
        else:
            logger.info("Security headers middleware disabled (likely handled by reverse proxy)")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response
