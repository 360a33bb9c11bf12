"""Per-client request limits for the AI and import endpoints."""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request

from material_ai.api.errors import error_response

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Same JSON error shape as every other API error."""
    logger.warning("Rate limit exceeded for %s on %s (%s)", get_remote_address(request), request.url.path, exc.detail)
    return error_response(429, "Rate limit exceeded. Please try again later.", "rate_limited")


def setup_rate_limiting(app):
    """Attach the shared limiter and its 429 handler to the app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    return limiter
