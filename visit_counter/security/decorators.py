"""Cross-origin headers and request logging for the HTTP endpoint."""

import logging
import time
from functools import wraps
from typing import Callable

from flask import request

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': '*',
    'Access-Control-Allow-Headers': '*',
}


def add_cors_headers(response):
    """after_request hook: allow any origin, method and header.

    Registered on the app so that responses Flask builds itself (404, 405,
    unhandled 500) carry the headers too.
    """
    response.headers.update(CORS_HEADERS)
    return response


def log_api_request():
    """Decorator logging method, path and handling time of each request."""
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            start_time = time.time()
            try:
                return f(*args, **kwargs)
            finally:
                duration = time.time() - start_time
                logger.info(
                    f"{request.method} {request.path} - {duration:.3f}s",
                    extra={"ip": request.remote_addr, "response_time": duration}
                )

        return decorated_function
    return decorator
