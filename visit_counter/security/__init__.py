"""Response header hook and request logging decorator."""

from .decorators import CORS_HEADERS, add_cors_headers, log_api_request

__all__ = ['CORS_HEADERS', 'add_cors_headers', 'log_api_request']
