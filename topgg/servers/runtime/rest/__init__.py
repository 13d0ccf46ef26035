"""REST runtime abstractions."""

from .http_client import HTTPClient
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner, build_url

__all__ = [
    "HTTPClient",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "build_url",
]
