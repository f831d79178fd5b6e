"""Network clients for Drupal sites."""

from .client import Client
from .drupal_client import DrupalClient
from .exceptions import (
    APIError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ResponseParseError,
    ValidationError,
)

__all__ = [
    "Client",
    "DrupalClient",
    "ClientError",
    "ConnectionError",
    "APIError",
    "RateLimitError",
    "NotFoundError",
    "ResponseParseError",
    "ValidationError",
]
