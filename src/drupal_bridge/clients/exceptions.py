"""Exceptions raised by the Drupal site clients.

    ClientError
    ├── ConnectionError       no response after every retry
    ├── APIError              non-2xx response (status_code, body)
    │   ├── NotFoundError     404
    │   └── RateLimitError    429
    ├── ValidationError       response did not match its schema
    └── ResponseParseError    body was not the JSON it had to be
"""


class ClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConnectionError(ClientError):
    """Raised when the site cannot be reached after all retry attempts."""

    pass


class APIError(ClientError):
    """Raised when the site answers with a non-2xx status.

    Attributes:
        status_code: HTTP status of the response
        body: Response text, often a Drupal error message
    """

    def __init__(self, message: str, status_code: int, body: str = "", *args, **kwargs):
        self.status_code = status_code
        self.body = body
        super().__init__(message, *args, **kwargs)


class NotFoundError(APIError):
    """Raised on 404, usually because the bridge module is not enabled."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class RateLimitError(APIError):
    """Raised on 429."""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, status_code=429)


class ValidationError(ClientError):
    """Raised when a decoded response fails schema validation."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class ResponseParseError(ClientError):
    """Raised when a body that must be JSON cannot be decoded.

    Attributes:
        body: The undecodable response text
    """

    def __init__(self, message: str, body: str = "", *args, **kwargs):
        self.body = body
        super().__init__(message, *args, **kwargs)
