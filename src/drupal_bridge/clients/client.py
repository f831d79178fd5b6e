"""Base HTTP client shared by the Drupal site clients."""

import logging
from abc import ABC, abstractmethod
from time import sleep
from typing import Any

import httpx

from .exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
)

logger = logging.getLogger(__name__)

# httpx picks Content-Type per request (JSON body or multipart upload)
DEFAULT_HEADERS = {"Accept": "application/json"}

CONFIG_DEFAULTS: dict[str, Any] = {
    "timeout": 30,
    "retry_attempts": 3,
    "retry_delay": 1,
    "verify": True,
}

TRANSIENT_ERRORS = (httpx.ConnectError, httpx.TimeoutException)


class Client(ABC):
    """Base class for clients talking to a single Drupal site.

    Wraps a lazily created httpx.Client. Requests that fail to connect or
    time out are retried; any response that arrives is final, and non-2xx
    responses are raised as APIError subclasses.

    Config keys:
        base_url (required): Site URL; a trailing slash is dropped
        timeout: Request timeout in seconds (default: 30)
        retry_attempts: Attempts per request for transient failures (default: 3)
        retry_delay: Seconds to wait between attempts (default: 1)
        headers: Extra headers merged over DEFAULT_HEADERS
        verify: TLS certificate verification, False for local ddev sites (default: True)
    """

    def __init__(self, config: dict):
        if not config.get("base_url"):
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client: httpx.Client | None = None

    def _setting(self, key: str) -> Any:
        return self._config.get(key, CONFIG_DEFAULTS[key])

    @property
    def base_url(self) -> str:
        return str(self._config["base_url"]).rstrip("/")

    @property
    def timeout(self) -> float:
        return float(self._setting("timeout"))

    @property
    def retry_attempts(self) -> int:
        return int(self._setting("retry_attempts"))

    @property
    def retry_delay(self) -> float:
        return float(self._setting("retry_delay"))

    @property
    def verify(self) -> bool:
        return bool(self._setting("verify"))

    @property
    def headers(self) -> dict[str, str]:
        return {**DEFAULT_HEADERS, **self._config.get("headers", {})}

    @property
    def client(self) -> httpx.Client:
        """The underlying httpx client, created on first use."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers=self.headers,
                timeout=self.timeout,
                verify=self.verify,
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Close the underlying httpx client, if one was created."""
        if self._client is None:
            return
        self._client.close()
        self._client = None

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        """Return successful responses and raise for everything else.

        Raises:
            NotFoundError: For 404 responses, usually a missing bridge route
            RateLimitError: For 429 responses
            APIError: For any other non-2xx response, with the body attached
        """
        if response.is_success:
            return response

        status_code = response.status_code
        if status_code == 404:
            raise NotFoundError(f"No such endpoint on site: {response.url}")
        if status_code == 429:
            raise RateLimitError(f"Site is rate limiting requests: {response.url}")

        logger.debug(f"Error body from {response.url}: {response.text}")
        raise APIError(
            f"Site returned HTTP {status_code}: {response.url}",
            status_code=status_code,
            body=response.text,
        )

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send a request, retrying connection failures and timeouts.

        Args:
            method: HTTP method
            path: Path relative to base_url
            **kwargs: Passed through to httpx.Client.request (json, files, data, ...)

        Returns:
            The successful HTTP response

        Raises:
            ConnectionError: If every attempt failed to get a response
            APIError: If the site answered with a non-2xx status
        """
        attempts = self.retry_attempts
        last_exception: Exception | None = None

        for attempt in range(1, attempts + 1):
            try:
                response = self.client.request(method, path, **kwargs)
            except TRANSIENT_ERRORS as e:
                last_exception = e
                logger.warning(
                    f"{method} {path} failed (attempt {attempt}/{attempts}): "
                    f"{type(e).__name__}: {e}"
                )
                if attempt < attempts:
                    sleep(self.retry_delay)
                continue
            return self._handle_response(response)

        raise ConnectionError(
            f"Connection failed after {attempts} attempts"
        ) from last_exception

    def get(self, path: str, **kwargs) -> httpx.Response:
        return self._request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> httpx.Response:
        return self._request("POST", path, **kwargs)

    @abstractmethod
    def fetch(self, *args, **kwargs) -> Any:
        """Fetch the site's primary resource. Implemented by subclasses."""
        pass
