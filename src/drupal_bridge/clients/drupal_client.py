"""Client for the Drupal bridge module endpoints."""

import logging
import mimetypes
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from schemas.site_info import SiteInfo

from .client import Client
from .exceptions import ResponseParseError, ValidationError

logger = logging.getLogger(__name__)


class DrupalClient(Client):
    """Client for a Drupal site running the bridge module.

    Sends node payloads to the node-update endpoint, bulk-imports nodes and
    uploads images. Payload construction and response normalization happen
    elsewhere; this client only moves JSON back and forth.

    Example:
        config = {"base_url": "https://example.ddev.site"}
        with DrupalClient(config) as client:
            result = client.create_nodes([payload])
    """

    NODE_UPDATE_PATH = "/api/node-update"
    BULK_IMPORT_PATH = "/intelligensi-bridge/bulk-import"
    BULK_EXPORT_PATH = "/api/bulk-export"
    SITE_INFO_PATH = "/intelligensi-bridge/site-info"
    IMAGE_UPLOAD_PATH = "/api/image-upload"

    def fetch(self) -> Any:
        """Export all nodes from the site.

        Returns:
            Decoded bulk export response
        """
        response = self.get(self.BULK_EXPORT_PATH)
        return self._decode(response)

    def fetch_site_info(self) -> SiteInfo:
        """Fetch site name, slogan, email and status.

        Raises:
            ValidationError: If the response does not match the SiteInfo schema
        """
        response = self.get(self.SITE_INFO_PATH)
        data = self._decode(response)
        try:
            return SiteInfo.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                "Site info failed validation",
                errors=[str(err) for err in e.errors()],
            ) from e

    def create_nodes(self, payload: list[dict[str, Any]]) -> Any:
        """Create or update nodes through the node-update endpoint.

        Args:
            payload: List of node payloads (normally a single node)

        Returns:
            Decoded response; the ``data`` member when the site wraps it

        Raises:
            ResponseParseError: If the response body is not valid JSON
            APIError: If the site returns a non-2xx response
            ConnectionError: If the site cannot be reached
        """
        logger.debug(f"POST {self.NODE_UPDATE_PATH} with {len(payload)} node(s)")
        response = self.post(self.NODE_UPDATE_PATH, json=payload)
        result = self._decode(response)

        if isinstance(result, dict) and "data" in result:
            return result["data"]
        return result

    def bulk_import(self, nodes: list[dict[str, Any]]) -> Any:
        """Import nodes through the bulk-import endpoint.

        The bulk-import endpoint may answer with a plain-text status log
        instead of JSON; in that case the text body is returned unchanged.

        Args:
            nodes: Node payloads to import

        Returns:
            Decoded JSON response, or the response text
        """
        logger.debug(f"POST {self.BULK_IMPORT_PATH} with {len(nodes)} node(s)")
        response = self.post(self.BULK_IMPORT_PATH, json={"nodes": nodes})
        return self._decode(response, allow_text=True)

    def upload_image(
        self,
        content: bytes,
        filename: str,
        alt: str = "",
    ) -> Any:
        """Upload an image and return the raw media upload result.

        Args:
            content: Image bytes
            filename: File name sent to the site; its extension picks the MIME type
            alt: Alternative text for the media entity

        Returns:
            Decoded upload result, suitable for resolve_media_reference()
        """
        media_type = mimetypes.guess_type(filename)[0] or "image/png"
        files = {"file": (filename, content, media_type)}
        logger.debug(f"Uploading {filename} ({len(content)} bytes, {media_type})")
        response = self.post(self.IMAGE_UPLOAD_PATH, files=files, data={"alt": alt})
        return self._decode(response)

    def _decode(self, response: httpx.Response, allow_text: bool = False) -> Any:
        """Decode a JSON body; an empty body decodes to an empty dict."""
        text = response.text
        if not text.strip():
            return {}
        try:
            return response.json()
        except ValueError as e:
            if allow_text:
                logger.debug("Response is not JSON, returning text body")
                return text
            raise ResponseParseError(
                f"Failed to parse response from {response.url}", body=text
            ) from e
