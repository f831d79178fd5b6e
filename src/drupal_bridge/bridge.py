"""Content bridge tying payload building, sending and normalization together.

    request + media candidate
        -> resolve_media_reference()
        -> build_base_payload() / build_payload()
        -> DrupalClient.create_nodes()
        -> normalize_import_response()
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from drupal_bridge.builders import build_base_payload, build_payload
from drupal_bridge.clients import DrupalClient
from drupal_bridge.normalizers.fields import as_string
from drupal_bridge.normalizers.import_response import normalize_import_response
from drupal_bridge.normalizers.media import resolve_media_reference
from schemas.content_request import ContentRequest
from schemas.import_summary import ImportSummary

logger = logging.getLogger(__name__)


@dataclass
class CreationResult:
    """Outcome of a create-content request.

    Attributes:
        node: Decoded node-update response
        media: Media candidate that was offered, unchanged
        summaries: Display summaries for the created node(s)
    """

    node: Any
    media: Any = None
    summaries: list[ImportSummary] = field(default_factory=list)


def _fields(request: ContentRequest | dict[str, Any]) -> dict[str, Any]:
    if isinstance(request, ContentRequest):
        return request.fields
    return dict(request)


def build_node_payload(
    request: ContentRequest | dict[str, Any],
    media_candidate: Any = None,
) -> list[dict[str, Any]]:
    """Build the node-update request body for a single content request.

    Args:
        request: ContentRequest or raw request dict
        media_candidate: Raw media upload result, if an image was uploaded

    Returns:
        A one-element list holding the node payload
    """
    fields = _fields(request)
    content_type = as_string(fields.get("content_type"))
    base = build_base_payload(fields)
    media = resolve_media_reference(media_candidate, base.title)
    return [build_payload(content_type, base, fields, media)]


class ContentBridge:
    """Creates content on a Drupal site and summarizes what was created.

    Errors from the client (connection failures, non-2xx responses) are not
    caught here; callers decide how to report them.

    Example:
        with DrupalClient({"base_url": site_url}) as client:
            bridge = ContentBridge(client)
            result = bridge.create_content({"content_type": "page", "title": "Home"})
    """

    def __init__(self, client: DrupalClient):
        self.client = client

    @property
    def site_url(self) -> str:
        return self.client.base_url

    def build(
        self,
        request: ContentRequest | dict[str, Any],
        media_candidate: Any = None,
    ) -> list[dict[str, Any]]:
        """Build the payload without sending it."""
        return build_node_payload(request, media_candidate)

    def create_content(
        self,
        request: ContentRequest | dict[str, Any],
        media_candidate: Any = None,
    ) -> CreationResult:
        """Build, send and summarize a single content request.

        Args:
            request: ContentRequest or raw request dict
            media_candidate: Raw media upload result, if any

        Returns:
            CreationResult with the raw response and normalized summaries
        """
        payload = self.build(request, media_candidate)
        node_type = payload[0]["type"]
        logger.info(f"Creating {node_type} '{payload[0]['title']}' on {self.site_url}")

        node = self.client.create_nodes(payload)
        summaries = normalize_import_response(node, self.site_url)

        if not summaries:
            logger.warning(f"No created nodes recognized in response for {node_type}")

        return CreationResult(node=node, media=media_candidate, summaries=summaries)

    def import_nodes(self, nodes: list[dict[str, Any]]) -> list[ImportSummary]:
        """Bulk-import node payloads and summarize the result."""
        logger.info(f"Importing {len(nodes)} node(s) into {self.site_url}")
        response = self.client.bulk_import(nodes)
        return normalize_import_response(response, self.site_url)
