"""Base class and shared defaults for node payload builders.

Every builder reads request fields through the field extractors and falls
back to the values in DEFAULTS, so the same missing field gets the same
default regardless of content type.
"""

from abc import ABC, abstractmethod
from typing import Any

from drupal_bridge.normalizers.fields import as_string
from schemas.media import MediaReference
from schemas.payload import NodePayload

DEFAULTS: dict[str, Any] = {
    "body": "No description provided",
    "summary": "",
    "recipe_summary": "No summary provided",
    "instructions": "No instructions provided",
    "ingredients": "",
    "cooking_time": 30,
    "prep_time": 15,
    "servings": 2,
    "difficulty": "medium",
    "content_type": "page",
}


def build_base_payload(fields: dict[str, Any]) -> NodePayload:
    """Build the fields shared by every node payload.

    The title falls back to ``"Untitled <content_type>"`` so the node-update
    endpoint never receives an empty title.

    Args:
        fields: Raw request fields

    Returns:
        NodePayload with the published-and-promoted defaults
    """
    content_type = as_string(fields.get("content_type"))
    fallback_title = f"Untitled {content_type or 'content'}"
    return NodePayload(
        title=as_string(fields.get("title")) or fallback_title,
        type=content_type or DEFAULTS["content_type"],
    )


class PayloadBuilder(ABC):
    """Abstract base class for per-content-type payload builders."""

    content_type: str

    @abstractmethod
    def build(
        self,
        base: NodePayload,
        fields: dict[str, Any],
        media: MediaReference | None = None,
    ) -> dict[str, Any]:
        """Build a JSON-ready node payload.

        Args:
            base: Shared node fields from build_base_payload()
            fields: Raw request fields
            media: Resolved media reference, or None to omit field_media_image

        Returns:
            Payload dict ready to be sent to the node-update endpoint
        """
        pass

    @staticmethod
    def _base_fields(base: NodePayload) -> dict[str, Any]:
        """Base payload fields minus ``type``, which each builder sets itself."""
        return base.model_dump(exclude={"type"})
