"""Payload builders for node-update requests."""

from typing import Any

from schemas.media import MediaReference
from schemas.payload import NodePayload

from .article_builder import ArticleBuilder
from .builder import DEFAULTS, PayloadBuilder, build_base_payload
from .default_builder import DefaultBuilder
from .page_builder import PageBuilder
from .recipe_builder import RecipeBuilder

# Registry of builders keyed by content type
BUILDERS: dict[str, PayloadBuilder] = {
    builder.content_type: builder
    for builder in (ArticleBuilder(), PageBuilder(), RecipeBuilder())
}

DEFAULT_BUILDER = DefaultBuilder()


def get_builder(content_type: str) -> PayloadBuilder:
    """Return the builder for content_type, or the default builder.

    An empty content_type is built as a page, matching the base payload type.
    """
    return BUILDERS.get(content_type or DEFAULTS["content_type"], DEFAULT_BUILDER)


def build_payload(
    content_type: str,
    base: NodePayload,
    fields: dict[str, Any],
    media: MediaReference | None = None,
) -> dict[str, Any]:
    """Build the node payload for content_type.

    Args:
        content_type: Content type to dispatch on
        base: Shared node fields from build_base_payload()
        fields: Raw request fields
        media: Resolved media reference, or None

    Returns:
        Payload dict for a single node
    """
    return get_builder(content_type).build(base, fields, media)


__all__ = [
    "ArticleBuilder",
    "BUILDERS",
    "DEFAULTS",
    "DefaultBuilder",
    "PageBuilder",
    "PayloadBuilder",
    "RecipeBuilder",
    "build_base_payload",
    "build_payload",
    "get_builder",
]
