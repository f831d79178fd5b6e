"""Fallback builder for content types without a dedicated schema."""

import logging
from typing import Any

from schemas.media import MediaReference
from schemas.payload import NodePayload

from .builder import PayloadBuilder

logger = logging.getLogger(__name__)


class DefaultBuilder(PayloadBuilder):
    """Builds a minimal payload for unrecognized content types.

    Only the base fields are sent; ``type`` is passed through unvalidated so
    the target site decides whether the bundle exists. Media is not attached
    because there is no known image field for an arbitrary bundle.
    """

    content_type = ""

    def build(
        self,
        base: NodePayload,
        fields: dict[str, Any],
        media: MediaReference | None = None,
    ) -> dict[str, Any]:
        if media is not None:
            logger.debug(f"Ignoring media for content type '{base.type}'")
        return base.model_dump()
