"""Basic page payload builder."""

import logging
from typing import Any

from drupal_bridge.normalizers.fields import get_text
from schemas.media import MediaReference
from schemas.payload import NodePayload, PagePayload, TextValue

from .builder import DEFAULTS, PayloadBuilder

logger = logging.getLogger(__name__)


class PageBuilder(PayloadBuilder):
    """Builds basic page payloads."""

    content_type = "page"

    def build(
        self,
        base: NodePayload,
        fields: dict[str, Any],
        media: MediaReference | None = None,
    ) -> dict[str, Any]:
        body = (
            get_text(fields.get("body"))
            or get_text(fields.get("summary"))
            or DEFAULTS["body"]
        )

        payload = PagePayload(
            **self._base_fields(base),
            field_body=[TextValue(value=body)],
            field_media_image=media,
        )

        logger.debug(f"Built page payload '{payload.title}' (media={media is not None})")
        return payload.model_dump(exclude_none=True)
