"""Article payload builder."""

import logging
from typing import Any

from drupal_bridge.normalizers.fields import as_string_list, get_text
from schemas.media import MediaReference
from schemas.payload import ArticlePayload, NodePayload, TextValue

from .builder import DEFAULTS, PayloadBuilder

logger = logging.getLogger(__name__)


class ArticleBuilder(PayloadBuilder):
    """Builds article payloads.

    Body and summary may arrive as strings or field items. The body falls
    back to the summary when no body is given, and tags may be
    a list or a single scalar.
    """

    content_type = "article"

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
        summary = get_text(fields.get("summary")) or DEFAULTS["summary"]

        payload = ArticlePayload(
            **self._base_fields(base),
            body=[TextValue(value=body)],
            field_summary=[TextValue(value=summary)],
            field_tags=as_string_list(fields.get("tags")),
            field_media_image=media,
        )

        logger.debug(
            f"Built article payload '{payload.title}' "
            f"({len(payload.field_tags)} tags, media={media is not None})"
        )
        return payload.model_dump(exclude_none=True)
