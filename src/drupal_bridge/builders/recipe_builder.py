"""Recipe payload builder."""

import logging
from typing import Any

from drupal_bridge.normalizers.fields import as_number, as_string, as_string_list, get_text
from schemas.media import MediaReference
from schemas.payload import NodePayload, RecipePayload, TextValue

from .builder import DEFAULTS, PayloadBuilder

logger = logging.getLogger(__name__)


def join_lines(value: Any, default: str) -> str:
    """Join a list-or-scalar field into a newline-separated string.

    Strings pass through unchanged; lists are joined in order; anything
    absent or empty falls back to default.

    Examples:
        >>> join_lines(["2 eggs", "1 cup flour"], "")
        '2 eggs\\n1 cup flour'
        >>> join_lines("2 eggs", "")
        '2 eggs'
    """
    if isinstance(value, str):
        return value or default
    lines = as_string_list(value)
    return "\n".join(lines) if lines else default


class RecipeBuilder(PayloadBuilder):
    """Builds recipe payloads.

    Numeric fields (times, servings) that are missing or not numbers fall
    back to DEFAULTS instead of being sent as null.
    """

    content_type = "recipe"

    def build(
        self,
        base: NodePayload,
        fields: dict[str, Any],
        media: MediaReference | None = None,
    ) -> dict[str, Any]:
        summary = (
            get_text(fields.get("summary"))
            or get_text(fields.get("body"))
            or DEFAULTS["recipe_summary"]
        )

        payload = RecipePayload(
            **self._base_fields(base),
            field_cooking_time=as_number(
                fields.get("cooking_time"), DEFAULTS["cooking_time"]
            ),
            field_preparation_time=as_number(
                fields.get("prep_time"), DEFAULTS["prep_time"]
            ),
            field_ingredients=join_lines(
                fields.get("ingredients"), DEFAULTS["ingredients"]
            ),
            field_recipe_instruction=TextValue(
                value=join_lines(fields.get("instructions"), DEFAULTS["instructions"])
            ),
            field_number_of_servings=as_number(
                fields.get("servings"), DEFAULTS["servings"]
            ),
            field_difficulty=as_string(fields.get("difficulty")) or DEFAULTS["difficulty"],
            field_summary=TextValue(value=summary),
            field_media_image=media,
        )

        logger.debug(f"Built recipe payload '{payload.title}' (media={media is not None})")
        return payload.model_dump(exclude_none=True)
