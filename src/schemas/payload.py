"""Node payload schemas for the node-update endpoint.

Each payload is dumped with ``exclude_none=True`` before it is sent, so an
unset ``field_media_image`` never reaches the wire as ``null``.
"""

from typing import Literal

from pydantic import BaseModel

from .media import MediaReference


class TextValue(BaseModel):
    """A formatted text field item."""

    value: str
    format: Literal["basic_html"] = "basic_html"


class NodePayload(BaseModel):
    """Fields shared by every node payload.

    Attributes:
        title: Node title, never empty
        status: Published flag
        moderation_state: Content moderation state
        promote: Promoted to front page flag
        sticky: Sticky at top of lists flag
        type: Content type machine name
    """

    title: str
    status: int = 1
    moderation_state: str = "published"
    promote: int = 1
    sticky: int = 0
    type: str


class ArticlePayload(NodePayload):
    type: Literal["article"] = "article"
    body: list[TextValue]
    field_summary: list[TextValue]
    field_tags: list[str] = []
    field_media_image: MediaReference | None = None


class PagePayload(NodePayload):
    type: Literal["page"] = "page"
    field_body: list[TextValue]
    field_media_image: MediaReference | None = None


class RecipePayload(NodePayload):
    """Recipe node payload.

    Times are in minutes. ``field_ingredients`` is a single newline-separated
    string because the recipe type stores ingredients in one text field.
    """

    type: Literal["recipe"] = "recipe"
    field_cooking_time: int | float
    field_preparation_time: int | float
    field_ingredients: str
    field_recipe_instruction: TextValue
    field_number_of_servings: int | float
    field_difficulty: str
    field_summary: TextValue
    field_media_image: MediaReference | None = None
