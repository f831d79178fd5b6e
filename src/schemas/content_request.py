"""Inbound create-content request schema."""

from typing import Any

from pydantic import BaseModel


class ContentRequest(BaseModel):
    """A loosely-typed request to create a single node.

    Only ``content_type`` is declared; every other field (title, body,
    ingredients, tags, ...) is kept as an extra of unknown shape and read
    later through the field extractors.

    Attributes:
        content_type: Content type machine name (article, page, recipe, ...)
    """

    content_type: str

    model_config = {"extra": "allow"}

    @property
    def fields(self) -> dict[str, Any]:
        """All request fields, including ``content_type``, as a plain dict."""
        return {"content_type": self.content_type, **(self.model_extra or {})}
