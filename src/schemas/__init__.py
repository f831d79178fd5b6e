"""Schema definitions for drupal-bridge."""

from .content_request import ContentRequest
from .import_summary import ImportSummary
from .media import MediaReference
from .payload import ArticlePayload, NodePayload, PagePayload, RecipePayload, TextValue
from .site_info import SiteInfo

__all__ = [
    "ArticlePayload",
    "ContentRequest",
    "ImportSummary",
    "MediaReference",
    "NodePayload",
    "PagePayload",
    "RecipePayload",
    "SiteInfo",
    "TextValue",
]
