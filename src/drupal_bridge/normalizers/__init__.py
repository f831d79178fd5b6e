"""Normalizers for loosely-typed values, media results and import responses."""

from .fields import as_number, as_string, as_string_list, get_text, make_snippet
from .import_response import (
    STRATEGIES,
    ExtractionStrategy,
    LogLineStrategy,
    StructuredItemsStrategy,
    normalize_import_response,
)
from .media import find_media_identifier, resolve_media_reference

__all__ = [
    "as_number",
    "as_string",
    "as_string_list",
    "get_text",
    "make_snippet",
    "find_media_identifier",
    "resolve_media_reference",
    "ExtractionStrategy",
    "StructuredItemsStrategy",
    "LogLineStrategy",
    "STRATEGIES",
    "normalize_import_response",
]
