"""Field extractors for loosely-typed request and response values.

Create-content requests arrive from LLM tool calls or hand-built API calls,
and node responses come back in several shapes, so every value is read
through one of these total functions instead of being trusted directly.
None of them raise.
"""

import math
from typing import Any

SNIPPET_LENGTH = 25
ELLIPSIS = "..."


def as_string(value: Any, default: str = "") -> str:
    """Return value if it is already a string, otherwise default.

    Examples:
        >>> as_string("Home", "Untitled")
        'Home'
        >>> as_string(42, "Untitled")
        'Untitled'
    """
    return value if isinstance(value, str) else default


def as_number(value: Any, default: int | float = 0) -> int | float:
    """Return value if it is a finite int or float, otherwise default.

    Booleans are not treated as numbers.

    Examples:
        >>> as_number(4, 2)
        4
        >>> as_number("4", 2)
        2
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and not math.isfinite(value):
        return default
    return value


def as_string_list(value: Any) -> list[str]:
    """Normalize a list-or-scalar value to a list of strings.

    Lists and tuples have every element converted with ``str()`` (``None``
    elements become ``""``), a single scalar becomes a one-element list, and
    ``None`` becomes an empty list.

    Examples:
        >>> as_string_list(["salt", "pepper"])
        ['salt', 'pepper']
        >>> as_string_list("news")
        ['news']
        >>> as_string_list(None)
        []
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return ["" if item is None else str(item) for item in value]
    return [str(value)]


def get_text(value: Any) -> str:
    """Extract display text from any of the accepted text shapes.

    Accepted shapes:
        - ``"text"``
        - ``["text", ...]`` or ``[{"value": "text"}, ...]``: first usable element
        - ``{"value": "text"}`` or ``{"summary": "text"}``
        - ``19``: numbers are stringified

    Anything else yields an empty string.

    Examples:
        >>> get_text([{"value": "<p>Hi</p>", "format": "basic_html"}])
        '<p>Hi</p>'
    """
    match value:
        case bool():
            return ""
        case str():
            return value
        case int() | float():
            return str(value)
        case list() | tuple():
            for item in value:
                if isinstance(item, str):
                    return item
                if isinstance(item, dict) and isinstance(item.get("value"), str):
                    return item["value"]
            return ""
        case dict():
            if isinstance(value.get("value"), str):
                return value["value"]
            if isinstance(value.get("summary"), str):
                return value["summary"]
            return ""
        case _:
            return ""


def make_snippet(text: str, limit: int = SNIPPET_LENGTH) -> str:
    """Trim text and truncate it to ``limit`` characters plus an ellipsis.

    Examples:
        >>> make_snippet("  Short  ")
        'Short'
        >>> make_snippet("A considerably longer body of text")
        'A considerably longer bod...'
    """
    text = text.strip()
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text
