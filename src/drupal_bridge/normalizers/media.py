"""Resolve media upload results into canonical media references.

The image upload endpoint and older media services disagree on where the
media ID lives, so the identifier is searched across several keys:

    {"media_id": 42}
    {"fid": "42"}
    {"id": 42}
    {"data": {"id": 42, "alt": "..."}}
"""

import logging
import math
from typing import Any

from schemas.media import MediaReference

from .fields import as_string

logger = logging.getLogger(__name__)

IDENTIFIER_KEYS = ("media_id", "fid", "id")
DEFAULT_MEDIA_LABEL = "Image"


def _coerce_identifier(value: Any) -> int | None:
    """Coerce a candidate identifier to a positive int, or None if unusable."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            value = float(value)
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        value = int(value)
    return value if value > 0 else None


def find_media_identifier(candidate: dict[str, Any]) -> int | None:
    """Find the first usable identifier in priority order.

    Searches ``media_id``, ``fid``, ``id`` and then ``data.id``. A key that
    is present but holds ``0``, an empty string or a non-numeric value is
    skipped and the search moves on to the next key.

    Args:
        candidate: Raw media upload result

    Returns:
        The identifier as an int, or None if no key resolves
    """
    for key in IDENTIFIER_KEYS:
        identifier = _coerce_identifier(candidate.get(key))
        if identifier is not None:
            return identifier

    data = candidate.get("data")
    if isinstance(data, dict):
        return _coerce_identifier(data.get("id"))
    return None


def _lookup(candidate: dict[str, Any], key: str) -> str:
    """Read a non-empty string from the candidate, then from its data object."""
    value = as_string(candidate.get(key))
    if value:
        return value
    data = candidate.get("data")
    if isinstance(data, dict):
        return as_string(data.get(key))
    return ""


def resolve_media_reference(
    candidate: Any, fallback_title: str = ""
) -> MediaReference | None:
    """Build a MediaReference from an arbitrary media upload result.

    ``alt`` and ``title`` each fall back to the other, then to
    ``fallback_title``, then to ``"Image"``. A candidate without a usable
    identifier resolves to None so callers omit the media field entirely.

    Args:
        candidate: Media upload result of unknown shape
        fallback_title: Label to use when the candidate has no alt or title

    Returns:
        MediaReference, or None when no identifier is found

    Examples:
        >>> resolve_media_reference({"fid": "42"}, "Photo").model_dump(exclude_none=True)
        {'target_id': 42, 'alt': 'Photo', 'title': 'Photo', 'target_revision_id': 42}
    """
    if not isinstance(candidate, dict):
        logger.debug(f"Media candidate is not an object: {type(candidate).__name__}")
        return None

    identifier = find_media_identifier(candidate)
    if identifier is None:
        logger.debug(f"Media candidate has no usable identifier: {candidate}")
        return None

    alt = _lookup(candidate, "alt")
    title = _lookup(candidate, "title")
    fallback = as_string(fallback_title) or DEFAULT_MEDIA_LABEL

    reference = MediaReference(
        target_id=identifier,
        target_revision_id=identifier,
        alt=alt or title or fallback,
        title=title or alt or fallback,
    )

    uuid = _lookup(candidate, "uuid")
    if uuid:
        reference.target_uuid = uuid
        reference.target_type = "media"

    logger.debug(f"Resolved media reference {reference.target_id}")
    return reference
