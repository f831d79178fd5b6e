"""Normalize node-update and bulk-import responses into ImportSummary lists.

Responses come back in several shapes:

    [{"nid": 19, "title": "Test Page", "body": "..."}]
    {"data": [{"nid": [{"value": 19}], "title": [{"value": "Test Page"}]}]}
    {"nid": 19, "title": "Test Page"}
    {"created": 1, "updated": 0, "errors": 0, "details": ["Created node 19: Test Page"]}
    "Created node 19: Test Page\\nCreated node 20: Another Page"

Extraction runs through STRATEGIES in order and stops at the first strategy
that recognizes at least one node. Log-line scraping is last so that a
structured response never reaches it.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Any

from schemas.import_summary import ImportSummary

from .fields import get_text, make_snippet

logger = logging.getLogger(__name__)

ITEM_LIST_KEYS = ("data", "nodes", "items", "results")
IDENTIFIER_KEYS = ("nid", "id")
SNIPPET_KEYS = ("summary", "body", "field_summary", "field_body", "description", "excerpt")
DETAIL_CONTAINER_KEYS = ("results", "data")
UNTITLED = "Untitled"

CREATED_NODE_PATTERN = re.compile(r"Created node (\d+):\s*(.*)")


def node_url(base_url: str, identifier: str) -> str:
    """Build the canonical node URL for an identifier."""
    return f"{base_url.rstrip('/')}/node/{identifier}"


def coerce_items(raw: Any) -> list[Any]:
    """Coerce a raw response to a list of candidate node items.

    Lists are used as-is and a dict carrying its own ``nid``/``id`` is a
    single item, even though Drupal entities hold list-valued fields. Any
    other dict wrapping a list under one of ITEM_LIST_KEYS yields that list;
    the rest are treated as a single item.
    """
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict):
        if extract_identifier(raw) is not None:
            return [raw]
        for key in ITEM_LIST_KEYS:
            if isinstance(raw.get(key), list):
                return raw[key]
        return [raw]
    return []


def extract_identifier(item: dict[str, Any]) -> str | None:
    """Read ``nid`` or ``id`` as a string, accepting entity-style values.

    Handles ``19``, ``"19"``, ``{"value": 19}`` and ``[{"value": 19}]``.
    """
    for key in IDENTIFIER_KEYS:
        value = item.get(key)
        if isinstance(value, list):
            value = value[0] if value else None
        if isinstance(value, dict):
            value = value.get("value")
        if isinstance(value, bool):
            continue
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def extract_title(item: dict[str, Any]) -> str:
    """Read the title from ``title`` (any text shape), then ``label``."""
    title = get_text(item.get("title")).strip()
    if title:
        return title
    label = get_text(item.get("label")).strip()
    return label or UNTITLED


def extract_snippet(item: dict[str, Any]) -> str:
    """Return a snippet from the first SNIPPET_KEYS field with text."""
    for key in SNIPPET_KEYS:
        text = get_text(item.get(key)).strip()
        if text:
            return make_snippet(text)
    return ""


class ExtractionStrategy(ABC):
    """A way of recognizing created nodes in a raw response."""

    name: str

    @abstractmethod
    def extract(self, raw: Any, base_url: str) -> list[ImportSummary]:
        """Extract summaries, returning an empty list if nothing is recognized."""
        pass


class StructuredItemsStrategy(ExtractionStrategy):
    """Reads node objects from arrays, wrapper objects or single objects."""

    name = "structured"

    def extract(self, raw: Any, base_url: str) -> list[ImportSummary]:
        summaries: list[ImportSummary] = []

        for item in coerce_items(raw):
            if not isinstance(item, dict):
                continue
            identifier = extract_identifier(item)
            if identifier is None:
                logger.debug(f"Skipping item without nid/id: {list(item)}")
                continue
            summaries.append(
                ImportSummary(
                    identifier=identifier,
                    title=extract_title(item),
                    snippet=extract_snippet(item),
                    url=node_url(base_url, identifier),
                )
            )

        return summaries


class LogLineStrategy(ExtractionStrategy):
    """Scrapes "Created node <nid>: <title>" lines from status logs.

    Lines that do not match are ignored. Log lines carry no body text, so
    snippets are always empty.
    """

    name = "log_lines"

    def extract(self, raw: Any, base_url: str) -> list[ImportSummary]:
        summaries: list[ImportSummary] = []

        for line in self._lines(raw):
            match = CREATED_NODE_PATTERN.search(line)
            if match is None:
                continue
            identifier, title = match.group(1), match.group(2).strip()
            summaries.append(
                ImportSummary(
                    identifier=identifier,
                    title=title or UNTITLED,
                    snippet="",
                    url=node_url(base_url, identifier),
                )
            )

        return summaries

    def _lines(self, raw: Any) -> list[str]:
        """Collect candidate log lines from a details array or free text."""
        if isinstance(raw, str):
            return raw.splitlines()
        if isinstance(raw, list):
            return [line for line in raw if isinstance(line, str)]
        if not isinstance(raw, dict):
            return []

        details = raw.get("details")
        if details is None:
            for key in DETAIL_CONTAINER_KEYS:
                container = raw.get(key)
                if isinstance(container, dict) and "details" in container:
                    details = container["details"]
                    break

        if isinstance(details, str):
            return details.splitlines()
        if isinstance(details, list):
            return [line for line in details if isinstance(line, str)]
        return []


# Ordered from most to least reliable
STRATEGIES: list[ExtractionStrategy] = [
    StructuredItemsStrategy(),
    LogLineStrategy(),
]


def normalize_import_response(
    raw: Any,
    base_url: str = "",
    strategies: list[ExtractionStrategy] | None = None,
) -> list[ImportSummary]:
    """Normalize a raw import response into a list of ImportSummary records.

    An empty list means nothing importable was recognized; it does not
    distinguish an unparseable response from one that created zero nodes.

    Args:
        raw: Decoded JSON response (list, dict) or free-text response body
        base_url: Site URL used to build node URLs
        strategies: Extraction strategies to try in order (default: STRATEGIES)

    Returns:
        List of ImportSummary records, in response order
    """
    for strategy in strategies if strategies is not None else STRATEGIES:
        summaries = strategy.extract(raw, base_url)
        if summaries:
            logger.debug(f"Recognized {len(summaries)} node(s) via {strategy.name}")
            return summaries

    logger.debug("No importable nodes recognized in response")
    return []
