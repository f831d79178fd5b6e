"""Import summary schema returned to callers after node creation."""

from pydantic import BaseModel


class ImportSummary(BaseModel):
    """Display fields for one created or updated node.

    Attributes:
        identifier: Node ID as a string
        title: Node title
        snippet: Short preview of the body or summary (may be empty)
        url: Canonical node URL on the target site
    """

    identifier: str
    title: str
    snippet: str = ""
    url: str
