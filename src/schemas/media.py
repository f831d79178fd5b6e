"""Media reference schema embedded in node payloads."""

from typing import Literal

from pydantic import BaseModel


class MediaReference(BaseModel):
    """Canonical reference to an already-uploaded media entity.

    ``target_revision_id`` mirrors ``target_id`` because the node-update
    endpoint requires both when saving a new revision.

    Attributes:
        target_id: Media entity ID
        alt: Alternative text
        title: Image title
        target_revision_id: Revision ID (same value as target_id)
        target_uuid: Media entity UUID, when the upload result carried one
        target_type: Entity type of the target, set alongside target_uuid
    """

    target_id: int
    alt: str
    title: str
    target_revision_id: int | None = None
    target_uuid: str | None = None
    target_type: Literal["media"] | None = None
