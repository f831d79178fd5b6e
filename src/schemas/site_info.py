"""Site information schema returned by the bridge module."""

from pydantic import BaseModel


class SiteInfo(BaseModel):
    """Basic Drupal site configuration."""

    name: str
    slogan: str | None = None
    email: str | None = None
    status: bool = True

    model_config = {"extra": "allow"}
