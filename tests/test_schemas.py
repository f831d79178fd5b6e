"""Tests for schema definitions."""

import pytest
from pydantic import ValidationError

from schemas import (
    ArticlePayload,
    ContentRequest,
    ImportSummary,
    MediaReference,
    NodePayload,
    PagePayload,
    RecipePayload,
    SiteInfo,
    TextValue,
)


class TestContentRequest:
    """Tests for ContentRequest."""

    def test_keeps_extra_fields(self, recipe_request):
        """Undeclared fields are kept as-is."""
        request = ContentRequest.model_validate(recipe_request)

        assert request.content_type == "recipe"
        assert request.fields["ingredients"] == recipe_request["ingredients"]
        assert request.fields["cooking_time"] == 45

    def test_requires_content_type(self):
        """content_type is required."""
        with pytest.raises(ValidationError):
            ContentRequest.model_validate({"title": "Home"})


class TestNodePayload:
    """Tests for node payload models."""

    def test_publishing_defaults(self):
        """Nodes are published and promoted by default."""
        node = NodePayload(title="Home", type="page")

        assert node.status == 1
        assert node.moderation_state == "published"
        assert node.promote == 1
        assert node.sticky == 0

    def test_text_value_format(self):
        """Text values default to basic_html."""
        assert TextValue(value="Hello").model_dump() == {
            "value": "Hello",
            "format": "basic_html",
        }

    def test_media_omitted_when_unset(self):
        """An unset media field is not dumped."""
        page = PagePayload(title="Home", field_body=[TextValue(value="Hello")])

        assert "field_media_image" not in page.model_dump(exclude_none=True)

    def test_payload_types_are_fixed(self):
        """Each payload carries its own content type."""
        article = ArticlePayload(
            title="News",
            body=[TextValue(value="b")],
            field_summary=[TextValue(value="")],
        )

        assert article.type == "article"
        with pytest.raises(ValidationError):
            ArticlePayload(
                title="News",
                type="page",
                body=[TextValue(value="b")],
                field_summary=[TextValue(value="")],
            )

    def test_recipe_requires_fields(self):
        """Recipe payloads need every recipe field."""
        with pytest.raises(ValidationError):
            RecipePayload(title="Soup")


class TestMediaReference:
    """Tests for MediaReference."""

    def test_optional_fields_omitted(self):
        """uuid and target_type are dropped when unset."""
        reference = MediaReference(target_id=5, alt="a", title="t", target_revision_id=5)

        assert reference.model_dump(exclude_none=True) == {
            "target_id": 5,
            "alt": "a",
            "title": "t",
            "target_revision_id": 5,
        }

    def test_target_type_is_media(self):
        """target_type only accepts media."""
        with pytest.raises(ValidationError):
            MediaReference(target_id=5, alt="a", title="t", target_type="file")


class TestImportSummary:
    """Tests for ImportSummary."""

    def test_snippet_defaults_empty(self):
        summary = ImportSummary(identifier="19", title="Test Page", url="/node/19")

        assert summary.snippet == ""


class TestSiteInfo:
    """Tests for SiteInfo."""

    def test_site_info(self):
        """Known fields are typed and extras kept."""
        info = SiteInfo.model_validate(
            {"name": "Umami", "slogan": "Food", "default_langcode": "en"}
        )

        assert info.name == "Umami"
        assert info.status is True
        assert info.model_extra == {"default_langcode": "en"}

    def test_requires_name(self):
        with pytest.raises(ValidationError):
            SiteInfo.model_validate({"slogan": "Food"})
