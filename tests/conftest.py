"""Pytest fixtures for drupal-bridge tests."""

import json

import pytest


@pytest.fixture
def site_url():
    """Base URL of the target Drupal site."""
    return "https://umami.example.ddev.site"


@pytest.fixture
def recipe_request():
    """A recipe request as emitted by a create_content tool call."""
    return {
        "content_type": "recipe",
        "title": "Lemon Drizzle Cake",
        "body": "A zesty sponge soaked in lemon syrup.",
        "summary": "Classic British teatime cake.",
        "ingredients": ["225g butter", "225g caster sugar", "4 eggs"],
        "instructions": ["Cream the butter and sugar.", "Beat in the eggs."],
        "cooking_time": 45,
        "prep_time": 20,
        "servings": 8,
        "difficulty": "easy",
    }


@pytest.fixture
def article_request():
    """An article request with list tags."""
    return {
        "content_type": "article",
        "title": "Spring Menu Launch",
        "body": "<p>Our spring menu is here.</p>",
        "summary": "New seasonal dishes.",
        "tags": ["news", "menu"],
    }


@pytest.fixture
def media_upload_result():
    """Media upload result from the image-upload endpoint."""
    return {
        "media_id": 42,
        "fid": 17,
        "uuid": "5a6b7c8d-0000-4000-8000-123456789abc",
        "alt": "A lemon cake on a plate",
        "title": "Lemon cake",
    }


@pytest.fixture
def import_result():
    """Bulk-import response with only a details log."""
    return {
        "created": 2,
        "updated": 0,
        "errors": 1,
        "details": [
            "Created node 19: Test Page",
            "Skipped node: missing title",
            "Created node 20: Another Page",
        ],
    }


@pytest.fixture
def entity_response():
    """Node-update response with Drupal entity-shaped field values."""
    return {
        "data": [
            {
                "nid": [{"value": 31}],
                "type": [{"target_id": "article"}],
                "title": [{"value": "Spring Menu Launch"}],
                "body": [
                    {
                        "value": "Our spring menu is here with twelve new dishes.",
                        "format": "basic_html",
                        "summary": "",
                    }
                ],
            }
        ]
    }


@pytest.fixture
def request_file(tmp_path):
    """Factory writing a JSON document to a temporary file."""

    def _write(data, name="request.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2))
        return path

    return _write
