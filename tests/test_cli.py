"""Tests for the CLI module."""

import json
from unittest.mock import MagicMock, patch

import pytest

from drupal_bridge.cli import main


@pytest.fixture(autouse=True)
def no_site_url_env(monkeypatch):
    monkeypatch.delenv("DRUPAL_SITE_URL", raising=False)


def mock_drupal_client(site_url):
    mock_client = MagicMock()
    mock_client.__enter__ = MagicMock(return_value=mock_client)
    mock_client.__exit__ = MagicMock(return_value=False)
    mock_client.base_url = site_url
    return mock_client


class TestCLIBuildPayload:
    """Tests for the build-payload command."""

    def test_build_payload_requires_request(self, capsys):
        """build-payload requires --request."""
        with pytest.raises(SystemExit):
            main(["build-payload"])

    def test_build_payload_prints_payload(self, request_file, recipe_request, capsys):
        """build-payload prints a one-element payload list."""
        path = request_file(recipe_request)

        result = main(["build-payload", "--request", str(path)])

        assert result == 0
        payload = json.loads(capsys.readouterr().out)
        assert len(payload) == 1
        assert payload[0]["type"] == "recipe"
        assert payload[0]["field_ingredients"] == "225g butter\n225g caster sugar\n4 eggs"

    def test_build_payload_with_media(
        self, request_file, article_request, media_upload_result, capsys
    ):
        """build-payload attaches the media reference."""
        request = request_file(article_request)
        media = request_file(media_upload_result, name="media.json")

        result = main(["build-payload", "--request", str(request), "--media", str(media)])

        assert result == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload[0]["field_media_image"]["target_id"] == 42
        assert payload[0]["field_media_image"]["target_type"] == "media"

    def test_build_payload_from_tool_call(self, request_file, capsys):
        """build-payload --tool-call parses create_content arguments."""
        path = request_file({
            "function": {
                "name": "create_content",
                "arguments": json.dumps({"content_type": "page", "title": "About"}),
            }
        })

        result = main(["build-payload", "--request", str(path), "--tool-call"])

        assert result == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload[0]["title"] == "About"
        assert payload[0]["type"] == "page"

    def test_build_payload_invalid_tool_call(self, request_file, caplog):
        """build-payload reports tool-call errors."""
        path = request_file({"function": {"name": "create_content", "arguments": ""}})

        result = main(["build-payload", "--request", str(path), "--tool-call"])

        assert result == 1
        assert "Failed to build payload" in caplog.text

    def test_build_payload_missing_file(self, tmp_path, caplog):
        """build-payload fails for a missing request file."""
        result = main(["build-payload", "--request", str(tmp_path / "missing.json")])

        assert result == 1
        assert "Failed to build payload" in caplog.text


class TestCLICreateContent:
    """Tests for the create-content command."""

    def test_create_content_requires_site_url(self, request_file, article_request, caplog):
        """create-content fails without a site URL."""
        path = request_file(article_request)

        result = main(["create-content", "--request", str(path)])

        assert result == 1
        assert "No site URL provided" in caplog.text

    @patch("drupal_bridge.cli.DrupalClient")
    def test_create_content_success(
        self, mock_client_class, request_file, article_request, entity_response,
        site_url, capsys,
    ):
        """create-content sends the payload and prints summaries."""
        mock_client = mock_drupal_client(site_url)
        mock_client.create_nodes.return_value = entity_response["data"]
        mock_client_class.return_value = mock_client
        path = request_file(article_request)

        result = main(["create-content", "--request", str(path), "--site-url", site_url])

        assert result == 0
        config = mock_client_class.call_args.args[0]
        assert config["base_url"] == site_url
        assert config["headers"]["User-Agent"].startswith("drupal-bridge/")
        summaries = json.loads(capsys.readouterr().out)
        assert summaries[0]["identifier"] == "31"
        assert summaries[0]["url"] == f"{site_url}/node/31"

    @patch("drupal_bridge.cli.DrupalClient")
    def test_create_content_site_url_from_env(
        self, mock_client_class, request_file, article_request, site_url, monkeypatch
    ):
        """create-content reads DRUPAL_SITE_URL when --site-url is absent."""
        monkeypatch.setenv("DRUPAL_SITE_URL", f"{site_url}/")
        mock_client = mock_drupal_client(site_url)
        mock_client.create_nodes.return_value = []
        mock_client_class.return_value = mock_client
        path = request_file(article_request)

        result = main(["create-content", "--request", str(path)])

        assert result == 0
        assert mock_client_class.call_args.args[0]["base_url"] == site_url

    @patch("drupal_bridge.cli.DrupalClient")
    def test_create_content_handles_exception(
        self, mock_client_class, request_file, article_request, site_url, caplog
    ):
        """create-content reports client errors."""
        mock_client = mock_drupal_client(site_url)
        mock_client.create_nodes.side_effect = Exception("Connection refused")
        mock_client_class.return_value = mock_client
        path = request_file(article_request)

        result = main(["create-content", "--request", str(path), "--site-url", site_url])

        assert result == 1
        assert "Failed to create content" in caplog.text
        assert "Connection refused" in caplog.text


class TestCLINormalizeResponse:
    """Tests for the normalize-response command."""

    def test_normalize_missing_file(self, tmp_path, caplog):
        """normalize-response fails for a missing file."""
        result = main(["normalize-response", "--response", str(tmp_path / "missing.json")])

        assert result == 1
        assert "Response file not found" in caplog.text

    def test_normalize_json_response(self, request_file, import_result, site_url, capsys):
        """normalize-response summarizes a JSON bulk-import result."""
        path = request_file(import_result, name="response.json")

        result = main(["normalize-response", "--response", str(path), "--site-url", site_url])

        assert result == 0
        summaries = json.loads(capsys.readouterr().out)
        assert [s["identifier"] for s in summaries] == ["19", "20"]
        assert summaries[1]["url"] == f"{site_url}/node/20"

    def test_normalize_text_response(self, tmp_path, capsys):
        """normalize-response treats non-JSON files as text logs."""
        path = tmp_path / "response.log"
        path.write_text("Created node 7: Welcome\nDone.\n")

        result = main(["normalize-response", "--response", str(path)])

        assert result == 0
        summaries = json.loads(capsys.readouterr().out)
        assert summaries == [
            {"identifier": "7", "title": "Welcome", "snippet": "", "url": "/node/7"}
        ]

    def test_normalize_unrecognized_response(self, request_file, capsys, caplog):
        """normalize-response prints an empty list and warns."""
        path = request_file({"status": "ok"}, name="response.json")

        result = main(["normalize-response", "--response", str(path)])

        assert result == 0
        assert json.loads(capsys.readouterr().out) == []
        assert "No importable nodes recognized" in caplog.text


class TestCLIImportNodes:
    """Tests for the import-nodes command."""

    def test_import_nodes_requires_site_url(self, request_file, caplog):
        """import-nodes fails without a site URL."""
        path = request_file([{"title": "Test Page"}], name="nodes.json")

        result = main(["import-nodes", "--nodes", str(path)])

        assert result == 1
        assert "No site URL provided" in caplog.text

    @patch("drupal_bridge.cli.DrupalClient")
    def test_import_nodes_wraps_single_node(
        self, mock_client_class, request_file, import_result, site_url, capsys
    ):
        """import-nodes accepts a single node object."""
        mock_client = mock_drupal_client(site_url)
        mock_client.bulk_import.return_value = import_result
        mock_client_class.return_value = mock_client
        node = {"title": "Test Page", "type": "page"}
        path = request_file(node, name="nodes.json")

        result = main(["import-nodes", "--nodes", str(path), "--site-url", site_url])

        assert result == 0
        mock_client.bulk_import.assert_called_once_with([node])
        summaries = json.loads(capsys.readouterr().out)
        assert len(summaries) == 2

    @patch("drupal_bridge.cli.DrupalClient")
    def test_import_nodes_handles_exception(
        self, mock_client_class, request_file, site_url, caplog
    ):
        """import-nodes reports client errors."""
        mock_client = mock_drupal_client(site_url)
        mock_client.bulk_import.side_effect = Exception("HTTP 500")
        mock_client_class.return_value = mock_client
        path = request_file([{"title": "Test Page"}], name="nodes.json")

        result = main(["import-nodes", "--nodes", str(path), "--site-url", site_url])

        assert result == 1
        assert "Failed to import nodes" in caplog.text


class TestCLIToolSchema:
    """Tests for the tool-schema command."""

    def test_prints_tool_definition(self, capsys):
        """tool-schema prints the create_content tool."""
        result = main(["tool-schema"])

        assert result == 0
        tool = json.loads(capsys.readouterr().out)
        assert tool["function"]["name"] == "create_content"


class TestCLIMain:
    """Tests for main CLI entry point."""

    def test_no_command_shows_help(self, capsys):
        """No command shows help."""
        result = main([])

        assert result == 0
        captured = capsys.readouterr()
        assert "usage:" in captured.out.lower()

    def test_help_flag(self, capsys):
        """--help shows help and exits."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])

        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "build-payload" in captured.out
        assert "normalize-response" in captured.out
