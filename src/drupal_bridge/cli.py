"""Command-line interface for drupal-bridge."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from drupal_bridge import __version__
from drupal_bridge.bridge import ContentBridge, build_node_payload
from drupal_bridge.clients import DrupalClient
from drupal_bridge.normalizers.import_response import normalize_import_response
from drupal_bridge.tools import CREATE_CONTENT_TOOL, parse_tool_call
from schemas.content_request import ContentRequest
from schemas.import_summary import ImportSummary

SITE_URL_ENV = "DRUPAL_SITE_URL"
USER_AGENT = f"drupal-bridge/{__version__}"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def resolve_site_url(args: argparse.Namespace) -> str:
    """Return --site-url, falling back to the DRUPAL_SITE_URL environment variable."""
    return (args.site_url or os.environ.get(SITE_URL_ENV, "")).rstrip("/")


def read_json(path: Path) -> Any:
    """Read and decode a JSON file."""
    return json.loads(path.read_text(encoding="utf-8"))


def load_request(args: argparse.Namespace) -> ContentRequest | dict[str, Any]:
    """Load a content request file, parsing it as a tool call if requested."""
    data = read_json(args.request)
    if args.tool_call:
        return parse_tool_call(data)
    return data


def load_media(args: argparse.Namespace) -> Any:
    """Load the optional media upload result file."""
    if args.media is None:
        return None
    return read_json(args.media)


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


def dump_summaries(summaries: list[ImportSummary]) -> list[dict[str, Any]]:
    return [summary.model_dump() for summary in summaries]


def client_config(site_url: str) -> dict[str, Any]:
    return {
        "base_url": site_url,
        "headers": {"User-Agent": USER_AGENT},
    }


def build_payload_command(args: argparse.Namespace) -> int:
    """Execute the build-payload command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        payload = build_node_payload(load_request(args), load_media(args))
    except Exception as e:
        logger.error(f"Failed to build payload: {e}")
        return 1

    print_json(payload)
    return 0


def create_content(args: argparse.Namespace) -> int:
    """Execute the create-content command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    site_url = resolve_site_url(args)
    if not site_url:
        logger.error(f"No site URL provided. Pass --site-url or set {SITE_URL_ENV}")
        return 1

    try:
        request = load_request(args)
        media = load_media(args)

        with DrupalClient(client_config(site_url)) as client:
            result = ContentBridge(client).create_content(request, media)

        logger.info(f"Created {len(result.summaries)} node(s) on {site_url}")
        for summary in result.summaries:
            logger.info(f"  {summary.identifier}: {summary.title} ({summary.url})")

        print_json(dump_summaries(result.summaries))
        return 0

    except Exception as e:
        logger.error(f"Failed to create content: {e}")
        return 1


def normalize_response(args: argparse.Namespace) -> int:
    """Execute the normalize-response command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    response_path = args.response
    if not response_path.exists():
        logger.error(f"Response file not found: {response_path}")
        return 1

    text = response_path.read_text(encoding="utf-8")
    try:
        raw = json.loads(text)
    except json.JSONDecodeError:
        logger.debug("Response file is not JSON, treating it as a text log")
        raw = text

    summaries = normalize_import_response(raw, resolve_site_url(args))
    if not summaries:
        logger.warning("No importable nodes recognized in response")

    print_json(dump_summaries(summaries))
    return 0


def import_nodes(args: argparse.Namespace) -> int:
    """Execute the import-nodes command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    site_url = resolve_site_url(args)
    if not site_url:
        logger.error(f"No site URL provided. Pass --site-url or set {SITE_URL_ENV}")
        return 1

    try:
        nodes = read_json(args.nodes)
        if not isinstance(nodes, list):
            nodes = [nodes]

        with DrupalClient(client_config(site_url)) as client:
            summaries = ContentBridge(client).import_nodes(nodes)

        logger.info(f"Imported {len(summaries)} of {len(nodes)} node(s)")
        print_json(dump_summaries(summaries))
        return 0

    except Exception as e:
        logger.error(f"Failed to import nodes: {e}")
        return 1


def tool_schema(args: argparse.Namespace) -> int:
    """Execute the tool-schema command."""
    print_json(CREATE_CONTENT_TOOL)
    return 0


def add_site_url_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--site-url",
        default=None,
        help=f"Base URL of the Drupal site (default: ${SITE_URL_ENV})",
    )


def add_request_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--request",
        type=Path,
        required=True,
        help="Path to a JSON content request",
    )
    parser.add_argument(
        "--media",
        type=Path,
        default=None,
        help="Path to a JSON media upload result to attach",
    )
    parser.add_argument(
        "--tool-call",
        action="store_true",
        help="Treat --request as an LLM create_content tool call",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="drupal-bridge",
        description="Build Drupal node payloads and summarize import responses",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    build_parser = subparsers.add_parser(
        "build-payload",
        help="Build a node-update payload without sending it",
        description="Build the node-update request body for a content request and print it as JSON.",
    )
    add_request_arguments(build_parser)
    build_parser.set_defaults(func=build_payload_command)

    create_parser = subparsers.add_parser(
        "create-content",
        help="Create a node on a Drupal site",
        description="Build a node payload, send it to the node-update endpoint and print summaries of the created nodes.",
    )
    add_request_arguments(create_parser)
    add_site_url_argument(create_parser)
    create_parser.set_defaults(func=create_content)

    normalize_parser = subparsers.add_parser(
        "normalize-response",
        help="Summarize a saved node-update or bulk-import response",
        description="Read a saved JSON or plain-text import response and print uniform node summaries.",
    )
    normalize_parser.add_argument(
        "--response",
        type=Path,
        required=True,
        help="Path to the saved response body",
    )
    add_site_url_argument(normalize_parser)
    normalize_parser.set_defaults(func=normalize_response)

    import_parser = subparsers.add_parser(
        "import-nodes",
        help="Bulk-import node payloads into a Drupal site",
        description="Send a JSON list of node payloads to the bulk-import endpoint and print summaries of the imported nodes.",
    )
    import_parser.add_argument(
        "--nodes",
        type=Path,
        required=True,
        help="Path to a JSON list of node payloads",
    )
    add_site_url_argument(import_parser)
    import_parser.set_defaults(func=import_nodes)

    schema_parser = subparsers.add_parser(
        "tool-schema",
        help="Print the create_content LLM tool definition",
    )
    schema_parser.set_defaults(func=tool_schema)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
