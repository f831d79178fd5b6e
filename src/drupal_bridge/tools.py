"""LLM tool-call definitions and argument parsing for content creation."""

import json
import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from drupal_bridge.normalizers.fields import as_string
from schemas.content_request import ContentRequest

logger = logging.getLogger(__name__)

CREATE_CONTENT = "create_content"

CREATE_CONTENT_TOOL: dict[str, Any] = {
    "type": "function",
    "function": {
        "name": CREATE_CONTENT,
        "description": (
            "Creates content on the Drupal site. Can handle recipes, articles, and pages."
        ),
        "parameters": {
            "type": "object",
            "required": ["content_type", "title", "body"],
            "properties": {
                "content_type": {
                    "type": "string",
                    "enum": ["recipe", "article", "page"],
                    "description": "The type of content to create.",
                },
                "title": {"type": "string"},
                "body": {"type": "string"},
                "ingredients": {"type": "array", "items": {"type": "string"}},
                "instructions": {"type": "array", "items": {"type": "string"}},
                "cooking_time": {"type": "integer"},
                "prep_time": {"type": "integer"},
                "servings": {"type": "integer"},
                "difficulty": {"type": "string", "enum": ["easy", "medium", "hard"]},
                "tags": {"type": "array", "items": {"type": "string"}},
                "image": {"type": "string"},
                "image_prompt": {"type": "string"},
                "summary": {"type": "string"},
            },
        },
    },
}

IMAGE_PROMPT_TEMPLATES = {
    "recipe": (
        "Appetizing food photography of {title}, professional food styling, "
        "high resolution, restaurant quality"
    ),
    "article": (
        "Editorial style image for article: {title}, professional photography, "
        "high resolution"
    ),
    "page": "Header image for web page: {title}, modern web design, high resolution",
}


class ToolCallError(ValueError):
    """Raised when a tool call cannot be turned into a ContentRequest."""

    pass


def parse_tool_call(tool_call: dict[str, Any]) -> ContentRequest:
    """Parse a create_content tool call into a ContentRequest.

    Accepts the OpenAI chat-completions tool call shape::

        {"function": {"name": "create_content", "arguments": "{...}"}}

    ``arguments`` may be a JSON string or an already-decoded dict.

    Raises:
        ToolCallError: If the call is for another function, has no arguments,
            the arguments are not a JSON object, or content_type is missing
    """
    function = tool_call.get("function") or {}
    name = function.get("name")
    if name != CREATE_CONTENT:
        raise ToolCallError(f"Unsupported tool call: {name}")

    arguments = function.get("arguments")
    if not arguments:
        raise ToolCallError("Function arguments are undefined")

    if isinstance(arguments, str):
        try:
            arguments = json.loads(arguments)
        except json.JSONDecodeError as e:
            raise ToolCallError(f"Function arguments are not valid JSON: {e}") from e

    if not isinstance(arguments, dict):
        raise ToolCallError("Function arguments must be a JSON object")

    try:
        request = ContentRequest.model_validate(arguments)
    except PydanticValidationError as e:
        raise ToolCallError(f"Invalid create_content arguments: {e}") from e

    logger.debug(f"Parsed {CREATE_CONTENT} call for content type '{request.content_type}'")
    return request


def build_image_prompt(request: ContentRequest) -> str | None:
    """Return the image prompt for a request, or None if no image is wanted.

    An explicit ``image_prompt`` wins. Otherwise a per-type template is used
    when the request has a title and a known content type.
    """
    fields = request.fields
    explicit = as_string(fields.get("image_prompt")).strip()
    if explicit:
        return explicit

    title = as_string(fields.get("title")).strip()
    template = IMAGE_PROMPT_TEMPLATES.get(request.content_type)
    if not title or template is None:
        return None
    return template.format(title=title)
