"""
detect.py
- Purpose: Pick the codec for an incoming document and parse it.
"""

from enum import Enum
from typing import Iterable

from skillframe.interchange.json_format import parse_json
from skillframe.interchange.markdown_format import parse_markdown
from skillframe.schemas.interchange_schema import InterchangeDocument


class InterchangeFormat(str, Enum):
    JSON = "json"
    MARKDOWN = "markdown"


def detect_format(content: str) -> InterchangeFormat:
    """Cheap heuristic: structured if it opens with `{` or `[`."""
    if content.lstrip()[:1] in ("{", "["):
        return InterchangeFormat.JSON
    return InterchangeFormat.MARKDOWN


def parse_content(content: str, levels: Iterable | None = None) -> InterchangeDocument:
    if detect_format(content) is InterchangeFormat.JSON:
        return parse_json(content)
    return parse_markdown(content, levels)
