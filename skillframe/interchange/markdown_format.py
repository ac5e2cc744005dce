"""
markdown_format.py
- Purpose: Heading-based Markdown rendition of a competency framework.

Layout:
    # 1. Competency title
    <optional description block>
    ## 1.1 Sub-competency title
    ### <Level label>
    - criterion
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Iterable, Optional

from skillframe.constants.levels import RoleType, translate_key
from skillframe.core import ErrorCode
from skillframe.core.errors import unprocessable
from skillframe.interchange.grouping import group_framework
from skillframe.interchange.headings import HeadingResolver
from skillframe.levels.criteria import resolve
from skillframe.levels.registry import default_levels_for, ordered
from skillframe.schemas.interchange_schema import (
    InterchangeCompetency,
    InterchangeDocument,
    InterchangeSubCompetency,
)

logger = logging.getLogger("skillframe.interchange.markdown")

_H1 = re.compile(r"^#\s+(?:\d+\.\s*)?(.+)$")
_H2 = re.compile(r"^##\s+(?:\d+\.\d+\s*)?(.+)$")
_H3 = re.compile(r"^###\s+(.+)$")
_BULLET = re.compile(r"^[-*]\s+(.+)$")


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

def _extra_keys(sub, known: set[str]) -> list[str]:
    """Unified-map keys that belong to no known level, directly or via mapping."""
    criteria = getattr(sub, "level_criteria", None)
    if not isinstance(criteria, dict):
        return []
    return [k for k in criteria if k not in known and translate_key(k) not in known]


def _bullets(sub, key: str) -> list[str]:
    # A bullet holds one line of trimmed text; blank criteria have no bullet form.
    return [text for text in (" ".join(c.splitlines()).strip() for c in resolve(sub, key)) if text]


def export_to_markdown(competencies: Iterable, sub_competencies: Iterable, levels: Iterable) -> str:
    level_seq = ordered(levels)
    known = {lvl.key for lvl in level_seq}
    lines: list[str] = []

    for comp_no, (comp, subs) in enumerate(group_framework(competencies, sub_competencies), start=1):
        lines.append(f"# {comp_no}. {comp.title}")
        if comp.description:
            lines.append("")
            lines.append(comp.description)
        lines.append("")

        for sub_no, sub in enumerate(subs, start=1):
            lines.append(f"## {comp_no}.{sub_no} {sub.title}")
            lines.append("")

            sections = [(lvl.label, _bullets(sub, lvl.key)) for lvl in level_seq]
            sections += [(key, _bullets(sub, key)) for key in _extra_keys(sub, known)]

            for heading, criteria in sections:
                if not criteria:
                    continue
                lines.append(f"### {heading}")
                lines.extend(f"- {c}" for c in criteria)
                lines.append("")

    return "\n".join(lines).strip()


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------

class ParserState(str, Enum):
    BEFORE_COMPETENCY = "before_competency"
    IN_COMPETENCY_DESCRIPTION = "in_competency_description"
    IN_SUB_COMPETENCY = "in_sub_competency"
    IN_LEVEL_BODY = "in_level_body"


class _MarkdownParser:
    def __init__(self, levels: Iterable):
        self.resolver = HeadingResolver(levels)
        self.state = ParserState.BEFORE_COMPETENCY
        self.competencies: list[InterchangeCompetency] = []

        self._comp: Optional[dict] = None
        self._description: list[str] = []
        self._sub: Optional[dict] = None
        self._level_key: Optional[str] = None

    # ---- sealing ----
    def _seal_sub(self) -> None:
        if self._sub is not None:
            self._comp["sub_competencies"].append(InterchangeSubCompetency(**self._sub))
        self._sub = None
        self._level_key = None

    def _seal_description(self) -> None:
        if self.state is ParserState.IN_COMPETENCY_DESCRIPTION:
            self._comp["description"] = "\n".join(self._description).strip() or None
        self._description = []

    def _seal_competency(self) -> None:
        if self._comp is None:
            return
        self._seal_description()
        self._seal_sub()
        self.competencies.append(InterchangeCompetency(**self._comp))
        self._comp = None

    # ---- transitions ----
    def feed(self, raw_line: str) -> None:
        line = raw_line.strip()

        m = _H1.match(line)
        if m:
            self._seal_competency()
            self._comp = {"title": m.group(1).strip(), "description": None, "sub_competencies": []}
            self.state = ParserState.IN_COMPETENCY_DESCRIPTION
            return

        m = _H2.match(line)
        if m:
            if self.state is ParserState.BEFORE_COMPETENCY:
                return
            self._seal_description()
            self._seal_sub()
            self._sub = {"title": m.group(1).strip(), "level_criteria": {}}
            self.state = ParserState.IN_SUB_COMPETENCY
            return

        m = _H3.match(line)
        if m:
            if self.state in (ParserState.IN_SUB_COMPETENCY, ParserState.IN_LEVEL_BODY):
                self._level_key = self.resolver.resolve(m.group(1))
                self.state = ParserState.IN_LEVEL_BODY
            return

        if self.state is ParserState.IN_COMPETENCY_DESCRIPTION:
            if not line.startswith("#"):
                self._description.append(raw_line.rstrip())
            return

        if self.state is ParserState.IN_LEVEL_BODY:
            m = _BULLET.match(line)
            if m:
                self._sub["level_criteria"].setdefault(self._level_key, []).append(m.group(1).strip())

    def finish(self) -> InterchangeDocument:
        self._seal_competency()
        return InterchangeDocument(competencies=self.competencies)


def parse_markdown(content: str, levels: Iterable | None = None) -> InterchangeDocument:
    if levels is None:
        levels = default_levels_for(RoleType.IC)

    parser = _MarkdownParser(levels)
    for line in content.splitlines():
        parser.feed(line)
    doc = parser.finish()

    if not doc.competencies:
        raise unprocessable(
            "No competencies found in the markdown content",
            code=ErrorCode.IMPORT_NO_COMPETENCIES,
        )

    logger.info(
        "interchange.markdown.parsed",
        extra={
            "competencies": len(doc.competencies),
            "sub_competencies": sum(len(c.sub_competencies) for c in doc.competencies),
        },
    )
    return doc
