"""
json_format.py
- Purpose: Structured (JSON) rendition of a competency framework.
- Export is a faithful dump of the unified per-level map; no legacy fallback.
"""

import json
import logging
from typing import Iterable

from pydantic import ValidationError

from skillframe.core import ErrorCode
from skillframe.core.errors import unprocessable
from skillframe.interchange.grouping import group_framework
from skillframe.levels.criteria import criteria_sources, LegacyFields
from skillframe.schemas.interchange_schema import (
    InterchangeCompetency,
    InterchangeDocument,
    InterchangeSubCompetency,
)

logger = logging.getLogger("skillframe.interchange.json")


def _unified_map(sub) -> dict[str, list[str]]:
    criteria = sub.level_criteria
    if isinstance(criteria, dict):
        return {k: list(v) for k, v in criteria.items() if isinstance(v, list)}

    if any(isinstance(s, LegacyFields) for s in criteria_sources(sub)):
        logger.warning(
            "interchange.json.legacy_only_sub_competency",
            extra={"sub_competency_id": str(sub.id), "title": sub.title},
        )
    return {}


def build_document(competencies: Iterable, sub_competencies: Iterable) -> InterchangeDocument:
    return InterchangeDocument(
        competencies=[
            InterchangeCompetency(
                title=comp.title,
                code=comp.code,
                description=comp.description,
                sub_competencies=[
                    InterchangeSubCompetency(title=sub.title, code=sub.code, level_criteria=_unified_map(sub))
                    for sub in subs
                ],
            )
            for comp, subs in group_framework(competencies, sub_competencies)
        ]
    )


def export_to_json(competencies: Iterable, sub_competencies: Iterable) -> str:
    doc = build_document(competencies, sub_competencies)
    return json.dumps(doc.to_payload(), indent=2, ensure_ascii=False)


def parse_json(content: str) -> InterchangeDocument:
    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as e:
        raise unprocessable(
            f"Invalid JSON: {e.msg}",
            code=ErrorCode.IMPORT_INVALID_JSON,
            details={"line": e.lineno, "column": e.colno},
        ) from e

    if not isinstance(parsed, dict) or not isinstance(parsed.get("competencies"), list):
        raise unprocessable(
            "Invalid JSON format: missing 'competencies' array",
            code=ErrorCode.IMPORT_MISSING_COMPETENCIES,
        )

    try:
        doc = InterchangeDocument.model_validate(parsed)
    except ValidationError as e:
        raise unprocessable(
            "Invalid JSON format: competency structure does not match",
            code=ErrorCode.IMPORT_INVALID_STRUCTURE,
            details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
        ) from e

    logger.info("interchange.json.parsed", extra={"competencies": len(doc.competencies)})
    return doc
