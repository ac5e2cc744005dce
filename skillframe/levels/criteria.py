"""
criteria.py
- Purpose: Resolve the criteria list of a sub-competency for one level key,
  whatever storage shape the record is in (unified map, legacy columns, both).
- Design: The record is first turned into a list of CriteriaSource variants
  (UnifiedMap before LegacyFields). Resolution never raises.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from skillframe.constants.levels import legacy_field_for, legacy_level_keys, translate_key


@dataclass(frozen=True)
class UnifiedMap:
    criteria: Mapping[str, list[str]]

    def lookup(self, key: str) -> list[str]:
        return _as_criteria(self.criteria.get(key))


@dataclass(frozen=True)
class LegacyFields:
    # legacy key (associate, intermediate, ...) -> criteria
    columns: Mapping[str, list[str]] = field(default_factory=dict)

    def lookup(self, key: str) -> list[str]:
        return _as_criteria(self.columns.get(key))


CriteriaSource = Union[UnifiedMap, LegacyFields]


def _as_criteria(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(item) for item in value]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _read(record: Any, name: str) -> Any:
    """Read snake_case or camelCase field from an ORM row, object or dict."""
    if isinstance(record, Mapping):
        if name in record:
            return record[name]
        return record.get(_camel(name))
    value = getattr(record, name, None)
    if value is None:
        value = getattr(record, _camel(name), None)
    return value


def criteria_sources(record: Any) -> list[CriteriaSource]:
    sources: list[CriteriaSource] = []

    unified = _read(record, "level_criteria")
    if isinstance(unified, Mapping):
        sources.append(UnifiedMap(unified))

    columns = {}
    for key in legacy_level_keys():
        value = _read(record, legacy_field_for(key))
        if isinstance(value, (list, tuple)):
            columns[key] = list(value)
    if columns:
        sources.append(LegacyFields(columns))

    return sources


def resolve(record: Any, level_key: str) -> list[str]:
    """
    Lookup order (first non-empty wins):
      1. unified map, exact key
      2. unified map, key mapped through the legacy<->new table
      3. legacy column addressed by the key itself
      4. legacy column addressed by the mapped key
    """
    candidates = [level_key]
    mapped = translate_key(level_key)
    if mapped:
        candidates.append(mapped)

    for source in criteria_sources(record):
        for key in candidates:
            found = source.lookup(key)
            if found:
                return found
    return []
