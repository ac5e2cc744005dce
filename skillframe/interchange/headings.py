"""
headings.py
- Purpose: Turn the text of a depth-3 Markdown heading into a level key.

Resolution order:
  a) case-insensitive exact match on a level's label, key or short code (p1, m2)
  b) legacy label (associate, ..., principal) -> its new-scheme key
  c) substring match, either direction, against labels, keys and legacy names
  d) ad-hoc key: lower-cased, whitespace runs replaced by "_"
"""

import re
from typing import Iterable

from skillframe.constants.levels import KeyDirection, key_mapping
from skillframe.levels.registry import ordered, short_code

_WHITESPACE = re.compile(r"\s+")


class HeadingResolver:
    def __init__(self, levels: Iterable):
        self._exact: dict[str, str] = {}
        # (name, key) pairs, in level order, used for substring matching
        self._names: list[tuple[str, str]] = []

        for lvl in ordered(levels):
            for name in (lvl.label, lvl.key, short_code(lvl.key)):
                self._exact.setdefault(name.lower(), lvl.key)
            self._names.append((lvl.label.lower(), lvl.key))
            self._names.append((lvl.key.lower(), lvl.key))

        self._legacy = key_mapping(KeyDirection.LEGACY_TO_NEW)
        self._names.extend(self._legacy.items())

    def resolve(self, heading: str) -> str:
        text = heading.strip().lower()

        if text in self._exact:
            return self._exact[text]

        if text in self._legacy:
            return self._legacy[text]

        if text:
            for name, key in self._names:
                if name in text or text in name:
                    return key

        return _WHITESPACE.sub("_", text)
