from __future__ import annotations

import re
from typing import Dict, Iterable, Iterator, List, Tuple

from .text_utils import build_phrase_regex


class PhraseMatcher:
    """Whole-word, case-insensitive lookup of a fixed set of phrases.

    Each phrase keeps its own compiled pattern. A single alternation would let
    a longer phrase hide a shorter one it contains (``New York`` / ``New``).
    """

    def __init__(self, phrases: Iterable[str]):
        self._patterns: Dict[str, re.Pattern[str]] = {}
        self.skipped: List[str] = []
        for phrase in sorted(set(phrases)):
            if not phrase:
                self.skipped.append(phrase)
                continue
            self._patterns[phrase] = build_phrase_regex(phrase)

    def __len__(self) -> int:
        return len(self._patterns)

    @property
    def phrases(self) -> List[str]:
        return list(self._patterns)

    def iter_hits(self, text: str) -> Iterator[Tuple[str, List[re.Match[str]]]]:
        """Yield ``(phrase, matches)`` for every phrase found in ``text``."""
        if not text:
            return
        for phrase, rx in self._patterns.items():
            matches = list(rx.finditer(text))
            if matches:
                yield phrase, matches
