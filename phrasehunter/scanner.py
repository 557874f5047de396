from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple

from .console import RichLogger
from .extractors import iter_annotations
from .input_sources import iter_lines
from .matcher import PhraseMatcher
from .models import Occurrence, ScanSummary
from .results import OccurrenceStore
from .text_utils import clean_line, trim_snippet


class Scanner:
    def __init__(
        self,
        logger: RichLogger,
        strip_tags: bool = True,
        encoding: Optional[str] = None,
    ):
        self.logger = logger
        self.strip_tags = strip_tags
        self.encoding = encoding
        self.stats = {
            "lines": 0,
            "annotations": 0,
        }

    def collect_phrases(self, lines: Iterable[Tuple[int, str]]) -> set[str]:
        phrases: set[str] = set()
        self.stats["lines"] = 0
        self.stats["annotations"] = 0
        for line_no, line in lines:
            self.stats["lines"] += 1
            for annotation in iter_annotations(line, line_no):
                self.stats["annotations"] += 1
                if not annotation.phrase:
                    self.logger.warn(f"Empty {annotation.kind.value} annotation on line {line_no}")
                phrases.add(annotation.phrase)
        return phrases

    def scan_lines(self, lines: Iterable[Tuple[int, str]], phrases: set[str]) -> OccurrenceStore:
        store = OccurrenceStore(phrases)
        matcher = PhraseMatcher(phrases)
        if matcher.skipped:
            self.logger.debug(f"Skipping {len(matcher.skipped)} empty phrase(s)")
        if not len(matcher):
            return store

        for line_no, line in lines:
            cleaned = clean_line(line, strip_tags=self.strip_tags)
            for phrase, matches in matcher.iter_hits(cleaned):
                occurrence = Occurrence(phrase=phrase, line_no=line_no, snippet=trim_snippet(line))
                store.add(occurrence, hits=len(matches))
        return store

    def run(self, path: Path) -> Tuple[OccurrenceStore, ScanSummary]:
        self.logger.info("Pass 1: Collecting phrases from wrapped patterns...")
        phrases = self.collect_phrases(iter_lines(path, self.encoding))
        self.logger.info(f"Found {len(phrases)} unique phrases in wrapped patterns.")
        self.logger.debug("Known phrases: " + ", ".join(repr(p) for p in sorted(phrases)))

        if not phrases:
            self.logger.info("No wrapped phrases found to monitor for unwrapped instances.")
            store = OccurrenceStore()
        else:
            mode = "ignoring HTML tags" if self.strip_tags else "including HTML tags"
            self.logger.info(f"Pass 2: Searching for unwrapped instances ({mode})...")
            store = self.scan_lines(iter_lines(path, self.encoding), phrases)

        summary = ScanSummary(
            source=str(path),
            lines=self.stats["lines"],
            annotations=self.stats["annotations"],
            phrases=len(phrases),
            unwrapped=len(store),
        )
        return store, summary
