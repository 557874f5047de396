from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .console import RichLogger
from .models import Occurrence, ScanSummary


class OccurrenceStore:
    """Line numbers where each known phrase shows up unwrapped."""

    def __init__(self, known_phrases: Optional[set[str]] = None):
        self.known_phrases: set[str] = set(known_phrases or ())
        self.lines: Dict[str, List[int]] = {}
        self.hits: Dict[str, int] = {}
        self.first_seen: Dict[str, Dict[int, Occurrence]] = {}

    def add(self, occurrence: Occurrence, hits: int = 1) -> bool:
        phrase = occurrence.phrase
        if phrase not in self.known_phrases:
            raise ValueError(f"Unknown phrase: {phrase!r}")
        self.hits[phrase] = self.hits.get(phrase, 0) + hits
        line_nos = self.lines.setdefault(phrase, [])
        if line_nos and line_nos[-1] == occurrence.line_no:
            return False
        if line_nos and line_nos[-1] > occurrence.line_no:
            raise ValueError(f"Line {occurrence.line_no} recorded out of order for {phrase!r}")
        line_nos.append(occurrence.line_no)
        self.first_seen.setdefault(phrase, {})[occurrence.line_no] = occurrence
        return True

    def __len__(self) -> int:
        return len(self.lines)

    def __bool__(self) -> bool:
        return bool(self.lines)

    def sorted_phrases(self) -> List[str]:
        return sorted(self.lines)

    def as_mapping(self) -> Dict[str, List[int]]:
        return {phrase: list(self.lines[phrase]) for phrase in self.sorted_phrases()}

    def to_dict(self, summary: Optional[ScanSummary] = None) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "phrases": sorted(self.known_phrases),
            "occurrences": self.as_mapping(),
            "details": {
                phrase: [
                    {"line_no": occ.line_no, "snippet": occ.snippet}
                    for _, occ in sorted(self.first_seen.get(phrase, {}).items())
                ]
                for phrase in self.sorted_phrases()
            },
        }
        if summary is not None:
            payload["source"] = summary.source
            payload["summary"] = summary.to_dict()
        return payload


class ResultReporter:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def report(self, store: OccurrenceStore) -> None:
        if not store:
            self.console.print("No unwrapped instances of known phrases found.")
            return

        table = Table(title="Unwrapped Phrase Occurrences", header_style="bold")
        table.add_column("Phrase", style="cyan")
        table.add_column("Lines")
        table.add_column("Hits", justify="right")
        for phrase in store.sorted_phrases():
            table.add_row(
                Text(phrase),
                ", ".join(str(n) for n in store.lines[phrase]),
                str(store.hits.get(phrase, 0)),
            )
        self.console.print(table)

    def report_json(self, store: OccurrenceStore, summary: Optional[ScanSummary] = None) -> None:
        self.console.print_json(json.dumps(store.to_dict(summary), ensure_ascii=False))


class ResultWriter:
    def __init__(self, out_path: Path, logger: RichLogger):
        self.out_path = out_path
        self.logger = logger

    def write(self, store: OccurrenceStore, summary: Optional[ScanSummary] = None) -> None:
        if not self.out_path.name or self.out_path.is_dir():
            raise ValueError(f"Output path is not a file: {self.out_path}")
        self.out_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.out_path.with_name(self.out_path.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(store.to_dict(summary), f, indent=2, ensure_ascii=False)
            tmp_path.replace(self.out_path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()
        self.logger.done(f"Results written to: {self.out_path}")
