from __future__ import annotations

from dataclasses import dataclass

from .patterns import AnnotationKind


@dataclass(frozen=True)
class Annotation:
    kind: AnnotationKind
    phrase: str
    line_no: int
    start: int
    end: int


@dataclass(frozen=True)
class Occurrence:
    phrase: str
    line_no: int
    snippet: str


@dataclass(frozen=True)
class ScanSummary:
    source: str
    lines: int
    annotations: int
    phrases: int
    unwrapped: int

    def to_dict(self) -> dict[str, object]:
        return {
            "source": self.source,
            "lines": self.lines,
            "annotations": self.annotations,
            "phrases": self.phrases,
            "unwrapped": self.unwrapped,
        }
