from __future__ import annotations

from typing import Iterator

from .models import Annotation
from .patterns import ANNOTATION_RX, AnnotationKind


def iter_annotations(line: str, line_no: int = 0) -> Iterator[Annotation]:
    if "@[" not in line:
        return
    for m in ANNOTATION_RX.finditer(line):
        yield Annotation(
            kind=AnnotationKind.parse(m.group(1)),
            phrase=m.group(2),
            line_no=line_no,
            start=m.start(),
            end=m.end(),
        )
