from __future__ import annotations

import re
from enum import Enum


class AnnotationKind(str, Enum):
    STATIC = "static"
    STATIC_HEADER = "static-header"

    @classmethod
    def parse(cls, value: str) -> "AnnotationKind":
        return cls(value.lower())


# Longer alternative first so "static-header" is never cut short at "static".
ANNOTATION_TAG_PATTERN = r"(?:static-header|static)"

ANNOTATION_RX = re.compile(rf"(?i)@\[({ANNOTATION_TAG_PATTERN})#(.*?)\]")
ANNOTATION_REMOVAL_RX = re.compile(rf"(?i)@\[{ANNOTATION_TAG_PATTERN}#.*?\]")
HTML_TAG_RX = re.compile(r"<[^>]+?>")
