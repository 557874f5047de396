from __future__ import annotations

import re

from .patterns import ANNOTATION_REMOVAL_RX, HTML_TAG_RX


def trim_snippet(text: str, max_len: int = 240) -> str:
    value = text.strip()
    if len(value) <= max_len:
        return value
    return value[: max_len - 3] + "..."


def remove_annotations(text: str) -> str:
    if "@[" not in text:
        return text
    return ANNOTATION_REMOVAL_RX.sub("", text)


def strip_html_tags(text: str) -> str:
    if "<" not in text or ">" not in text:
        return text
    return HTML_TAG_RX.sub(" ", text)


def clean_line(text: str, strip_tags: bool = True) -> str:
    """Blank out everything that must not count as a bare phrase.

    Annotations go first: their payload may sit inside an attribute value and
    has to disappear before the tag heuristic sees it.
    """
    cleaned = remove_annotations(text)
    if strip_tags:
        cleaned = strip_html_tags(cleaned)
    return cleaned


def build_phrase_regex(phrase: str) -> re.Pattern[str]:
    if not phrase:
        raise ValueError("Phrase cannot be empty")
    # Not \b: a phrase may start or end with punctuation ("C++").
    return re.compile(rf"(?<!\w){re.escape(phrase)}(?!\w)", re.IGNORECASE)
