from __future__ import annotations

import io
from pathlib import Path
from typing import Iterator, Optional, Tuple


class InputError(Exception):
    pass


class SourceNotFoundError(InputError):
    def __init__(self, path: Path):
        super().__init__(f"The file at '{path}' does not exist or is not a regular file.")
        self.path = path


class ScanError(InputError):
    def __init__(self, path: Path, cause: BaseException):
        super().__init__(f"An unexpected error occurred while processing '{path}': {cause}")
        self.path = path
        self.cause = cause


def detect_text_encoding(sample: bytes) -> str:
    if sample.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"
    if sample.startswith(b"\xff\xfe") or sample.startswith(b"\xfe\xff"):
        return "utf-16"
    return "utf-8"


def validate_source(path: str | Path) -> Path:
    source = Path(path).expanduser()
    if not source.is_file():
        raise SourceNotFoundError(source)
    return source


def iter_lines(path: Path, encoding: Optional[str] = None) -> Iterator[Tuple[int, str]]:
    """Stream ``(line_no, line)`` pairs, 1-indexed, terminators stripped.

    CRLF, LF and lone CR all end a line. Decoding is strict; any read or
    decode failure surfaces as :class:`ScanError`.
    """
    try:
        with open(path, "rb") as bf:
            sample = bf.read(4096)
            bf.seek(0)
            enc = encoding or detect_text_encoding(sample)
            tf = io.TextIOWrapper(bf, encoding=enc, errors="strict", newline="")
            for line_no, line in enumerate(tf, start=1):
                yield line_no, line.rstrip("\r\n")
    except (OSError, UnicodeError, LookupError) as exc:
        raise ScanError(path, exc) from exc
