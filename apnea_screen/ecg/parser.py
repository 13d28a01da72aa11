"""Parsing of uploaded ECG text into a dense, re-indexed sample series.

The expected format is one numeric sample per line, optionally preceded by
a header line containing "ecg" in any case. Malformed rows never raise:
they are dropped and the surviving samples are numbered 0..N-1.
"""

import math
import re

from apnea_screen.ecg.models import EcgSample

HEADER_MARKER = "ecg"
BYTE_ORDER_MARK = "\ufeff"

# Leading numeric prefix, so "0.42,1" reads as 0.42 (first column wins).
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _content_lines(text: str) -> list[str]:
    text = text.removeprefix(BYTE_ORDER_MARK)
    return [line for line in text.split("\n") if line.strip()]


def _data_lines(text: str) -> list[str]:
    lines = _content_lines(text)
    if lines and is_header_line(lines[0]):
        return lines[1:]
    return lines


def is_header_line(line: str) -> bool:
    """True when the line looks like a column header rather than a sample."""
    return HEADER_MARKER in line.lower()


def parse_sample(line: str) -> float | None:
    """Return the line's value, or None when it is not a finite number."""
    match = _NUMBER_PREFIX.match(line.strip())
    if match is None:
        return None
    value = float(match.group())
    if not math.isfinite(value):
        return None
    return value


def parse_ecg_text(text: str) -> list[EcgSample]:
    """Turn raw file text into an ordered list of samples."""
    values = [parse_sample(line) for line in _data_lines(text)]
    return [
        EcgSample(index=index, value=value)
        for index, value in enumerate(v for v in values if v is not None)
    ]


def count_skipped_rows(text: str) -> int:
    """Number of data rows (header and blank lines excluded) that were dropped."""
    return sum(1 for line in _data_lines(text) if parse_sample(line) is None)
