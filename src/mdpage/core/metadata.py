"""Front matter detection and best-effort key: value parsing"""

from dataclasses import dataclass
from typing import Iterable, Union

import structlog

from mdpage.core.models import Metadata
from mdpage.core.utils.text import split_lines


log = structlog.get_logger(__name__)

MARKER = '---'


@dataclass(frozen=True)
class Entry:
    key: str
    value: str


@dataclass(frozen=True)
class Skipped:
    lineno: int
    line: str


LineResult = Union[Entry, Skipped]


def parse_line(lineno: int, line: str) -> LineResult:
    """Parse one interior line as 'key: value'; anything else is Skipped."""
    key, sep, value = line.partition(':')
    key = key.strip()
    if not sep or not key:
        return Skipped(lineno, line)
    return Entry(key, value.strip())


def fold_entries(results: Iterable[LineResult]) -> Metadata:
    """Accumulate parsed entries into a mapping, dropping skipped lines. Later keys win."""
    metadata: Metadata = {}
    for result in results:
        if isinstance(result, Entry):
            metadata[result.key] = result.value
        else:
            log.debug("metadata_line_skipped", lineno=result.lineno, line=result.line)
    return metadata


def _closing_index(lines: list[str], marker: str) -> int | None:
    for i in range(1, len(lines)):
        if lines[i].rstrip() == marker:
            return i
    return None


def parse_metadata(text: str, marker: str = MARKER) -> tuple[Metadata, str]:
    """Return (metadata, body) with the marker-delimited header removed.

    Without an opening marker on the first line, or without a closing marker,
    the metadata is empty and the whole text is the body.
    """
    lines = split_lines(text)
    if not lines or lines[0].rstrip() != marker:
        return {}, text
    end = _closing_index(lines, marker)
    if end is None:
        return {}, text

    results = (
        parse_line(lineno, line.rstrip('\r\n'))
        for lineno, line in enumerate(lines[1:end], start=2)
        if line.strip()
    )
    return fold_entries(results), ''.join(lines[end + 1:])


def dump_metadata(metadata: Metadata, marker: str = MARKER) -> str:
    """Serialize a mapping back into a marker-delimited header block."""
    body = ''.join(f"{key}: {value}\n" for key, value in metadata.items())
    return f"{marker}\n{body}{marker}\n"
