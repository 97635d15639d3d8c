"""Body text to ordered Block sequence: headings, code fences, paragraphs, links"""

from typing import Iterator, Optional

import structlog
from markdown_it import MarkdownIt

from mdpage.core.models import Block, CodeFence, Heading, Link, Paragraph
from mdpage.core.utils.text import split_lines


log = structlog.get_logger(__name__)

FENCE = '```'
HEADING_MARK = '#'
HARD_BREAK = '  '


def make_parser(preset: str = 'commonmark') -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _strip_eol(line: str) -> str:
    """Remove a single trailing line terminator."""
    for eol in ('\r\n', '\n', '\r'):
        if line.endswith(eol):
            return line[:-len(eol)]
    return line


def _closing_fence(lines: list[str], start: int) -> Optional[int]:
    """Index of the first line at or after start that closes a fence, else None."""
    for i in range(start, len(lines)):
        if lines[i].strip() == FENCE:
            return i
    return None


def _heading(text: str) -> Heading:
    level = len(text) - len(text.lstrip(HEADING_MARK))
    return Heading(level=level, text=text[level:].strip())


def extract_links(text: str, parser: MarkdownIt) -> tuple[list[Link], bool]:
    """Return (links, sole) for inline [label](url) links in text.

    sole is True when the text holds exactly one link and nothing else.
    """
    links: list[Link] = []
    outside = False
    for inline in parser.parseInline(text):
        href = None
        label: list[str] = []
        for child in inline.children or []:
            if child.type == 'link_open' and child.markup != 'autolink':
                href = child.attrGet('href') or ''
                label = []
            elif child.type == 'link_close' and href is not None:
                links.append(Link(label=''.join(label), url=href))
                href = None
            elif href is not None:
                label.append(child.content)
            elif child.type not in ('softbreak', 'hardbreak') and child.content.strip():
                outside = True
            elif child.type in ('link_open', 'link_close', 'image'):
                outside = True
    return links, len(links) == 1 and not outside


def _trim_line(text: str) -> str:
    """Drop trailing whitespace but keep a two-space hard line break."""
    trimmed = text.rstrip()
    return trimmed + HARD_BREAK if text.endswith(HARD_BREAK) else trimmed


def _paragraph(lines: list[str], parser: MarkdownIt) -> Block:
    text = '\n'.join(lines[:-1] + [lines[-1].rstrip()])
    links, sole = extract_links(text, parser)
    if sole:
        return links[0]
    return Paragraph(text=text, links=tuple(links))


def scan_blocks(body: str, parser: MarkdownIt) -> Iterator[Block]:
    """Yield blocks from body in source order."""
    lines = split_lines(body)
    para: list[str] = []
    i = 0
    while i < len(lines):
        text = _strip_eol(lines[i])

        if text.startswith(FENCE):
            close = _closing_fence(lines, i + 1)
            if close is not None:
                if para:
                    yield _paragraph(para, parser)
                    para = []
                content = ''.join(lines[i + 1:close])
                yield CodeFence(language=text[len(FENCE):].strip() or None, content=_strip_eol(content))
                i = close + 1
                continue
            log.debug("unclosed_code_fence", line=i + 1)

        elif text.startswith(HEADING_MARK):
            if para:
                yield _paragraph(para, parser)
                para = []
            yield _heading(text)
            i += 1
            continue

        if text.strip():
            para.append(_trim_line(text))
        elif para:
            yield _paragraph(para, parser)
            para = []
        i += 1

    if para:
        yield _paragraph(para, parser)


class BlockStream:
    """Lazy, restartable view of a body's blocks; each iteration rescans the text."""

    def __init__(self, body: str, parser: MarkdownIt = None):
        self.body = body
        self.parser = parser or make_parser()

    def __iter__(self) -> Iterator[Block]:
        return scan_blocks(self.body, self.parser)


def render_body(body: str, parser: MarkdownIt = None) -> BlockStream:
    """Return a restartable block sequence for body text."""
    return BlockStream(body, parser)
