"""Line splitting on real line terminators only"""

import re


LINE_END_RE = re.compile(r'(?<=\n)|(?<=\r)(?!\n)')


def split_lines(text: str) -> list[str]:
    """Split after \\n, \\r\\n, or \\r, keeping terminators.

    Unlike str.splitlines, form feeds, \\x1c-\\x1e, \\x85, and the Unicode
    line/paragraph separators stay inside their line.
    """
    lines = LINE_END_RE.split(text)
    if lines and lines[-1] == '':
        lines.pop()
    return lines
