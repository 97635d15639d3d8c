"""Slug generation and date-prefix handling for post filenames"""

import re
from pathlib import PurePath


DATE_PREFIX_RE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})-')


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def split_date_prefix(name: str) -> tuple[str | None, str]:
    """Return (yyyy-mm-dd or None, remainder) for a '2015-03-01-title' style name."""
    m = DATE_PREFIX_RE.match(name)
    if m:
        return '-'.join(m.groups()), name[m.end():]
    return None, name


def slug_from_source(source: str) -> str:
    """Derive a slug from a source path: drop directories, extension, and date prefix."""
    _, stem = split_date_prefix(PurePath(source).stem)
    return slugify(stem)
