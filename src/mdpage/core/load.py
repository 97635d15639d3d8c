"""Content file discovery and loading"""

from pathlib import Path

import structlog

from mdpage.core.errors import NotFound, ReadError
from mdpage.core.models import Document


log = structlog.get_logger(__name__)

CONTENT_EXTENSIONS = ('.md', '.markdown')


def discover_files(path: Path, extensions=CONTENT_EXTENSIONS) -> list[Path]:
    """Return sorted content files under path, or [path] if a single file."""
    path = Path(path)
    if not path.exists():
        raise NotFound(path)
    if path.is_file():
        return [path] if path.suffix in extensions else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in extensions)


def load_document(path: Path) -> Document:
    """Read a content file into a Document. Raises NotFound or ReadError."""
    path = Path(path)
    if not path.is_file():
        raise NotFound(path)
    try:
        raw = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, str(e)) from e
    log.debug("document_loaded", path=str(path), size=len(raw))
    return Document(path=path, raw_text=raw)
