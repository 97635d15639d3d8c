"""Pipeline step functions: build single pages and whole content trees"""

from pathlib import Path

import structlog

from mdpage.config import Settings
from mdpage.core.assemble import assemble_page
from mdpage.core.errors import BuildError
from mdpage.core.export import write_page
from mdpage.core.load import discover_files, load_document
from mdpage.core.metadata import parse_metadata
from mdpage.core.models import Page
from mdpage.core.render import make_parser, render_body


log = structlog.get_logger(__name__)


def build_text(source: str, text: str, settings: Settings = None) -> Page:
    """Parse metadata, render the body, and assemble a Page from in-memory text."""
    settings = settings or Settings()
    metadata, body = parse_metadata(text, settings.marker)
    blocks = render_body(body, make_parser(settings.parser_config))
    return assemble_page(source, metadata, blocks, settings.required_fields)


def build_page(path: Path, settings: Settings = None) -> Page:
    """Load a content file and run it through the full pipeline."""
    doc = load_document(path)
    return build_text(str(doc.path), doc.raw_text, settings)


def run_build(
    path: str,
    output_dir: Path,
    settings: Settings = None,
    ) -> list[tuple[Path, Path]]:
    """Build every content file under path into output_dir. Returns (source, html_path) pairs."""
    settings = settings or Settings()
    parser = make_parser(settings.parser_config)
    results = []
    for p in discover_files(Path(path), tuple(settings.extensions)):
        try:
            page = build_page(p, settings)
            html_path, _ = write_page(page, Path(output_dir), parser)
        except Exception as e:
            raise BuildError(p, e) from e
        results.append((p, html_path))
    log.info("build_complete", count=len(results), output_dir=str(output_dir))
    return results
