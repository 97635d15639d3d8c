"""Export: render a Page to HTML and write HTML + sidecar JSON files"""

from pathlib import Path

import structlog
from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

from mdpage.core.errors import UnsafeOutputPath
from mdpage.core.models import Block, CodeFence, Heading, Link, Page, Paragraph
from mdpage.core.render import make_parser


log = structlog.get_logger(__name__)


def render_block(block: Block, parser: MarkdownIt) -> str:
    """Return the HTML fragment for a single block."""
    if isinstance(block, Heading):
        level = min(max(block.level, 1), 6)
        return f"<h{level}>{parser.renderInline(block.text)}</h{level}>"
    if isinstance(block, Paragraph):
        return f"<p>{parser.renderInline(block.text)}</p>"
    if isinstance(block, Link):
        return f'<p><a href="{escapeHtml(block.url)}">{escapeHtml(block.label)}</a></p>'
    if isinstance(block, CodeFence):
        cls = f' class="language-{escapeHtml(block.language)}"' if block.language else ''
        return f"<pre><code{cls}>{escapeHtml(block.content)}</code></pre>"
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def render_html(page: Page, parser: MarkdownIt = None) -> str:
    """Return the page body as an HTML fragment, one element per block."""
    parser = parser or make_parser()
    return "\n".join(render_block(b, parser) for b in page.blocks) + "\n"


def build_document(page: Page, parser: MarkdownIt = None) -> str:
    """Wrap the rendered body in a minimal standalone HTML document."""
    title = escapeHtml(page.title)
    return (
        "<!DOCTYPE html>\n"
        f"<html>\n<head>\n<meta charset=\"utf-8\">\n<title>{title}</title>\n</head>\n"
        f"<body>\n<article>\n{render_html(page, parser)}</article>\n</body>\n</html>\n"
    )


def write_page(page: Page, output_dir: Path, parser: MarkdownIt = None) -> tuple[Path, Path]:
    """Write HTML + sidecar JSON for a single page.

    Output path follows the permalink:
      output_dir / <categories> / <yyyy>/<mm>/<dd> / <slug>.{html|json}

    Returns (html_path, json_path).
    """
    html_path = Path(output_dir) / page.permalink.lstrip('/')
    if not html_path.resolve().is_relative_to(Path(output_dir).resolve()):
        raise UnsafeOutputPath(html_path, output_dir)
    json_path = html_path.with_suffix('.json')
    html_path.parent.mkdir(parents=True, exist_ok=True)

    html_path.write_text(build_document(page, parser), encoding='utf-8')
    json_path.write_text(page.model_dump_json(indent=2), encoding='utf-8')
    log.info("page_written", slug=page.slug, path=str(html_path))
    return html_path, json_path
