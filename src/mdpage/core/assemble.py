"""Combine parsed metadata and rendered blocks into a Page"""

from typing import Iterable

from mdpage.core.errors import EmptySlug, MissingRequiredField
from mdpage.core.models import Block, Metadata, Page
from mdpage.core.utils.slug import slug_from_source, slugify


REQUIRED_FIELDS = ('title',)


def assemble_page(
    source: str,
    metadata: Metadata,
    blocks: Iterable[Block],
    required: Iterable[str] = REQUIRED_FIELDS,
    ) -> Page:
    """Build an immutable Page keyed by the slug derived from source.

    The slug falls back to the slugified title when the file name has nothing
    left after the date prefix. Raises MissingRequiredField for the first
    required key absent from metadata, EmptySlug when no slug can be derived.
    """
    for field in required:
        if field not in metadata:
            raise MissingRequiredField(field, str(source))
    slug = slug_from_source(str(source)) or slugify(metadata.get('title', ''))
    if not slug:
        raise EmptySlug(str(source))
    return Page(
        source=str(source),
        slug=slug,
        metadata=metadata,
        blocks=tuple(blocks),
    )
