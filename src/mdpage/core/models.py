"""Data models for the load, parse, render, and assemble pipeline"""

import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Annotated, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from mdpage.core.utils.slug import slugify, split_date_prefix


Metadata = dict[str, str]

ISO_DATE_RE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})')
CATEGORY_SEP_RE = re.compile(r'[\s,]+')


@dataclass(frozen=True)
class Document:
    """Raw file contents as read by the loader; not persisted."""
    path:     Path
    raw_text: str


class Link(BaseModel):
    """An inline [label](url) link, or a paragraph made of exactly one."""
    model_config = ConfigDict(frozen=True)
    kind: Literal['link'] = 'link'
    label: str
    url: str


class Paragraph(BaseModel):
    """Consecutive non-blank prose lines."""
    model_config = ConfigDict(frozen=True)
    kind: Literal['paragraph'] = 'paragraph'
    text: str
    links: tuple[Link, ...] = ()    # inline links in source order


class Heading(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal['heading'] = 'heading'
    level: int = Field(ge=1)
    text: str


class CodeFence(BaseModel):
    """Verbatim source sample; content is never re-parsed."""
    model_config = ConfigDict(frozen=True)
    kind: Literal['code_fence'] = 'code_fence'
    language: Optional[str] = None
    content: str


Block = Annotated[Union[Paragraph, Heading, CodeFence, Link], Field(discriminator='kind')]


class Page(BaseModel):
    """Assembled output unit handed to an external renderer."""
    model_config = ConfigDict(frozen=True)
    source: str
    slug: str
    metadata: Mapping[str, str] = Field(default={}, validate_default=True)
    blocks: tuple[Block, ...] = ()

    @field_validator('metadata')
    @classmethod
    def _freeze_metadata(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer('metadata')
    def _dump_metadata(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    @property
    def title(self) -> str:
        return self.metadata.get('title', '')

    @property
    def date(self) -> Optional[str]:
        """ISO date (yyyy-mm-dd) from the date field, else from the filename prefix."""
        m = ISO_DATE_RE.match(self.metadata.get('date', ''))
        if m:
            return m.group(0)
        date, _ = split_date_prefix(Path(self.source).name)
        return date

    @property
    def categories(self) -> tuple[str, ...]:
        """Space or comma separated names; a bracketed [a, b] list is accepted too."""
        raw = self.metadata.get('categories', '').strip().strip('[]')
        return tuple(c.strip('"\'') for c in CATEGORY_SEP_RE.split(raw) if c.strip('"\''))

    @property
    def permalink(self) -> str:
        """Site-relative URL: /<categories>/<yyyy>/<mm>/<dd>/<slug>.html"""
        parts = [s for s in (slugify(c) for c in self.categories) if s]
        if self.date:
            parts.extend(self.date.split('-'))
        parts.append(f"{self.slug}.html")
        return '/' + '/'.join(parts)
