"""Integration tests for the load -> parse -> render -> assemble -> export pipeline.

Each test runs the pipeline against the canonical post below and asserts
stable expected values. Read this file top-to-bottom as a reference for what
each stage produces with default settings.

Canonical post (_posts/2015-03-01-traverse-all-the-things.md)
--------------------------------------------------------------
    ---
    layout: post
    title: Traverse all the things
    date: 2015-03-01 12:00:00
    categories: scala fp
    ---

    # Introduction

    Given a list of options, `sequence` flips it inside out.

    ```scala
    # not a heading
    List(Some(1), None).sequence
    // res0: Option[List[Int]] = None
    ```

    [Next: applicatives](/2015/03/08/applicatives.html)

Block layout (4 blocks):
    [heading h1]   "Introduction"
    [paragraph]    "Given a list of options, ..."
    [code_fence]   scala, 3 verbatim lines
    [link]         "Next: applicatives"

Output path: <out>/scala/fp/2015/03/01/traverse-all-the-things.{html,json}
"""

import json

import pytest

from mdpage.config import Settings
from mdpage.core.errors import BuildError, MissingRequiredField, NotFound
from mdpage.core.models import CodeFence, Heading, Link, Paragraph
from mdpage.core.pipeline import build_page, build_text, run_build


CANONICAL_MD = """\
---
layout: post
title: Traverse all the things
date: 2015-03-01 12:00:00
categories: scala fp
---

# Introduction

Given a list of options, `sequence` flips it inside out.

```scala
# not a heading
List(Some(1), None).sequence
// res0: Option[List[Int]] = None
```

[Next: applicatives](/2015/03/08/applicatives.html)
"""

FENCE_CONTENT = """\
# not a heading
List(Some(1), None).sequence
// res0: Option[List[Int]] = None"""


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path):
    d = tmp_path / "_posts"
    d.mkdir()
    (d / "2015-03-01-traverse-all-the-things.md").write_text(CANONICAL_MD, encoding="utf-8")
    return d


def test_build_page_metadata(posts_dir):
    page = build_page(posts_dir / "2015-03-01-traverse-all-the-things.md")
    assert page.metadata == {
        "layout": "post",
        "title": "Traverse all the things",
        "date": "2015-03-01 12:00:00",
        "categories": "scala fp",
    }
    assert page.slug == "traverse-all-the-things"


def test_build_page_blocks(posts_dir):
    page = build_page(posts_dir / "2015-03-01-traverse-all-the-things.md")
    assert page.blocks == (
        Heading(level=1, text="Introduction"),
        Paragraph(text="Given a list of options, `sequence` flips it inside out."),
        CodeFence(language="scala", content=FENCE_CONTENT),
        Link(label="Next: applicatives", url="/2015/03/08/applicatives.html"),
    )


def test_build_page_permalink(posts_dir):
    page = build_page(posts_dir / "2015-03-01-traverse-all-the-things.md")
    assert page.permalink == "/scala/fp/2015/03/01/traverse-all-the-things.html"


def test_build_text_minimal():
    """The minimal header + one line scenario."""
    page = build_text("x.md", "---\ntitle: X\n---\nHello")
    assert page.metadata == {"title": "X"}
    assert page.blocks == (Paragraph(text="Hello"),)


def test_build_text_without_header_requires_nothing_when_configured():
    """With no required fields, a headerless text renders as all body."""
    page = build_text("notes.md", "# Notes\n\nplain\n", Settings(required_fields=[]))
    assert page.metadata == {}
    assert [b.kind for b in page.blocks] == ["heading", "paragraph"]


def test_build_text_missing_title():
    with pytest.raises(MissingRequiredField):
        build_text("x.md", "---\nlayout: post\n---\nBody\n")


def test_build_page_missing_file(tmp_path):
    with pytest.raises(NotFound):
        build_page(tmp_path / "missing.md")


def test_run_build_writes_files(posts_dir, tmp_path):
    """run_build writes HTML + JSON at the permalink path and returns pairs."""
    out = tmp_path / "site"
    results = run_build(str(posts_dir), out)
    assert len(results) == 1
    src, html_path = results[0]
    assert src.name == "2015-03-01-traverse-all-the-things.md"
    assert html_path == out / "scala" / "fp" / "2015" / "03" / "01" / "traverse-all-the-things.html"

    html = html_path.read_text()
    assert "<h1>Introduction</h1>" in html
    assert '<pre><code class="language-scala"># not a heading' in html

    data = json.loads(html_path.with_suffix(".json").read_text())
    assert data["blocks"][2]["content"] == FENCE_CONTENT


def test_run_build_wraps_failures_with_path(posts_dir, tmp_path):
    """A per-document failure is re-raised as BuildError naming the source."""
    (posts_dir / "2015-04-01-untitled.md").write_text("---\nlayout: post\n---\nBody\n")
    with pytest.raises(BuildError, match="untitled.md") as exc:
        run_build(str(posts_dir), tmp_path / "site")
    assert isinstance(exc.value.__cause__, MissingRequiredField)


def test_run_build_missing_path(tmp_path):
    with pytest.raises(NotFound):
        run_build(str(tmp_path / "nope"), tmp_path / "site")
