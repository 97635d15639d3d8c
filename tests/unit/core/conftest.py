"""Shared fixtures for core unit tests"""

import pytest

from mdpage.core.render import make_parser


SAMPLE_POST = """\
---
layout: post
title: Traverse all the things
date: 2015-03-01 12:00:00
categories: scala fp
---
Sometimes you have a list of options and want an option of a list.

## Sequence

```scala
val xs: List[Option[Int]] = List(Some(1), Some(2))
xs.sequence
// res0: Option[List[Int]] = Some(List(1, 2))
```

See [the cats docs](https://typelevel.org/cats/) for more.

# Wrapping up
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser("commonmark")


@pytest.fixture(name="sample_post")
def sample_post_fixture():
    return SAMPLE_POST


@pytest.fixture(name="post_file")
def post_file_fixture(tmp_path):
    f = tmp_path / "2015-03-01-traverse-all-the-things.md"
    f.write_text(SAMPLE_POST, encoding="utf-8")
    return f
