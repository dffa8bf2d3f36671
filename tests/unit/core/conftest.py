"""Shared fixtures for core unit tests"""

import pytest
from markdown_it import MarkdownIt

from mdfront.core.parse import parse_markdown


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

Heading 2
---

- item one
- item two

```python
print("hello")
```

---

Footer paragraph.
"""

SAMPLE_FM_MD = """\
---
title: Test Doc
slug: test-doc
tags: [a, b]
---

# Title

Body content.
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return MarkdownIt("gfm-like", options_update={"linkify": False})


@pytest.fixture(name="md")
def md_fixture():
    """Parse a markdown string into a Document."""
    return parse_markdown


@pytest.fixture(name="sample_doc")
def sample_doc_fixture():
    return parse_markdown(SAMPLE_MD)


@pytest.fixture(name="sample_fm_doc")
def sample_fm_doc_fixture():
    return parse_markdown(SAMPLE_FM_MD)
