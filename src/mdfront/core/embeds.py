"""Embed detection: turn absolute-URL inline code and link paragraphs into embed nodes"""

import re
from urllib.parse import urlsplit

from mdfront.core.models import Document, Node, NodeKind
from mdfront.utils.logging import get_logger


logger = get_logger(__name__)

GATSBY_EMBED_RE = re.compile(r'^[a-z]+: +(http.*)$')


def _absolute(url: str | None) -> str | None:
    """Return url if it is an absolute reference (a scheme and no fragment), else None."""
    if not url:
        return None
    parts = urlsplit(url)
    if parts.scheme and not parts.fragment:
        return parts.geturl()
    return None


def gatsby_embed(node: Node) -> str | None:
    """Inline code like `video: https://www.youtube.com/embed/2Xc9gXyf2G4`."""
    if node.type != NodeKind.inline_code or not node.value:
        return None
    m = GATSBY_EMBED_RE.match(node.value)
    return _absolute(m.group(1)) if m else None


def link_embed(node: Node) -> str | None:
    """Paragraph opening with a link to an absolute url."""
    if node.type != NodeKind.paragraph or not node.children:
        return None
    first = node.children[0]
    return _absolute(first.url) if first.type == NodeKind.link else None


def _embed(node: Node, url: str) -> None:
    """Turn node into an embed in place, keeping a copy of the original as its child."""
    original = node.model_copy()
    node.type = NodeKind.embed
    node.url = url
    node.value = None
    node.children = [original]


def _walk(nodes: list[Node]) -> int:
    count = 0
    for node in nodes:
        url = gatsby_embed(node) or link_embed(node)
        if url:
            _embed(node, url)
            count += 1
        else:
            count += _walk(node.children)
    return count


def find_embeds(document: Document) -> Document:
    """Mark embeds throughout the document tree, in place."""
    count = _walk(document.children)
    logger.debug("Found %d embed(s)", count)
    return document
