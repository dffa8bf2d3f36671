"""Apply classified frontmatter blocks to a document's node list"""

from mdfront.core.frontmatter.errors import FrontmatterError, format_diagnostic
from mdfront.core.models import (
    Classified,
    Diagnostic,
    Document,
    FrontmatterBlock,
    Node,
    NodeKind,
    Position,
)
from mdfront.utils.logging import get_logger


logger = get_logger(__name__)


def _yaml_node(covered: list[Node], payload: dict) -> Node:
    """Collapse the nodes of one block into a single yaml node."""
    first, last = covered[0].position, covered[-1].position
    position = Position(start=first.start, end=last.end) if first and last else None
    return Node(type=NodeKind.yaml, position=position, payload=payload)


def _confirmed(items: list[Classified], strict: bool) -> list[FrontmatterBlock]:
    blocks = []
    for item in items:
        if isinstance(item, Diagnostic):
            if strict:
                raise FrontmatterError(item) from item.cause
            logger.warning("Skipping %s\n%s", item.kind.value, format_diagnostic(item))
            continue
        blocks.append(item)
    return blocks


def apply_frontmatter(document: Document, items: list[Classified], strict: bool = True) -> Document:
    """Replace each block's node range with one yaml node, in place.

    In strict mode the first diagnostic raises FrontmatterError and the
    document is left untouched; otherwise diagnostics are logged and skipped.
    """
    blocks = iter(_confirmed(items, strict))
    block = next(blocks, None)
    if block is None:
        return document

    children = document.children
    rebuilt: list[Node] = []
    idx = 0
    while idx < len(children):
        if block is not None and idx == block.start:
            rebuilt.append(_yaml_node(children[block.start:block.end + 1], block.payload))
            idx = block.end + 1
            block = next(blocks, None)
        else:
            rebuilt.append(children[idx])
            idx += 1

    children[:] = rebuilt
    return document
