"""Frontmatter extraction entry points: scan -> classify -> splice"""

from mdfront.core.frontmatter.classify import classify
from mdfront.core.frontmatter.scan import scan
from mdfront.core.frontmatter.splice import apply_frontmatter
from mdfront.core.models import Classified, Document


def find_frontmatter(document: Document) -> list[Classified]:
    """Return every frontmatter block and diagnostic in document order, without splicing."""
    return classify(scan(document), document)


def extract_frontmatter(document: Document, strict: bool = True) -> Document:
    """Splice confirmed frontmatter blocks into yaml nodes; raise on the first diagnostic if strict."""
    return apply_frontmatter(document, find_frontmatter(document), strict=strict)
