"""File discovery and markdown-it tokenization into a positioned Document"""

import hashlib
import re
from pathlib import Path

from markdown_it import MarkdownIt
from markdown_it.token import Token

from mdfront.core.models import Document, Node, NodeKind, ParsedDoc, Point, Position
from mdfront.core.utils.slug import slugify


MD_EXTENSIONS = {'.md', '.mdx'}

BLOCK_TYPE_MAP: dict[str, NodeKind] = {
    'heading_open':      NodeKind.heading,
    'hr':                NodeKind.thematic_break,
    'paragraph_open':    NodeKind.paragraph,
    'bullet_list_open':  NodeKind.list,
    'ordered_list_open': NodeKind.list,
    'fence':             NodeKind.code,
    'code_block':        NodeKind.code,
    'table_open':        NodeKind.table,
    'html_block':        NodeKind.html,
    'blockquote_open':   NodeKind.blockquote,
}

INLINE_TYPE_MAP: dict[str, NodeKind] = {
    'text':        NodeKind.text,
    'code_inline': NodeKind.inline_code,
}


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def source_hash(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def _normalize(text: str) -> str:
    """Use '\\n' line endings so source offsets agree with markdown-it's line map."""
    return text.replace('\r\n', '\n').replace('\r', '\n')


def _line_starts(text: str) -> list[int]:
    return [0] + [m.end() for m in re.finditer('\n', text)]


def _position(token: Token, starts: list[int], text: str) -> Position | None:
    """Convert a token's [start_line, end_line) map to offsets; end excludes the final newline."""
    if not token.map:
        return None
    first, stop = token.map
    last = min(stop, len(starts)) - 1
    end = starts[last + 1] - 1 if last + 1 < len(starts) else len(text)
    return Position(
        start=Point(line=first + 1, column=1, offset=starts[first]),
        end=Point(line=last + 1, column=end - starts[last] + 1, offset=end),
    )


def _heading_level(token: Token) -> int | None:
    """Extract heading level (1-6) from a heading_open token tag, else None."""
    if token.type == 'heading_open' and token.tag[:1] == 'h' and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None


def _inline_nodes(tokens: list[Token] | None) -> list[Node]:
    """Convert inline children to text/inlineCode/link nodes; links keep their text as children."""
    nodes: list[Node] = []
    link: Node | None = None
    for tok in tokens or []:
        if tok.type == 'link_open':
            link = Node(type=NodeKind.link, url=tok.attrGet('href'))
            nodes.append(link)
            continue
        if tok.type == 'link_close':
            link = None
            continue
        node = Node(type=INLINE_TYPE_MAP.get(tok.type, NodeKind.other), value=tok.content or None)
        (link.children if link else nodes).append(node)
    return nodes


def tokens_to_nodes(tokens: list[Token], text: str) -> list[Node]:
    """Convert top-level block tokens to positioned nodes in document order."""
    starts = _line_starts(text)
    nodes: list[Node] = []

    for i, tok in enumerate(tokens):
        if tok.level != 0 or tok.nesting < 0 or not tok.block:
            continue
        node = Node(
            type=BLOCK_TYPE_MAP.get(tok.type, NodeKind.other),
            depth=_heading_level(tok),
            position=_position(tok, starts, text),
        )
        if tok.nesting == 0 and tok.content:
            node.value = tok.content
        if tok.type in ('paragraph_open', 'heading_open') and i + 1 < len(tokens):
            node.children = _inline_nodes(tokens[i + 1].children)
        nodes.append(node)

    return nodes


def parse_markdown(text: str, parser_config: str = 'gfm-like') -> Document:
    """Parse markdown text into a Document of top-level nodes with source positions."""
    source = _normalize(text)
    tokens = _make_parser(parser_config).parse(source)
    return Document(source=source, children=tokens_to_nodes(tokens, source))


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def parse_file(path: Path, parser_config: str = 'gfm-like') -> ParsedDoc:
    """Parse a single markdown file into a ParsedDoc."""
    raw = path.read_text(encoding='utf-8')
    return ParsedDoc(
        path=path,
        slug=slugify(path.stem),
        raw_markdown=raw,
        hash=source_hash(raw),
        document=parse_markdown(raw, parser_config),
    )
