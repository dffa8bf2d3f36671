"""Document tree, fence, and extraction result models"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, Field


class NodeKind(str, Enum):
    heading = "heading"
    thematic_break = "thematicBreak"
    paragraph = "paragraph"
    yaml = "yaml"                   # spliced frontmatter block
    embed = "embed"
    list = "list"
    code = "code"
    table = "table"
    html = "html"
    blockquote = "blockquote"
    text = "text"
    inline_code = "inlineCode"
    link = "link"
    other = "other"


class Point(BaseModel):
    line:   int                     # 1-based
    column: int                     # 1-based
    offset: int                     # 0-based index into Document.source


class Position(BaseModel):
    start: Point
    end:   Point                    # end.offset is exclusive, final newline excluded


class Node(BaseModel):
    """A single mdast-style node; block nodes may carry inline children."""
    type:     NodeKind
    depth:    Optional[int] = None  # heading level (1-6); None for non-headings
    position: Optional[Position] = None
    value:    Optional[str] = None
    url:      Optional[str] = None
    payload:  Optional[dict[Any, Any]] = None
    children: list["Node"] = Field(default_factory=list)


class Document(BaseModel):
    """Normalized source text plus the ordered top-level block nodes."""
    source:   str
    children: list[Node] = Field(default_factory=list)


class ExtractedDoc(BaseModel):
    """Public output contract written by extract, read back by validate."""
    slug:        str
    path:        str
    hash:        str
    frontmatter: dict[Any, Any] = {}    # all blocks merged in document order
    blocks:      list[dict[Any, Any]] = []
    document:    Document


@dataclass
class ParsedDoc:
    """Internal parse result; not persisted."""
    path:         Path
    slug:         str
    raw_markdown: str
    hash:         str
    document:     Document


class FenceKind(str, Enum):
    heading = "heading"             # settext h2 underline
    thematic_break = "thematicBreak"
    end = "end"                     # end-of-document sentinel


@dataclass(frozen=True)
class FenceCandidate:
    node_index:   int
    kind:         FenceKind
    separator:    tuple[int, int]   # [start, end) of the '---' line, newline excluded
    blank_before: bool
    blank_after:  bool

    @property
    def standalone(self) -> bool:
        """True if the fence reads as a complete rule or heading underline on its own."""
        return self.blank_after and (self.kind != FenceKind.thematic_break or self.blank_before)


class DiagnosticKind(str, Enum):
    missing_space_before = "MissingSpaceBefore"
    missing_space_after = "MissingSpaceAfter"
    empty_line = "EmptyLineInFrontmatter"
    forbidden_payload = "ForbiddenYamlPayload"
    corrupted_payload = "CorruptedYamlPayload"

    @property
    def ambiguous(self) -> bool:
        """All kinds except corrupted YAML describe blocks that might not be frontmatter."""
        return self is not DiagnosticKind.corrupted_payload

    @property
    def adjacency(self) -> bool:
        return self in (DiagnosticKind.missing_space_before, DiagnosticKind.missing_space_after)


@dataclass(frozen=True)
class FrontmatterBlock:
    start:   int                    # node index of the opening fence
    end:     int                    # node index of the closing fence (inclusive)
    payload: dict[Any, Any]


@dataclass(frozen=True)
class Diagnostic:
    kind:    DiagnosticKind
    message: str
    excerpt: str                    # verbatim source from the first through the last fence
    start:   int
    end:     int
    line:    int                    # 1-based line of the first fence
    cause:   Optional[Exception] = None


Classified = Union[FrontmatterBlock, Diagnostic]
