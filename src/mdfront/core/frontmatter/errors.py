"""Frontmatter diagnostics rendering and the exception raised for them"""

from mdfront.core.models import Diagnostic, DiagnosticKind


MESSAGES: dict[DiagnosticKind, str] = {
    DiagnosticKind.missing_space_before: (
        "Found ambiguous frontmatter fence: no empty line before it. "
        "Make sure your frontmatter blocks start the document or follow an empty line "
        "and your horizontal rules have an empty line before AND after them."
    ),
    DiagnosticKind.missing_space_after: (
        "Found ambiguous frontmatter fence: no empty line after it. "
        "Make sure your frontmatter blocks end the document or are followed by an empty line "
        "and your horizontal rules have an empty line before AND after them."
    ),
    DiagnosticKind.empty_line: (
        "Found ambiguous frontmatter block: block contains an empty line. "
        "Make sure your frontmatter blocks contain no empty lines "
        "and your horizontal rules have an empty line before AND after them."
    ),
    DiagnosticKind.forbidden_payload: (
        "Found ambiguous frontmatter block: block contains valid yaml, but its data type is {type} "
        "instead of a mapping. Make sure your yaml blocks contain only key-value pairs at the root level."
    ),
    DiagnosticKind.corrupted_payload: "Exception occurred while parsing yaml: {cause}",
}


def format_excerpt(diagnostic: Diagnostic) -> str:
    """Render the excerpt as '    <lineNo> | <line>' rows starting at the first fence's line."""
    return "\n".join(
        f"    {no} | {line}"
        for no, line in enumerate(diagnostic.excerpt.split("\n"), start=diagnostic.line)
    )


def format_diagnostic(diagnostic: Diagnostic) -> str:
    return f"{diagnostic.message}\n{format_excerpt(diagnostic)}"


class FrontmatterError(ValueError):
    """Raised for the first frontmatter diagnostic of a strict extraction."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(format_diagnostic(diagnostic))
        self.diagnostic = diagnostic

    @property
    def kind(self) -> DiagnosticKind:
        return self.diagnostic.kind

    @property
    def excerpt(self) -> str:
        return self.diagnostic.excerpt

    @property
    def cause(self) -> Exception | None:
        return self.diagnostic.cause
