"""Unit tests for core/frontmatter/errors.py"""

from mdfront.core.frontmatter.errors import FrontmatterError, format_diagnostic, format_excerpt
from mdfront.core.models import Diagnostic, DiagnosticKind


def _diag(**kw):
    fields = dict(
        kind=DiagnosticKind.missing_space_before,
        message="Found ambiguous frontmatter fence",
        excerpt="---\nBar: 42\n---",
        start=0,
        end=1,
        line=2,
    )
    fields.update(kw)
    return Diagnostic(**fields)


def test_format_excerpt_numbers_lines():
    """Each excerpt line is prefixed with its source line number."""
    assert format_excerpt(_diag()) == "    2 | ---\n    3 | Bar: 42\n    4 | ---"


def test_format_diagnostic_message_first():
    """The rendered diagnostic starts with the message, followed by the excerpt."""
    text = format_diagnostic(_diag())
    assert text.startswith("Found ambiguous frontmatter fence\n    2 | ---")


def test_error_exposes_diagnostic():
    """FrontmatterError is a ValueError carrying the diagnostic."""
    cause = RuntimeError("boom")
    diag = _diag(kind=DiagnosticKind.corrupted_payload, cause=cause)
    err = FrontmatterError(diag)
    assert isinstance(err, ValueError)
    assert err.diagnostic is diag
    assert err.kind == DiagnosticKind.corrupted_payload
    assert err.excerpt == diag.excerpt
    assert err.cause is cause
    assert "    3 | Bar: 42" in str(err)


def test_adjacency_kinds():
    """Only the missing-space kinds are adjacency diagnostics."""
    adjacency = {k for k in DiagnosticKind if k.adjacency}
    assert adjacency == {DiagnosticKind.missing_space_before, DiagnosticKind.missing_space_after}
