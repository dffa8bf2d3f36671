"""Pipeline step functions: extract, lint, and validate orchestration"""

from pathlib import Path

from mdfront.config import Settings
from mdfront.core.embeds import find_embeds
from mdfront.core.frontmatter.extract import extract_frontmatter, find_frontmatter
from mdfront.core.models import Diagnostic, ExtractedDoc, NodeKind, ParsedDoc
from mdfront.core.parse import discover_files, parse_file
from mdfront.core.utils.slug import slugify
from mdfront.core.validate import ValidatorOptions, get_validator
from mdfront.utils.logging import get_logger


logger = get_logger(__name__)


def process_doc(parsed: ParsedDoc, settings: Settings) -> ExtractedDoc:
    """Run embed detection and frontmatter extraction over a parsed document."""
    document = parsed.document
    if settings.detect_embeds:
        find_embeds(document)
    extract_frontmatter(document, strict=settings.strict)

    blocks = [n.payload for n in document.children if n.type == NodeKind.yaml]
    frontmatter: dict = {}
    for payload in blocks:
        frontmatter.update(payload)     # later blocks win

    return ExtractedDoc(
        slug=slugify(frontmatter['slug']) if frontmatter.get('slug') else parsed.slug,
        path=str(parsed.path),
        hash=parsed.hash,
        frontmatter=frontmatter,
        blocks=blocks,
        document=document,
    )


def run_extract(path: str, settings: Settings) -> list[tuple[Path, Path]]:
    """Extract each file under path to <output_dir>/<slug>.json. Returns (source_path, output_file) pairs."""
    output_dir = Path(settings.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    results = []
    for p in discover_files(Path(path)):
        logger.debug("Extracting %s", p)
        try:
            extracted = process_doc(parse_file(p, settings.parser_config), settings)
            out_file = output_dir / f"{extracted.slug}.json"
            out_file.write_text(extracted.model_dump_json(indent=2))
            results.append((p, out_file))
        except Exception as e:
            raise RuntimeError(f"Failed to extract {p}: {e}") from e
    return results


def run_lint(path: str, parser_config: str) -> list[tuple[Path, Diagnostic]]:
    """Collect every frontmatter diagnostic under path without modifying anything."""
    found = []
    for p in discover_files(Path(path)):
        document = parse_file(p, parser_config).document
        found.extend((p, item) for item in find_frontmatter(document) if isinstance(item, Diagnostic))
    logger.debug("Lint found %d diagnostic(s)", len(found))
    return found


def run_validate(path: str, strict: bool = False) -> list[Path]:
    """Validate extracted JSON (a file or a directory of *.json). Returns the validated files."""
    root = Path(path)
    files = [root] if root.is_file() else sorted(root.glob('*.json'))
    validate = get_validator(ValidatorOptions(strict=strict))
    for f in files:
        validate(f.read_text(encoding='utf-8'))
    return files
