"""Project runner: discover C# files, analyze them, and apply fixes.

Each file is an independent unit. A file that cannot be read or decoded is
logged and skipped without affecting the others.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from commentor.analyzer.diagnostics import Finding
from commentor.analyzer.finder import find_undocumented
from commentor.codefix.document import SourceDocument
from commentor.codefix.fix_all import FixAllResult, fix_all
from commentor.csharp.extractor import extract_symbols
from commentor.csharp.parser import CSharpParser
from commentor.csharp.resolver import CSharpNodeResolver
from commentor.exceptions import CommentorError
from commentor.logging import get_commentor_logger
from commentor.settings import Settings, settings as default_settings

logger = get_commentor_logger(__name__)

__all__ = [
    "FileFixReport",
    "analyze_document",
    "analyze_paths",
    "fix_paths",
    "iter_source_files",
    "load_document",
]


@dataclass
class FileFixReport:
    """Result of fixing one file."""

    path: Path
    findings: list[Finding] = field(default_factory=list)
    result: FixAllResult | None = None
    error: str = ""
    written: bool = False

    @property
    def applied_count(self) -> int:
        return len(self.result.applied) if self.result else 0

    @property
    def failed_count(self) -> int:
        """Findings whose fix failed or was skipped as overlapping."""
        return len(self.result.failed) + len(self.result.skipped) if self.result else 0


def iter_source_files(paths: Iterable[Path], settings: Settings = default_settings) -> list[Path]:
    """Expand files and directories into a sorted list of source files."""
    extensions = {ext.lower() for ext in settings.file_extensions}
    skip = set(settings.skip_dirs)
    found: set[Path] = set()
    for path in paths:
        if path.is_file():
            if path.suffix.lower() in extensions:
                found.add(path)
            continue
        if not path.is_dir():
            logger.warning("Path does not exist: %s", path)
            continue
        for candidate in path.rglob("*"):
            if not candidate.is_file() or candidate.suffix.lower() not in extensions:
                continue
            if any(part in skip for part in candidate.relative_to(path).parts[:-1]):
                continue
            found.add(candidate)
    return sorted(found)


def load_document(path: Path, settings: Settings = default_settings) -> SourceDocument:
    """Read a file into a snapshot, preserving its line endings.

    Raises:
        CommentorError: If the file cannot be read or decoded.
    """
    try:
        with open(path, encoding=settings.encoding, newline="") as f:
            return SourceDocument(text=f.read(), path=path)
    except (OSError, UnicodeDecodeError) as e:
        raise CommentorError(f"Cannot read {path}: {e}") from e


def analyze_document(
    document: SourceDocument,
    settings: Settings = default_settings,
    parser: CSharpParser | None = None,
) -> list[Finding]:
    """Return the findings for every undocumented member of one snapshot."""
    root = (parser or CSharpParser()).parse(document.text)
    path = str(document.path) if document.path else None
    symbols = extract_symbols(root, document.text, path)
    if settings.public_only:
        symbols = [symbol for symbol in symbols if symbol.is_public]
    return find_undocumented(symbols, distinguish_setters=settings.distinguish_setters)


def analyze_paths(paths: Iterable[Path], settings: Settings = default_settings) -> dict[Path, list[Finding]]:
    """Analyze every source file under ``paths``. Files with findings map to their findings."""
    parser = CSharpParser()
    results: dict[Path, list[Finding]] = {}
    for source_file in iter_source_files(paths, settings):
        try:
            document = load_document(source_file, settings)
        except CommentorError as e:
            logger.warning("Skipping %s: %s", source_file, e)
            continue
        findings = analyze_document(document, settings, parser)
        logger.debug("%s: %d findings", source_file, len(findings))
        if findings:
            results[source_file] = findings
    return results


def fix_paths(paths: Iterable[Path], settings: Settings = default_settings, dry_run: bool = False) -> list[FileFixReport]:
    """Document every undocumented member under ``paths``, writing files unless ``dry_run``."""
    parser = CSharpParser()
    resolver = CSharpNodeResolver(parser)
    reports: list[FileFixReport] = []
    for source_file in iter_source_files(paths, settings):
        report = FileFixReport(path=source_file)
        reports.append(report)
        try:
            document = load_document(source_file, settings)
        except CommentorError as e:
            logger.warning("Skipping %s: %s", source_file, e)
            report.error = str(e)
            continue

        report.findings = analyze_document(document, settings, parser)
        if not report.findings:
            continue

        report.result = fix_all(document, report.findings, resolver=resolver)
        if report.result.changed and not dry_run:
            with open(source_file, "w", encoding=settings.encoding, newline="") as f:
                f.write(report.result.document.text)
            report.written = True
            logger.info("Documented %d members in %s", report.applied_count, source_file)
    return reports
