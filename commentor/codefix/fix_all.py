"""Batch application of many findings to one document.

Every edit is computed independently against the original snapshot. Edits are
then merged: an edit overlapping one already accepted is skipped, and a finding
whose edit cannot be computed is recorded as failed without affecting the rest.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from commentor.analyzer.diagnostics import Finding
from commentor.codefix.document import SourceDocument, TextEdit
from commentor.codefix.patcher import NodeResolver, compute_edit
from commentor.exceptions import CommentorError
from commentor.logging import get_commentor_logger

logger = get_commentor_logger(__name__)

__all__ = ["FixAllResult", "fix_all"]


@dataclass(frozen=True)
class FixAllResult:
    """Outcome of a fix-all pass over one document."""

    document: SourceDocument
    applied: tuple[Finding, ...] = ()
    failed: tuple[tuple[Finding, str], ...] = ()  # (finding, error message)
    skipped: tuple[Finding, ...] = ()  # overlapping edits

    @property
    def changed(self) -> bool:
        return bool(self.applied)


def fix_all(
    document: SourceDocument,
    findings: Iterable[Finding],
    *,
    resolver: NodeResolver | None = None,
) -> FixAllResult:
    """Apply the fix for every finding to ``document`` and return the merged snapshot."""
    computed: list[tuple[TextEdit, Finding]] = []
    failed: list[tuple[Finding, str]] = []

    for finding in findings:
        try:
            edit = compute_edit(document, finding, resolver=resolver)
        except CommentorError as e:
            logger.warning("Cannot fix %s at %s: %s", finding.symbol_name, finding.location, e)
            failed.append((finding, str(e)))
            continue
        computed.append((edit, finding))

    accepted: list[tuple[TextEdit, Finding]] = []
    skipped: list[Finding] = []
    for edit, finding in sorted(computed, key=lambda item: (item[0].start, item[0].end)):
        if any(edit.overlaps(other) for other, _ in accepted):
            logger.warning("Skipping overlapping fix for %s at %s", finding.symbol_name, finding.location)
            skipped.append(finding)
            continue
        accepted.append((edit, finding))

    result = document
    for edit, _ in reversed(accepted):
        result = result.apply(edit)

    return FixAllResult(
        document=result,
        applied=tuple(finding for _, finding in accepted),
        failed=tuple(failed),
        skipped=tuple(skipped),
    )
