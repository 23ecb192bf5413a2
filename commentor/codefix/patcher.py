"""Splice a rendered comment block into a document as a member's leading trivia."""

from typing import Protocol

from commentor.analyzer.diagnostics import Finding
from commentor.analyzer.symbols import SourceLocation
from commentor.codefix.document import SourceDocument, SyntaxNodeRef, TextEdit
from commentor.codefix.synthesizer import render
from commentor.exceptions import UnresolvedLocationError
from commentor.logging import get_commentor_logger

logger = get_commentor_logger(__name__)


class NodeResolver(Protocol):
    """Host lookup from a source location to the enclosing declaration node."""

    def find_node(self, document: SourceDocument, location: SourceLocation) -> SyntaxNodeRef | None: ...


def _default_resolver() -> NodeResolver:
    from commentor.csharp.resolver import CSharpNodeResolver  # noqa: PLC0415

    return CSharpNodeResolver()


def leading_trivia_start(text: str, node_start: int) -> int:
    """Start offset of the whitespace trivia owned by the node beginning at ``node_start``.

    The trivia is the indentation before the node plus any wholly blank lines
    directly above it. The line break ending the previous non-blank line
    belongs to that line and is kept.
    """
    start = node_start
    while start > 0 and text[start - 1] in " \t":
        start -= 1
    if start > 0 and text[start - 1] != "\n":
        # Code precedes the node on the same line
        return start

    while start > 0:
        line_end = start - 1
        line_start = text.rfind("\n", 0, line_end) + 1
        if text[line_start:line_end].strip():
            break
        start = line_start
    return start


def compute_edit(
    document: SourceDocument,
    finding: Finding,
    location: SourceLocation | None = None,
    *,
    resolver: NodeResolver | None = None,
) -> TextEdit:
    """Build the edit that documents the member a finding points at.

    Raises:
        UnresolvedLocationError: No declaration node at the location.
        MalformedFindingError: The finding cannot be rendered.
    """
    target = location or finding.location
    node = (resolver or _default_resolver()).find_node(document, target)
    if node is None:
        raise UnresolvedLocationError(f"No declaration found at {target} for {finding.symbol_name!r}")

    block = render(finding, node.column, document.newline)
    edit = TextEdit(start=leading_trivia_start(document.text, node.start), end=node.start, new_text=block)
    logger.debug("Documenting %s %s at column %d", node.kind, finding.symbol_name, node.column)
    return edit


def patch(
    document: SourceDocument,
    finding: Finding,
    location: SourceLocation | None = None,
    *,
    resolver: NodeResolver | None = None,
) -> SourceDocument:
    """Return a new snapshot whose member at the finding's location carries the synthesized comment."""
    return document.apply(compute_edit(document, finding, location, resolver=resolver))
