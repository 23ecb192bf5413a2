"""Resolve a source location to the C# declaration node that owns it."""

from commentor.analyzer.symbols import SourceLocation
from commentor.codefix.document import SourceDocument, SyntaxNodeRef
from commentor.csharp.helpers import DECLARATIONS, byte_offset, char_column, char_offset
from commentor.csharp.parser import CSharpParser


class CSharpNodeResolver:
    """Finds the innermost declaration enclosing a location by re-parsing the snapshot."""

    def __init__(self, parser: CSharpParser | None = None) -> None:
        self.parser = parser or CSharpParser()

    def find_node(self, document: SourceDocument, location: SourceLocation) -> SyntaxNodeRef | None:
        """Return the declaration at ``location``, or None when nothing declares there."""
        text = document.text
        try:
            start = document.offset_of(location.start_line, location.start_column)
            end = document.offset_of(location.end_line, location.end_column)
        except ValueError:
            return None
        if start > len(text) or end > len(text) or start > end:
            return None

        root = self.parser.parse(text)
        source = text.encode("utf-8")
        node = root.descendant_for_byte_range(byte_offset(text, start), byte_offset(text, end))
        while node is not None and node.type not in DECLARATIONS:
            node = node.parent
        if node is None:
            return None

        return SyntaxNodeRef(
            kind=node.type,
            start=char_offset(source, node.start_byte),
            column=char_column(source, node.start_byte),
        )
