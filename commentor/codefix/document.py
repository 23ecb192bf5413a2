"""Immutable document snapshots and text edits.

A SourceDocument is never mutated: applying an edit returns a new snapshot, so
several fixes computed against the same snapshot cannot interfere.
"""

from dataclasses import dataclass, replace
from pathlib import Path

__all__ = ["SourceDocument", "SyntaxNodeRef", "TextEdit"]


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace ``text[start:end]`` with ``new_text``. Offsets are character indices."""

    start: int
    end: int
    new_text: str

    def overlaps(self, other: "TextEdit") -> bool:
        """True when the two edits touch the same text or insert at the same point."""
        if self.start == other.start:
            return True
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True, slots=True)
class SyntaxNodeRef:
    """Declaration node located by a resolver: its kind, start offset and start column."""

    kind: str
    start: int
    column: int


@dataclass(frozen=True)
class SourceDocument:
    """Snapshot of one source file's text."""

    text: str
    path: Path | None = None

    @property
    def newline(self) -> str:
        return "\r\n" if "\r\n" in self.text else "\n"

    def offset_of(self, line: int, column: int) -> int:
        """Character offset of a 0-based (line, column) position."""
        offset = 0
        for _ in range(line):
            newline_at = self.text.find("\n", offset)
            if newline_at == -1:
                raise ValueError(f"Line {line} is past the end of the document")
            offset = newline_at + 1
        return offset + column

    def apply(self, edit: TextEdit) -> "SourceDocument":
        """Return a new snapshot with the edit applied."""
        if not 0 <= edit.start <= edit.end <= len(self.text):
            raise ValueError(f"Edit span {edit.start}..{edit.end} is outside the document")
        return replace(self, text=self.text[: edit.start] + edit.new_text + self.text[edit.end :])
