"""Code fix: synthesize documentation for a finding and splice it into the document.

@public
"""

from commentor.codefix.document import SourceDocument, SyntaxNodeRef, TextEdit
from commentor.codefix.fix_all import FixAllResult, fix_all
from commentor.codefix.patcher import NodeResolver, compute_edit, leading_trivia_start, patch
from commentor.codefix.synthesizer import render

FIX_TITLE = "Add comments"

__all__ = [
    "FIX_TITLE",
    "FixAllResult",
    "NodeResolver",
    "SourceDocument",
    "SyntaxNodeRef",
    "TextEdit",
    "compute_edit",
    "fix_all",
    "leading_trivia_start",
    "patch",
    "render",
]
