"""Commentor - find undocumented C# members and synthesize their documentation.

@public

Commentor reads C# sources with tree-sitter and reports every type, method and
property that carries no /// documentation comment. Each report (a Finding)
holds a flat mapping of prose fragments derived from the member's name and
signature. The code fix renders that mapping as a documentation block and
splices it in front of the member at the member's indentation.

Quick Start:
    >>> from commentor import SourceDocument, analyze_document, fix_all
    >>>
    >>> document = SourceDocument("public class OrderProcessor { }\\n")
    >>> findings = analyze_document(document)
    >>> print(fix_all(document, findings).document.text)

Command line:
    commentor check src/
    commentor fix --dry-run src/

Environment Variables:
    - COMMENTOR_PUBLIC_ONLY: Only report public members
    - COMMENTOR_DISTINGUISH_SETTERS: "Gets or Sets" summaries for settable properties
    - COMMENTOR_LOG_LEVEL: Default log level
"""

from .analyzer import (
    RULE,
    Finding,
    SourceLocation,
    Symbol,
    SymbolInfo,
    SymbolKind,
    evaluate_method,
    evaluate_property,
    evaluate_symbol,
    evaluate_type,
    find_undocumented,
    humanize,
)
from .codefix import FixAllResult, SourceDocument, TextEdit, fix_all, patch, render
from .csharp import CSharpNodeResolver, CSharpParser, extract_symbols
from .exceptions import CommentorError, MalformedFindingError, SourceParseError, UnresolvedLocationError
from .logging import LoggingConfig, get_commentor_logger, setup_logging
from .logging import get_commentor_logger as get_logger
from .runner import analyze_document, analyze_paths, fix_paths
from .settings import Settings, settings

__version__ = "0.1.0"

__all__ = [
    # Config/Settings
    "Settings",
    "settings",
    # Logging
    "get_logger",
    "get_commentor_logger",
    "LoggingConfig",
    "setup_logging",
    # Errors
    "CommentorError",
    "MalformedFindingError",
    "SourceParseError",
    "UnresolvedLocationError",
    # Finder
    "RULE",
    "Finding",
    "SourceLocation",
    "Symbol",
    "SymbolInfo",
    "SymbolKind",
    "evaluate_method",
    "evaluate_property",
    "evaluate_symbol",
    "evaluate_type",
    "find_undocumented",
    "humanize",
    # Code fix
    "FixAllResult",
    "SourceDocument",
    "TextEdit",
    "fix_all",
    "patch",
    "render",
    # C# host
    "CSharpNodeResolver",
    "CSharpParser",
    "extract_symbols",
    # Runner
    "analyze_document",
    "analyze_paths",
    "fix_paths",
]
