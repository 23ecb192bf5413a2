"""Finder: decides which symbols are undocumented and what to say about them.

@public
"""

from commentor.analyzer.diagnostics import (
    DIAGNOSTIC_ID,
    PARAMETER_PREFIX,
    RETURNS_KEY,
    RULE,
    SUMMARY_KEY,
    DiagnosticDescriptor,
    Finding,
    Severity,
)
from commentor.analyzer.finder import (
    evaluate_method,
    evaluate_property,
    evaluate_symbol,
    evaluate_type,
    find_undocumented,
)
from commentor.analyzer.naming import humanize, is_accessor_name
from commentor.analyzer.symbols import (
    SourceLocation,
    Symbol,
    SymbolInfo,
    SymbolKind,
    is_documented,
)

__all__ = [
    "DIAGNOSTIC_ID",
    "PARAMETER_PREFIX",
    "RETURNS_KEY",
    "RULE",
    "SUMMARY_KEY",
    "DiagnosticDescriptor",
    "Finding",
    "Severity",
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
    "is_accessor_name",
    "is_documented",
]
