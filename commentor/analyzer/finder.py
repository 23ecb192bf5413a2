"""Detection of undocumented types, methods and properties.

Each evaluation reads only its own symbol and allocates only local data, so
symbols may be evaluated in any order or concurrently.
"""

from collections.abc import Iterable

from commentor.analyzer.diagnostics import PARAMETER_PREFIX, RETURNS_KEY, SUMMARY_KEY, Finding
from commentor.analyzer.naming import humanize, is_accessor_name
from commentor.analyzer.symbols import Symbol, SymbolKind, is_documented
from commentor.exceptions import CommentorError
from commentor.logging import get_commentor_logger

logger = get_commentor_logger(__name__)

RESULT_TEXT = "The result."


def _finding(symbol: Symbol, properties: dict[str, str]) -> Finding:
    return Finding(
        symbol_name=symbol.name,
        symbol_kind=symbol.kind,
        location=symbol.location,
        properties=properties,
    )


def evaluate_method(symbol: Symbol) -> Finding | None:
    """Report an undocumented method. Accessor methods are never reported."""
    if is_accessor_name(symbol.name):
        return None

    if is_documented(symbol):
        return None

    properties: dict[str, str] = {SUMMARY_KEY: f"The {humanize(symbol.name)}."}

    if symbol.returns_value:
        properties[RETURNS_KEY] = RESULT_TEXT

    for parameter in symbol.parameters:
        properties[f"{PARAMETER_PREFIX}{parameter}"] = f"The {humanize(parameter)}."

    return _finding(symbol, properties)


def evaluate_type(symbol: Symbol) -> Finding | None:
    """Report an undocumented type."""
    if is_documented(symbol):
        return None
    return _finding(symbol, {SUMMARY_KEY: f"The {humanize(symbol.name)}."})


def evaluate_property(symbol: Symbol, *, distinguish_setters: bool = False) -> Finding | None:
    """Report an undocumented property.

    By default the summary is always "Gets the ..." whether or not a setter
    exists. With ``distinguish_setters`` a property with a setter gets
    "Gets or Sets the ..." instead.
    """
    if is_documented(symbol):
        return None

    properties: dict[str, str] = {}

    if symbol.has_setter:
        properties[SUMMARY_KEY] = f"Gets or Sets the {humanize(symbol.name)}."

    if not (distinguish_setters and symbol.has_setter):
        properties[SUMMARY_KEY] = f"Gets the {humanize(symbol.name)}."

    return _finding(symbol, properties)


def evaluate_symbol(symbol: Symbol, *, distinguish_setters: bool = False) -> Finding | None:
    """Dispatch to the evaluator for the symbol's kind."""
    if symbol.kind == SymbolKind.METHOD:
        return evaluate_method(symbol)
    if symbol.kind == SymbolKind.TYPE:
        return evaluate_type(symbol)
    if symbol.kind == SymbolKind.PROPERTY:
        return evaluate_property(symbol, distinguish_setters=distinguish_setters)
    raise CommentorError(f"Unsupported symbol kind: {symbol.kind!r}")


def find_undocumented(symbols: Iterable[Symbol], *, distinguish_setters: bool = False) -> list[Finding]:
    """Evaluate every symbol independently and collect the findings.

    A symbol whose evaluation fails is logged and skipped; the rest are still evaluated.
    """
    findings: list[Finding] = []
    for symbol in symbols:
        try:
            finding = evaluate_symbol(symbol, distinguish_setters=distinguish_setters)
        except Exception:
            logger.exception("Failed to evaluate symbol %r", getattr(symbol, "name", symbol))
            continue
        if finding is not None:
            logger.debug("Undocumented %s %s at %s", finding.symbol_kind, finding.symbol_name, finding.location)
            findings.append(finding)
    return findings
