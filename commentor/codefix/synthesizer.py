"""Render a Finding as a /// documentation comment block."""

from commentor.analyzer.diagnostics import RETURNS_KEY, SUMMARY_KEY, Finding
from commentor.exceptions import MalformedFindingError

PARAMETER_MARKER = "Parameter"


def _parameter_name(key: str) -> str:
    _, separator, name = key.partition(":")
    if not separator:
        raise MalformedFindingError(f"Parameter key {key!r} has no ':' separator")
    return name


def render(finding: Finding, column_offset: int, newline: str = "\n") -> str:
    """Build the comment text that replaces a member's leading trivia.

    Layout, every line indented by ``column_offset`` spaces: a blank line, the
    summary element, one param element per ``Parameter`` key (sorted by raw key
    in code-point order), an optional returns element, then a final line of
    bare indentation so the member's first token keeps its column.
    """
    props = finding.properties
    if SUMMARY_KEY not in props:
        raise MalformedFindingError(f"Finding for {finding.symbol_name!r} has no {SUMMARY_KEY!r} property")

    indent = " " * column_offset
    lines = [
        "",
        f"{indent}/// <summary>",
        f"{indent}/// {props[SUMMARY_KEY]}",
        f"{indent}/// </summary>",
    ]

    for key in sorted(key for key in props if PARAMETER_MARKER in key):
        lines.append(f'{indent}/// <param name="{_parameter_name(key)}">{props[key]}</param>')

    if RETURNS_KEY in props:
        lines.append(f"{indent}/// <returns>{props[RETURNS_KEY]}</returns>")

    return "".join(line + newline for line in lines) + indent
