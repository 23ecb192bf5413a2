"""Diagnostic descriptor and the Finding record passed from finder to fixer.

A Finding's ``properties`` is a flat string-to-string mapping. It is the only
channel between detection and synthesis, so it must stay serializable as plain
key/value pairs (e.g. inside a language-server message).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from commentor.analyzer.symbols import SourceLocation, SymbolKind

__all__ = [
    "DIAGNOSTIC_ID",
    "PARAMETER_PREFIX",
    "RETURNS_KEY",
    "RULE",
    "SUMMARY_KEY",
    "DiagnosticDescriptor",
    "Finding",
    "Severity",
]

DIAGNOSTIC_ID = "Commentor"
CATEGORY = "Comments"

SUMMARY_KEY = "summary"
RETURNS_KEY = "returns"
PARAMETER_PREFIX = "Parameter:"


class Severity(StrEnum):
    """Diagnostic severity levels."""

    HIDDEN = "hidden"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class DiagnosticDescriptor:
    """Static description of the rule a Finding belongs to."""

    id: str
    title: str
    message_format: str
    category: str
    default_severity: Severity
    is_enabled_by_default: bool
    description: str = ""

    def format_message(self, symbol_name: str) -> str:
        return self.message_format.format(symbol_name)


RULE = DiagnosticDescriptor(
    id=DIAGNOSTIC_ID,
    title="Member is missing documentation",
    message_format="'{0}' has no documentation comment",
    category=CATEGORY,
    default_severity=Severity.WARNING,
    is_enabled_by_default=True,
    description="Types, methods and properties should carry a structured /// documentation comment.",
)


class Finding(BaseModel):
    """One undocumented symbol plus the data needed to synthesize its documentation.

    Property keys: ``summary`` (always), ``returns`` (methods returning a value)
    and ``Parameter:<name>`` (one per parameter, declaration order).

    ``properties`` is copied on validation and exposed read-only, so a finding
    never changes after it is created.
    """

    model_config = ConfigDict(frozen=True)

    symbol_name: str
    symbol_kind: SymbolKind
    location: SourceLocation
    properties: Mapping[str, str]
    diagnostic_id: str = DIAGNOSTIC_ID
    severity: Severity = RULE.default_severity

    @field_validator("properties", mode="after")
    @classmethod
    def freeze_properties(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        """Store a private read-only copy of the property mapping."""
        return MappingProxyType(dict(v))

    @field_serializer("properties")
    def serialize_properties(self, v: Mapping[str, str]) -> dict[str, str]:
        """Serialize the read-only mapping as a plain dict."""
        return dict(v)

    @property
    def message(self) -> str:
        """Human-readable diagnostic message for this finding."""
        return RULE.format_message(self.symbol_name)

    def __str__(self) -> str:
        return f"{self.location}: {self.severity} {self.diagnostic_id}: {self.message}"
