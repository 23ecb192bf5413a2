"""Read-only symbol capability consumed by the finder.

Any host (tree-sitter front-end, language server, hand-rolled parser) can feed
the finder by producing objects that satisfy the Symbol protocol.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

__all__ = [
    "SourceLocation",
    "Symbol",
    "SymbolInfo",
    "SymbolKind",
    "is_documented",
]


class SymbolKind(StrEnum):
    """Member kinds the finder knows how to evaluate."""

    METHOD = "method"
    TYPE = "type"
    PROPERTY = "property"


class SourceLocation(BaseModel):
    """Span of a symbol's name in a source file. Lines and columns are 0-based, columns in characters."""

    model_config = ConfigDict(frozen=True)

    path: str | None = None
    start_line: int
    start_column: int
    end_line: int
    end_column: int

    def __str__(self) -> str:
        prefix = f"{self.path}:" if self.path else ""
        return f"{prefix}{self.start_line + 1}:{self.start_column + 1}"


@runtime_checkable
class Symbol(Protocol):
    """Narrow read-only view of a program symbol."""

    @property
    def kind(self) -> SymbolKind: ...

    @property
    def name(self) -> str: ...

    @property
    def parameters(self) -> tuple[str, ...]:
        """Parameter names in declaration order (methods only)."""
        ...

    @property
    def returns_value(self) -> bool:
        """True when a method's return type is not void."""
        ...

    @property
    def has_setter(self) -> bool:
        """True when a property declares a set or init accessor."""
        ...

    @property
    def existing_documentation(self) -> str: ...

    @property
    def location(self) -> SourceLocation: ...


@dataclass(frozen=True)
class SymbolInfo:
    """Concrete symbol extracted from source by a host."""

    kind: SymbolKind
    name: str
    location: SourceLocation
    existing_documentation: str = ""
    parameters: tuple[str, ...] = ()
    returns_value: bool = False
    has_setter: bool = False
    is_public: bool = True


def is_documented(symbol: Symbol) -> bool:
    """Documentation state: true iff the existing documentation text is non-blank."""
    return bool(symbol.existing_documentation and symbol.existing_documentation.strip())
