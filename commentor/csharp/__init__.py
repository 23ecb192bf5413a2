"""C# host: tree-sitter parsing, symbol extraction and location resolution.

@public
"""

from commentor.csharp.extractor import extract_symbols
from commentor.csharp.parser import CSharpParser
from commentor.csharp.resolver import CSharpNodeResolver

__all__ = [
    "CSharpNodeResolver",
    "CSharpParser",
    "extract_symbols",
]
