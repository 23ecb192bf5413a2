"""C# source parser using tree-sitter."""

from pathlib import Path

import tree_sitter_c_sharp
from tree_sitter import Language, Node, Parser

from commentor.exceptions import SourceParseError
from commentor.logging import get_commentor_logger

logger = get_commentor_logger(__name__)

CSHARP_LANGUAGE = Language(tree_sitter_c_sharp.language())

_DEFAULT_ENCODING = "utf-8"


class CSharpParser:
    """Parser for C# source code using tree-sitter."""

    _SUPPORTED_EXTENSIONS = (".cs",)

    def __init__(self) -> None:
        self.parser = Parser(CSHARP_LANGUAGE)

    @staticmethod
    def is_supported_file(file_path: Path) -> bool:
        """Check if file is a C# source file.

        Args:
            file_path: Path to check

        Returns:
            True if file extension is supported

        """
        return file_path.suffix.lower() in CSharpParser._SUPPORTED_EXTENSIONS

    def parse(self, source_code: str) -> Node:
        """Parse source code string.

        Syntax errors do not stop parsing: tree-sitter recovers and the
        declarations it could recognise are still available.

        Args:
            source_code: Source code to parse

        Returns:
            AST root node

        """
        tree = self.parser.parse(source_code.encode(_DEFAULT_ENCODING))
        if tree.root_node.has_error:
            logger.warning("Source contains syntax errors; analysing recoverable declarations only")
        return tree.root_node

    def parse_file(self, file_path: Path, encoding: str = _DEFAULT_ENCODING) -> tuple[str, Node]:
        """Read and parse a file, returning its text and AST root node.

        Raises:
            SourceParseError: If the file is not C# or cannot be decoded

        """
        if not self.is_supported_file(file_path):
            raise SourceParseError(f"Not a C# source file: {file_path}")
        try:
            # newline="" keeps CRLF sources byte-for-byte when written back
            with open(file_path, encoding=encoding, newline="") as f:
                source_code = f.read()
        except UnicodeDecodeError as e:
            raise SourceParseError(f"Cannot decode {file_path} as {encoding}: {e}") from e
        return source_code, self.parse(source_code)
