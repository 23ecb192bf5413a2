"""Tree-sitter node helpers for the C# grammar.

Tree-sitter reports byte offsets; documents and locations use character
offsets. Helpers here take the encoded source bytes and convert.
"""

from tree_sitter import Node

_DEFAULT_ENCODING = "utf-8"

TYPE_DECLARATIONS = frozenset(
    {
        "class_declaration",
        "struct_declaration",
        "interface_declaration",
        "enum_declaration",
        "record_declaration",
        "record_struct_declaration",
        "delegate_declaration",
    }
)
METHOD_DECLARATIONS = frozenset(
    {
        "method_declaration",
        "constructor_declaration",
        "destructor_declaration",
        "operator_declaration",
        "conversion_operator_declaration",
    }
)
PROPERTY_DECLARATIONS = frozenset({"property_declaration", "indexer_declaration"})

# Metadata names the compiler gives operator members
UNARY_OPERATOR_NAMES = {
    "+": "op_UnaryPlus",
    "-": "op_UnaryNegation",
    "!": "op_LogicalNot",
    "~": "op_OnesComplement",
    "++": "op_Increment",
    "--": "op_Decrement",
    "true": "op_True",
    "false": "op_False",
}
BINARY_OPERATOR_NAMES = {
    "+": "op_Addition",
    "-": "op_Subtraction",
    "*": "op_Multiply",
    "/": "op_Division",
    "%": "op_Modulus",
    "^": "op_ExclusiveOr",
    "&": "op_BitwiseAnd",
    "|": "op_BitwiseOr",
    "<<": "op_LeftShift",
    ">>": "op_RightShift",
    ">>>": "op_UnsignedRightShift",
    "==": "op_Equality",
    "!=": "op_Inequality",
    ">": "op_GreaterThan",
    "<": "op_LessThan",
    ">=": "op_GreaterThanOrEqual",
    "<=": "op_LessThanOrEqual",
}
CONVERSION_OPERATOR_NAMES = {"implicit": "op_Implicit", "explicit": "op_Explicit"}
INDEXER_NAME = "this[]"
DESTRUCTOR_NAME = "Finalize"
DECLARATIONS = TYPE_DECLARATIONS | METHOD_DECLARATIONS | PROPERTY_DECLARATIONS

# Nodes whose children may hold further declarations
CONTAINERS = frozenset(
    {
        "compilation_unit",
        "namespace_declaration",
        "file_scoped_namespace_declaration",
        "declaration_list",
    }
)

SETTER_KEYWORDS = frozenset({"set", "init"})
DOC_COMMENT_PREFIXES = ("///", "/**")


def get_node_text(node: Node, source: bytes) -> str:
    """Get the text content of an AST node."""
    return source[node.start_byte : node.end_byte].decode(_DEFAULT_ENCODING)


def find_child_by_type(node: Node, child_type: str) -> Node | None:
    """Find the first direct child of a specific type."""
    for child in node.children:
        if child.type == child_type:
            return child
    return None


def char_offset(source: bytes, byte_offset: int) -> int:
    """Convert a byte offset into a character offset."""
    return len(source[:byte_offset].decode(_DEFAULT_ENCODING))


def char_column(source: bytes, byte_offset: int) -> int:
    """Character column of a byte offset on its line."""
    line_start = source.rfind(b"\n", 0, byte_offset) + 1
    return len(source[line_start:byte_offset].decode(_DEFAULT_ENCODING))


def byte_offset(text: str, char_index: int) -> int:
    """Convert a character offset into a byte offset."""
    return len(text[:char_index].encode(_DEFAULT_ENCODING))


def get_modifiers(node: Node, source: bytes) -> set[str]:
    """Modifier keywords (public, static, ...) declared on a node."""
    modifiers: set[str] = set()
    for child in node.children:
        if child.type == "modifier":
            modifiers.add(get_node_text(child, source).strip())
    return modifiers


def get_doc_comment(node: Node, source: bytes) -> str:
    """Text of the documentation comment directly preceding a declaration.

    Walks back over comment siblings: /// and /** */ comments are collected,
    ordinary comments are passed over, anything else ends the walk.
    """
    lines: list[str] = []
    sibling = node.prev_sibling
    while sibling is not None and sibling.type == "comment":
        text = get_node_text(sibling, source)
        if text.startswith(DOC_COMMENT_PREFIXES):
            lines.append(_strip_doc_markers(text))
        sibling = sibling.prev_sibling
    return "\n".join(reversed(lines)).strip()


def _strip_doc_markers(text: str) -> str:
    if text.startswith("///"):
        return text[3:].strip()
    body = text[3:]
    if body.endswith("*/"):
        body = body[:-2]
    return "\n".join(line.strip().lstrip("*").strip() for line in body.splitlines()).strip()
