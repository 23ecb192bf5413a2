"""C# symbol extraction: types, methods and properties with their documentation state.

Walks compilation units, namespaces and type bodies. Method and property
bodies are not descended into, so local functions are never reported.
Constructors, destructors and operators count as methods, indexers as
properties.
"""

from tree_sitter import Node

from commentor.analyzer.symbols import SourceLocation, SymbolInfo, SymbolKind
from commentor.csharp.helpers import (
    BINARY_OPERATOR_NAMES,
    CONTAINERS,
    CONVERSION_OPERATOR_NAMES,
    DESTRUCTOR_NAME,
    INDEXER_NAME,
    METHOD_DECLARATIONS,
    PROPERTY_DECLARATIONS,
    SETTER_KEYWORDS,
    TYPE_DECLARATIONS,
    UNARY_OPERATOR_NAMES,
    char_column,
    find_child_by_type,
    get_doc_comment,
    get_modifiers,
    get_node_text,
)

_PARAMETER_TYPES = frozenset({"parameter", "parameter_array"})


def extract_symbols(root: Node, source_code: str, path: str | None = None) -> list[SymbolInfo]:
    """Extract every type, method and property declaration under ``root`` in source order."""
    source = source_code.encode("utf-8")
    symbols: list[SymbolInfo] = []
    _visit(root, source, path, symbols, in_interface=False)
    return symbols


def _visit(node: Node, source: bytes, path: str | None, symbols: list[SymbolInfo], *, in_interface: bool) -> None:
    for child in node.named_children:
        if child.type in TYPE_DECLARATIONS:
            symbol = _extract_type(child, source, path, in_interface)
            if symbol:
                symbols.append(symbol)
            body = child.child_by_field_name("body") or find_child_by_type(child, "declaration_list")
            if body is not None:
                _visit(body, source, path, symbols, in_interface=child.type == "interface_declaration")
        elif child.type in METHOD_DECLARATIONS:
            symbol = _extract_method(child, source, path, in_interface)
            if symbol:
                symbols.append(symbol)
        elif child.type in PROPERTY_DECLARATIONS:
            symbol = _extract_property(child, source, path, in_interface)
            if symbol:
                symbols.append(symbol)
        elif child.type in CONTAINERS:
            _visit(child, source, path, symbols, in_interface=in_interface)


def _name_node(node: Node) -> Node | None:
    return node.child_by_field_name("name") or find_child_by_type(node, "identifier")


def _member_name(node: Node, source: bytes) -> tuple[str, Node] | None:
    """Symbol name of a member and the token its location points at.

    Indexers, operators and destructors are named the way the compiler
    names them (``this[]``, ``op_Addition``, ``Finalize``).
    """
    if node.type == "indexer_declaration":
        token = find_child_by_type(node, "this")
        return (INDEXER_NAME, token) if token is not None else None

    if node.type == "destructor_declaration":
        name_node = _name_node(node)
        return (DESTRUCTOR_NAME, name_node) if name_node is not None else None

    if node.type == "conversion_operator_declaration":
        for child in node.children:
            if child.type in CONVERSION_OPERATOR_NAMES:
                return CONVERSION_OPERATOR_NAMES[child.type], child
        return None

    if node.type == "operator_declaration":
        token = node.child_by_field_name("operator") or _token_after_operator_keyword(node)
        if token is None:
            return None
        symbol = get_node_text(token, source)
        table = UNARY_OPERATOR_NAMES if len(_parameter_names(node, source)) == 1 else BINARY_OPERATOR_NAMES
        name = table.get(symbol)
        if name is None:
            return None
        if find_child_by_type(node, "checked") is not None:
            name = name.replace("op_", "op_Checked", 1)
        return name, token

    name_node = _name_node(node)
    if name_node is None:
        return None
    return get_node_text(name_node, source), name_node


def _token_after_operator_keyword(node: Node) -> Node | None:
    tokens = [child for child in node.children if child.type != "checked"]
    for keyword, token in zip(tokens, tokens[1:]):
        if keyword.type == "operator":
            return token
    return None


def _location(name_node: Node, source: bytes, path: str | None) -> SourceLocation:
    return SourceLocation(
        path=path,
        start_line=name_node.start_point[0],
        start_column=char_column(source, name_node.start_byte),
        end_line=name_node.end_point[0],
        end_column=char_column(source, name_node.end_byte),
    )


def _is_public(node: Node, source: bytes, in_interface: bool) -> bool:
    return in_interface or "public" in get_modifiers(node, source)


def _extract_type(node: Node, source: bytes, path: str | None, in_interface: bool) -> SymbolInfo | None:
    name_node = _name_node(node)
    if name_node is None:
        return None
    return SymbolInfo(
        kind=SymbolKind.TYPE,
        name=get_node_text(name_node, source),
        location=_location(name_node, source, path),
        existing_documentation=get_doc_comment(node, source),
        is_public=_is_public(node, source, in_interface),
    )


def _extract_method(node: Node, source: bytes, path: str | None, in_interface: bool) -> SymbolInfo | None:
    member = _member_name(node, source)
    if member is None:
        return None
    name, token = member
    return SymbolInfo(
        kind=SymbolKind.METHOD,
        name=name,
        location=_location(token, source, path),
        existing_documentation=get_doc_comment(node, source),
        parameters=_parameter_names(node, source),
        returns_value=_returns_value(node, source),
        is_public=_is_public(node, source, in_interface),
    )


def _extract_property(node: Node, source: bytes, path: str | None, in_interface: bool) -> SymbolInfo | None:
    member = _member_name(node, source)
    if member is None:
        return None
    name, token = member
    return SymbolInfo(
        kind=SymbolKind.PROPERTY,
        name=name,
        location=_location(token, source, path),
        existing_documentation=get_doc_comment(node, source),
        parameters=_parameter_names(node, source),
        has_setter=_has_setter(node),
        is_public=_is_public(node, source, in_interface),
    )


def _parameter_names(node: Node, source: bytes) -> tuple[str, ...]:
    params = node.child_by_field_name("parameters") or find_child_by_type(node, "parameter_list")
    if params is None:
        return ()
    names: list[str] = []
    for param in params.named_children:
        if param.type == "identifier":
            # params arrays are inlined into the list by some grammar versions
            names.append(get_node_text(param, source))
            continue
        if param.type not in _PARAMETER_TYPES:
            continue
        name_node = param.child_by_field_name("name")
        if name_node is None:
            identifiers = [c for c in param.named_children if c.type == "identifier"]
            name_node = identifiers[-1] if identifiers else None
        if name_node is not None:
            names.append(get_node_text(name_node, source))
    return tuple(names)


def _returns_value(node: Node, source: bytes) -> bool:
    if node.type == "constructor_declaration":
        return False
    # Field is "returns" in current grammars, "type" in older ones
    return_type = node.child_by_field_name("returns") or node.child_by_field_name("type")
    if return_type is None:
        return False
    return get_node_text(return_type, source).strip() != "void"


def _has_setter(node: Node) -> bool:
    accessors = node.child_by_field_name("accessors") or find_child_by_type(node, "accessor_list")
    if accessors is None:
        return False
    for accessor in accessors.named_children:
        if accessor.type != "accessor_declaration":
            continue
        if any(child.type in SETTER_KEYWORDS for child in accessor.children):
            return True
    return False
