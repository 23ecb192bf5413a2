import pytest

from commentor.analyzer.symbols import SymbolKind
from commentor.csharp.extractor import extract_symbols
from commentor.csharp.parser import CSharpParser
from tests.support.csharp_samples import CALCULATOR_SOURCE, CART_SOURCE, GRID_SOURCE, MIXED_SOURCE


def _symbols(source, path=None):
    return extract_symbols(CSharpParser().parse(source), source, path)


@pytest.fixture
def mixed():
    # The first declaration of a name wins: class Order before its constructor
    by_name = {}
    for symbol in _symbols(MIXED_SOURCE):
        by_name.setdefault(symbol.name, symbol)
    return by_name


@pytest.fixture
def grid():
    return {symbol.name: symbol for symbol in _symbols(GRID_SOURCE)}


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def test_extracts_in_source_order():
    symbols = _symbols(CART_SOURCE)
    assert [(s.kind, s.name) for s in symbols] == [
        (SymbolKind.TYPE, "Cart"),
        (SymbolKind.PROPERTY, "Name"),
        (SymbolKind.METHOD, "Clear"),
    ]


def test_file_scoped_namespace_and_nested_types(mixed):
    assert mixed["IRepository"].kind == SymbolKind.TYPE
    assert mixed["Order"].kind == SymbolKind.TYPE
    assert mixed["Status"].kind == SymbolKind.TYPE


def test_local_functions_are_not_symbols(mixed):
    assert "Local" not in mixed


def test_constructor_is_a_method(mixed):
    constructors = [s for s in _symbols(MIXED_SOURCE) if s.name == "Order" and s.kind == SymbolKind.METHOD]
    assert len(constructors) == 1
    assert constructors[0].parameters == ("id", "customerName")
    assert constructors[0].returns_value is False


# ---------------------------------------------------------------------------
# Method metadata
# ---------------------------------------------------------------------------


def test_method_parameters_and_return(mixed):
    find_order = mixed["FindOrder"]
    assert find_order.kind == SymbolKind.METHOD
    assert find_order.parameters == ("orderId",)
    assert find_order.returns_value is True


def test_void_method_returns_nothing(mixed):
    assert mixed["Save"].returns_value is False
    assert mixed["Save"].parameters == ()


def test_params_array_parameter(mixed):
    assert mixed["Reset"].parameters == ("values",)


def test_calculator_method_signature():
    (method,) = [s for s in _symbols(CALCULATOR_SOURCE) if s.kind == SymbolKind.METHOD]
    assert method.name == "CalculateTotal"
    assert method.parameters == ("firstValue", "secondValue")
    assert method.returns_value is True


# ---------------------------------------------------------------------------
# Indexers, operators and destructors
# ---------------------------------------------------------------------------


def test_special_members_in_source_order():
    assert [(s.kind, s.name) for s in _symbols(GRID_SOURCE)] == [
        (SymbolKind.TYPE, "Grid"),
        (SymbolKind.PROPERTY, "this[]"),
        (SymbolKind.METHOD, "op_Addition"),
        (SymbolKind.METHOD, "op_UnaryNegation"),
        (SymbolKind.METHOD, "op_Implicit"),
        (SymbolKind.METHOD, "Finalize"),
    ]


def test_indexer_is_a_settable_property(grid):
    indexer = grid["this[]"]
    assert indexer.has_setter is True
    assert indexer.parameters == ("row", "column")
    assert (indexer.location.start_line, indexer.location.start_column) == (4, 19)
    assert indexer.location.end_column == 23


def test_getter_only_indexer():
    source = "public class Row { public int this[int index] => index; }\n"
    (_, indexer) = _symbols(source)
    assert indexer.name == "this[]"
    assert indexer.has_setter is False


def test_binary_operator(grid):
    addition = grid["op_Addition"]
    assert addition.parameters == ("left", "right")
    assert addition.returns_value is True
    assert addition.is_public is True


def test_unary_operator(grid):
    assert grid["op_UnaryNegation"].parameters == ("value",)


def test_conversion_operator(grid):
    conversion = grid["op_Implicit"]
    assert conversion.parameters == ("grid",)
    assert conversion.returns_value is True


def test_destructor(grid):
    destructor = grid["Finalize"]
    assert destructor.parameters == ()
    assert destructor.returns_value is False
    assert destructor.is_public is False


# ---------------------------------------------------------------------------
# Property metadata
# ---------------------------------------------------------------------------


def test_property_setter_detection(mixed):
    assert mixed["Id"].has_setter is False
    assert mixed["Customer"].has_setter is True  # init accessor
    assert mixed["Count"].has_setter is False  # expression-bodied


def test_auto_property_with_set():
    (name,) = [s for s in _symbols(CART_SOURCE) if s.kind == SymbolKind.PROPERTY]
    assert name.has_setter is True


# ---------------------------------------------------------------------------
# Documentation text
# ---------------------------------------------------------------------------


def test_triple_slash_documentation_collected(mixed):
    assert mixed["IRepository"].existing_documentation == "<summary>\nPersists orders.\n</summary>"


def test_ordinary_comment_is_not_documentation(mixed):
    assert mixed["Order"].existing_documentation == ""


def test_block_documentation_comment():
    source = "/** <summary>Block.</summary> */\npublic class Block { }\n"
    (symbol,) = _symbols(source)
    assert symbol.existing_documentation == "<summary>Block.</summary>"


def test_documentation_passes_over_ordinary_comment():
    source = "/// <summary>Doc.</summary>\n// note\npublic class Noted { }\n"
    (symbol,) = _symbols(source)
    assert symbol.existing_documentation == "<summary>Doc.</summary>"


def test_documentation_of_previous_member_does_not_leak():
    source = "/// <summary>First.</summary>\npublic class First { }\npublic class Second { }\n"
    first, second = _symbols(source)
    assert first.existing_documentation == "<summary>First.</summary>"
    assert second.existing_documentation == ""


def test_attributes_do_not_hide_documentation():
    source = "/// <summary>Old.</summary>\n[Obsolete]\npublic class Old { }\n"
    (symbol,) = _symbols(source)
    assert symbol.existing_documentation == "<summary>Old.</summary>"


# ---------------------------------------------------------------------------
# Visibility and location
# ---------------------------------------------------------------------------


def test_visibility(mixed):
    assert mixed["IRepository"].is_public is True
    assert mixed["FindOrder"].is_public is True  # interface member
    assert mixed["Order"].kind == SymbolKind.TYPE
    assert mixed["Order"].is_public is False
    assert mixed["Reset"].is_public is False
    assert mixed["Id"].is_public is True


def test_location_is_name_span():
    symbols = _symbols(CART_SOURCE, path="Cart.cs")
    cart = symbols[0]
    assert cart.location.path == "Cart.cs"
    assert (cart.location.start_line, cart.location.start_column) == (2, 17)
    assert (cart.location.end_line, cart.location.end_column) == (2, 21)


def test_location_columns_are_characters():
    source = 'public class Holder { string s = "ééé"; public int Name { get; } }\n'
    symbols = {s.name: s for s in _symbols(source)}
    assert symbols["Holder"].location.start_column == 13
    assert symbols["Name"].location.start_column == 51
