from unittest.mock import patch

from commentor.analyzer.diagnostics import Finding
from commentor.analyzer.finder import (
    evaluate_method,
    evaluate_property,
    evaluate_symbol,
    evaluate_type,
    find_undocumented,
)
from commentor.analyzer.symbols import SymbolInfo, SymbolKind, is_documented


def _method(location, name="CalculateTotal", parameters=(), returns_value=False, docs=""):
    return SymbolInfo(
        kind=SymbolKind.METHOD,
        name=name,
        location=location,
        existing_documentation=docs,
        parameters=tuple(parameters),
        returns_value=returns_value,
    )


def _property(location, name="UserName", has_setter=False, docs=""):
    return SymbolInfo(kind=SymbolKind.PROPERTY, name=name, location=location, existing_documentation=docs, has_setter=has_setter)


def _type(location, name="OrderProcessor", docs=""):
    return SymbolInfo(kind=SymbolKind.TYPE, name=name, location=location, existing_documentation=docs)


# ---------------------------------------------------------------------------
# Documentation state
# ---------------------------------------------------------------------------


def test_is_documented_blank_and_whitespace(location):
    assert is_documented(_type(location, docs="")) is False
    assert is_documented(_type(location, docs="  \n\t ")) is False


def test_is_documented_non_blank(location):
    assert is_documented(_type(location, docs="<summary>x</summary>")) is True


# ---------------------------------------------------------------------------
# evaluate_method
# ---------------------------------------------------------------------------


def test_method_summary_returns_and_parameters(location):
    finding = evaluate_method(_method(location, parameters=["firstValue", "secondValue"], returns_value=True))
    assert finding is not None
    assert finding.properties == {
        "summary": "The calculate total.",
        "returns": "The result.",
        "Parameter:firstValue": "The first value.",
        "Parameter:secondValue": "The second value.",
    }


def test_method_parameters_keep_declaration_order(location):
    finding = evaluate_method(_method(location, parameters=["zeta", "alpha", "Mid"]))
    keys = [key for key in finding.properties if key.startswith("Parameter:")]
    assert keys == ["Parameter:zeta", "Parameter:alpha", "Parameter:Mid"]


def test_void_method_has_no_returns(location):
    finding = evaluate_method(_method(location, name="Clear"))
    assert finding.properties == {"summary": "The clear."}


def test_documented_method_not_reported(location):
    assert evaluate_method(_method(location, docs="<summary>Adds.</summary>")) is None


def test_accessor_methods_never_reported(location):
    assert evaluate_method(_method(location, name="get_Count")) is None
    assert evaluate_method(_method(location, name="set_Count", parameters=["value"])) is None


def test_accessor_skip_ignores_documentation_state(location):
    assert evaluate_method(_method(location, name="get_Count", docs="<summary>x</summary>")) is None


def test_method_finding_carries_symbol_identity(location):
    finding = evaluate_method(_method(location))
    assert finding.symbol_name == "CalculateTotal"
    assert finding.symbol_kind == SymbolKind.METHOD
    assert finding.location == location


# ---------------------------------------------------------------------------
# evaluate_type
# ---------------------------------------------------------------------------


def test_type_summary_only(location):
    finding = evaluate_type(_type(location))
    assert finding.properties == {"summary": "The order processor."}


def test_documented_type_not_reported(location):
    assert evaluate_type(_type(location, docs="Processes orders.")) is None


# ---------------------------------------------------------------------------
# evaluate_property
# ---------------------------------------------------------------------------


def test_property_summary_uses_gets_phrasing(location):
    finding = evaluate_property(_property(location))
    assert finding.properties == {"summary": "Gets the user name."}


def test_property_with_setter_still_uses_gets_phrasing(location):
    finding = evaluate_property(_property(location, has_setter=True))
    assert finding.properties == {"summary": "Gets the user name."}


def test_property_distinguish_setters_opt_in(location):
    with_setter = evaluate_property(_property(location, has_setter=True), distinguish_setters=True)
    read_only = evaluate_property(_property(location, has_setter=False), distinguish_setters=True)
    assert with_setter.properties["summary"] == "Gets or Sets the user name."
    assert read_only.properties["summary"] == "Gets the user name."


def test_documented_property_not_reported(location):
    assert evaluate_property(_property(location, docs="Name.")) is None


# ---------------------------------------------------------------------------
# evaluate_symbol / find_undocumented
# ---------------------------------------------------------------------------


def test_evaluate_symbol_dispatches_on_kind(location):
    assert evaluate_symbol(_type(location)).symbol_kind == SymbolKind.TYPE
    assert evaluate_symbol(_property(location)).symbol_kind == SymbolKind.PROPERTY
    assert evaluate_symbol(_method(location)).symbol_kind == SymbolKind.METHOD


def test_find_undocumented_collects_only_undocumented(location):
    symbols = [
        _type(location),
        _type(location, name="Documented", docs="Yes."),
        _method(location, name="get_Value"),
        _property(location),
    ]
    findings = find_undocumented(symbols)
    assert [f.symbol_name for f in findings] == ["OrderProcessor", "UserName"]
    assert all(isinstance(f, Finding) for f in findings)


def test_find_undocumented_isolates_failing_symbol(location):
    class Broken:
        kind = SymbolKind.TYPE
        name = "Broken"
        location = None  # rejected by the Finding model
        existing_documentation = ""

    with patch("commentor.analyzer.finder.logger") as mock_logger:
        findings = find_undocumented([Broken(), _type(location)])

    assert [f.symbol_name for f in findings] == ["OrderProcessor"]
    mock_logger.exception.assert_called_once()


def test_find_undocumented_passes_setter_option(location):
    findings = find_undocumented([_property(location, has_setter=True)], distinguish_setters=True)
    assert findings[0].properties["summary"] == "Gets or Sets the user name."
