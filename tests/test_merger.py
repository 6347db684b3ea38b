"""Tests for partial definition merging and mixin resolution"""

import pytest

from webidlgen.types import (
    IDLType, Attribute, Field, ExtendedAttribute,
    Interface, Dictionary, Namespace, Mixin, Includes, Enumeration, Typedef,
    ORPHAN_PARTIAL, UNRESOLVED_INCLUDES,
)
from webidlgen.merger import merge_partials, resolve_includes, inheritance_chain


def attr(name):
    return Attribute(name, IDLType(base_name="boolean"))


def test_partial_members_are_appended_to_base():
    a, b = attr("a"), attr("b")
    result = merge_partials([
        Interface("Foo", members=[a]),
        Interface("Foo", partial=True, members=[b]),
    ])

    foos = [d for d in result.definitions if d.name == "Foo"]
    assert len(foos) == 1
    assert foos[0].members == [a, b]
    assert not foos[0].partial
    assert result.diagnostics == ()


def test_partial_before_base_is_merged():
    a, b = attr("a"), attr("b")
    result = merge_partials([
        Interface("Foo", partial=True, members=[b]),
        Interface("Foo", members=[a]),
    ])
    assert [d.members for d in result.definitions] == [[a, b]]


def test_extended_attributes_are_merged():
    exposed = ExtendedAttribute("Exposed", "Window")
    secure = ExtendedAttribute("SecureContext")
    result = merge_partials([
        Interface("Foo", ext_attrs=[exposed]),
        Interface("Foo", partial=True, ext_attrs=[secure]),
    ])
    assert result.definitions[0].ext_attrs == [exposed, secure]


def test_dictionaries_and_namespaces_are_merged():
    x, y = Field("x"), Field("y")
    result = merge_partials([
        Dictionary("Opts", members=[x]),
        Namespace("console", members=[attr("log")]),
        Dictionary("Opts", partial=True, members=[y]),
        Namespace("console", partial=True, members=[attr("warn")]),
    ])
    opts, console = result.definitions
    assert opts.members == [x, y]
    assert [m.name for m in console.members] == ["log", "warn"]


def test_orphan_partial_is_dropped_with_diagnostic():
    result = merge_partials([Interface("Bar", partial=True, members=[attr("x")])])

    assert not any(d.name == "Bar" for d in result.definitions)
    assert len(result.diagnostics) == 1
    diagnostic = result.diagnostics[0]
    assert diagnostic.kind == ORPHAN_PARTIAL
    assert diagnostic.name == "Bar"
    assert "Bar" in str(diagnostic)


def test_output_order_bases_then_other_kinds():
    definitions = [
        Enumeration("Phase", values=["a"]),
        Interface("B"),
        Typedef("Handler"),
        Dictionary("A"),
        Interface("B", partial=True),
    ]
    result = merge_partials(definitions)
    assert [d.name for d in result.definitions] == ["B", "A", "Phase", "Handler"]


def test_first_definition_wins_for_duplicate_names():
    first = Interface("Dup", members=[attr("first")])
    second = Interface("Dup", members=[attr("second")])
    result = merge_partials([first, second])
    assert [[m.name for m in d.members] for d in result.definitions] == [["first"]]
    assert result.diagnostics == ()


def test_merge_is_idempotent():
    merged = merge_partials([
        Interface("Foo", members=[attr("a")]),
        Typedef("T"),
        Interface("Foo", partial=True, members=[attr("b")]),
        Dictionary("D"),
    ])
    again = merge_partials(merged.definitions)
    assert list(again.definitions) == list(merged.definitions)
    assert again.diagnostics == ()


def test_input_is_not_modified():
    base = Interface("Foo", members=[attr("a")])
    partial = Interface("Foo", partial=True, members=[attr("b")])
    merge_partials([base, partial])
    merge_partials([base, partial])
    assert [m.name for m in base.members] == ["a"]


def test_lookup_is_read_only():
    result = merge_partials([Interface("Foo"), Typedef("T")])
    assert set(result.lookup) == {"Foo"}
    with pytest.raises(TypeError):
        result.lookup["Bar"] = Interface("Bar")


def test_includes_copies_mixin_members():
    merged = merge_partials([
        Interface("Window", members=[attr("name")]),
        Mixin("Handlers", members=[attr("onload")]),
        Mixin("Handlers", partial=True, members=[attr("onerror")]),
        Includes("Window", mixin="Handlers"),
    ])
    result = resolve_includes(merged)

    window = result.lookup["Window"]
    assert [m.name for m in window.members] == ["name", "onload", "onerror"]
    assert result.definitions[0] is window
    # The merged input keeps its own members
    assert [m.name for m in merged.lookup["Window"].members] == ["name"]


def test_unresolved_includes_are_reported():
    merged = merge_partials([
        Interface("Window"),
        Includes("Window", mixin="Missing"),
        Includes("Nowhere", mixin="Missing"),
    ])
    result = resolve_includes(merged)
    assert [d.kind for d in result.diagnostics] == [UNRESOLVED_INCLUDES, UNRESOLVED_INCLUDES]
    assert [d.name for d in result.diagnostics] == ["Window", "Nowhere"]


def test_resolve_includes_without_statements_is_identity():
    merged = merge_partials([Interface("Window")])
    assert resolve_includes(merged) is merged


def test_inheritance_chain():
    lookup = {
        "Element": Interface("Element", inheritance="Node"),
        "Node": Interface("Node", inheritance="EventTarget"),
        "EventTarget": Interface("EventTarget"),
    }
    html = Interface("HTMLElement", inheritance="Element")
    assert inheritance_chain(html, lookup) == ["Element", "Node", "EventTarget"]
    assert inheritance_chain(Interface("X", inheritance="Unknown"), lookup) == []


def test_inheritance_chain_stops_at_unknown_or_other_kind():
    lookup = {
        "Node": Interface("Node", inheritance="Missing"),
        "EventInit": Dictionary("EventInit"),
    }
    assert inheritance_chain(Interface("Element", inheritance="Node"), lookup) == ["Node"]
    assert inheritance_chain(Interface("Odd", inheritance="EventInit"), lookup) == []
    assert inheritance_chain(Dictionary("MouseEventInit", inheritance="EventInit"), lookup) == ["EventInit"]


def test_inheritance_chain_stops_on_cycle():
    lookup = {"A": Interface("A", inheritance="B"), "B": Interface("B", inheritance="A")}
    assert inheritance_chain(lookup["A"], lookup) == ["B"]
