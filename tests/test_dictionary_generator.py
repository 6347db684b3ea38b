"""Tests for dictionary code generation"""

from webidlgen.types import IDLType, Generic, DefaultValue, Field, Dictionary, Interface
from webidlgen.dictionary_generator import DictionaryGenerator


def named(name, nullable=False):
    return IDLType(base_name=name, nullable=nullable)


def test_options_output():
    options = Dictionary("Options", members=[
        Field("deep", named("boolean"), default=DefaultValue("boolean", False)),
        Field("selector", named("DOMString"), required=True),
    ])
    expected = "\n".join([
        "///| Options dictionary",
        "",
        "#external",
        "pub type Options",
        "",
        'fn options_ffi(deep : Bool, selector : String) -> Options = "webapi_Options" "new"',
        "",
        "pub fn options(deep? : Bool = false, selector : String) -> Options {",
        "  options_ffi(deep, selector)",
        "}",
        "",
        'pub fn default_options() -> Options = "webapi_Dictionary" "empty"',
        "",
    ])
    assert DictionaryGenerator().generate(options) == expected


def test_field_without_default_has_no_default_clause():
    init = Dictionary("ScrollInit", members=[Field("top", named("double"))])
    code = DictionaryGenerator().generate(init)
    assert "pub fn scroll_init(top? : Double) -> ScrollInit {" in code


def test_null_default_is_absent():
    init = Dictionary("CustomEventInit", members=[
        Field("detail", named("any"), default=DefaultValue("null")),
    ])
    code = DictionaryGenerator().generate(init)
    assert "pub fn custom_event_init(detail? : JsValue = None) -> CustomEventInit {" in code


def test_sequence_field_is_converted():
    seq = IDLType(generic=Generic.SEQUENCE, element_type=named("DOMString"))
    init = Dictionary("FilterInit", members=[Field("names", seq, required=True)])
    code = DictionaryGenerator().generate(init)
    assert 'fn filter_init_ffi(names : JsValue) -> FilterInit = "webapi_FilterInit" "new"' in code
    assert "pub fn filter_init(names : Array[String]) -> FilterInit {" in code
    assert "  filter_init_ffi(names.to_js())" in code


def test_empty_dictionary():
    code = DictionaryGenerator().generate(Dictionary("Empty"))
    assert 'fn empty_ffi() -> Empty = "webapi_Empty" "new"' in code
    assert "pub fn empty() -> Empty {\n  empty_ffi()\n}" in code


def test_inherited_fields_come_first():
    lookup = {
        "EventInit": Dictionary("EventInit", members=[
            Field("bubbles", named("boolean"), default=DefaultValue("boolean", False)),
        ]),
        "MouseEventInit": Dictionary("MouseEventInit", inheritance="EventInit", members=[
            Field("button", named("short"), default=DefaultValue("number", "0")),
        ]),
    }
    init = Dictionary("WheelEventInit", inheritance="MouseEventInit", members=[
        Field("deltaX", named("double"), default=DefaultValue("number", "0.0")),
    ])
    generator = DictionaryGenerator(lookup)
    assert [f.name for f in generator.fields(init)] == ["bubbles", "button", "deltaX"]

    code = generator.generate(init)
    assert ("pub fn wheel_event_init(bubbles? : Bool = false, button? : Int = 0,"
            " delta_x? : Double = 0.0) -> WheelEventInit {") in code


def test_non_dictionary_ancestors_are_ignored():
    lookup = {"Base": Interface("Base")}
    init = Dictionary("Init", inheritance="Base", members=[Field("x", named("long"))])
    assert [f.name for f in DictionaryGenerator(lookup).fields(init)] == ["x"]
