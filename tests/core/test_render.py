from stringcodable.core.render import NIL_DESCRIPTION, debug_describe, describe
from stringcodable.models import ABSENT, Mapping, Sequence, Text


def test_absent_renders_as_nil_description() -> None:
    assert NIL_DESCRIPTION == "None"
    assert describe(ABSENT) == "None"


def test_text_renders_unchanged() -> None:
    assert describe(Text("x")) == "x"
    assert describe(Text("")) == ""


def test_containers_delegate_to_children() -> None:
    assert describe(Sequence((Text("1"), ABSENT))) == "[1, None]"
    assert describe(Mapping({"a": Sequence((Text("x"),))})) == "{a: [x]}"


def test_debug_rendering_names_the_flavor() -> None:
    assert debug_describe(ABSENT, "DynamicValue") == "DynamicValue(None)"
    assert debug_describe(Text("x"), "EncodableDynamicValue") == "EncodableDynamicValue('x')"


def test_debug_rendering_nests_children_in_same_flavor() -> None:
    shape = Mapping({"a": Sequence((Text("1"),))})
    assert (
        debug_describe(shape, "DecodableDynamicValue")
        == "DecodableDynamicValue({'a': DecodableDynamicValue([DecodableDynamicValue('1')])})"
    )
