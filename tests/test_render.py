from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cooldata.cooldata_errors import CoolDataError
from cooldata.cooldata_io import parse
from cooldata.cooldata_render import Renderer, format_float, render
from cooldata.cooldata_value import CoolObject, Value


def from_python(data: dict[str, Any]) -> CoolObject:
    return CoolObject.from_python(data)


def test_render_scalars() -> None:
    text = render(from_python({"name": 42, "pi": 3.14, "label": "hello"}))
    assert text == 'name = 42\npi = 3.14\nlabel = "hello"\n'


def test_render_empty_document() -> None:
    assert render(CoolObject()) == ""


def test_render_nested_object() -> None:
    text = render(from_python({"nested": {"inner": "value", "deeper": {"x": 1}}}))
    assert text == (
        "nested = {\n"
        '  inner = "value"\n'
        "  deeper = {\n"
        "    x = 1\n"
        "  }\n"
        "}\n"
    )


def test_render_empty_object() -> None:
    assert render(from_python({"a": {}})) == "a = {\n}\n"


def test_render_list() -> None:
    text = render(from_python({"items": [1, 2, "three", {"a": 1}]}))
    assert text == 'items = [1, 2, "three", {\n  a = 1\n}]\n'


def test_render_nested_lists() -> None:
    assert render(from_python({"a": [[1], [], [2.5]]})) == "a = [[1], [], [2.5]]\n"


def test_custom_indent() -> None:
    text = render(from_python({"a": {"b": 1}}), indent_unit="\t")
    assert text == "a = {\n\tb = 1\n}\n"


def test_renderer_render_value() -> None:
    assert Renderer().render_value(Value.string("x")) == '"x"'
    assert Renderer().render_value(Value.from_python([1, "y"])) == '[1, "y"]'


@pytest.mark.parametrize(
    "number,expected",
    [
        (2.5, "2.5"),
        (3.0, "3.0"),
        (0.1, "0.1"),
        (1e-07, "0.0000001"),
        (1e20, "100000000000000000000.0"),
        (-1.5, "-1.5"),
        (float("inf"), "inf"),
        (3.14, "3.14"),
        (16777217.0, "16777216.0"),
        (1e39, "inf"),
    ],
)  # type: ignore[misc]
def test_format_float(number: float, expected: str) -> None:
    assert format_float(number) == expected


def test_renderer_can_be_reused() -> None:
    renderer = Renderer()
    doc = from_python({"a": 1, "b": {"c": 2}})
    first = renderer.render_document(doc)
    assert renderer.render_document(doc) == first
    assert first == "a = 1\nb = {\n  c = 2\n}\n"


def test_float_renders_shortest_32_bit_text() -> None:
    doc = parse("pi = 3.14\n")
    assert render(doc) == "pi = 3.14\n"


def test_strings_render_raw() -> None:
    assert render(from_python({"path": "C:\\dir\\n"})) == 'path = "C:\\dir\\n"\n'


def test_flat_round_trip() -> None:
    source = 'a = 1\nb = 2.5\nc = "x"\n'
    doc = parse(source)
    assert parse(render(doc)) == doc


def test_nested_and_list_round_trip() -> None:
    source = (
        "server = {\n"
        '  host = "localhost"\n'
        "  ports = [80\n 443]\n"
        "}\n"
        'items = [1, 2, "three", { a = 1 }, [[]], {}]\n'
    )
    doc = parse(source)
    assert parse(render(doc)) == doc


def test_list_layout_is_normalized() -> None:
    doc = parse("a = [\n1\n2,3\n]")
    assert render(doc) == "a = [1, 2, 3]\n"


def test_negative_numbers_do_not_round_trip() -> None:
    text = render(from_python({"a": -5}))
    assert text == "a = -5\n"
    with pytest.raises(CoolDataError):
        parse(text)


def test_strings_with_quotes_do_not_round_trip() -> None:
    text = render(from_python({"a": 'say "hi"'}))
    with pytest.raises(CoolDataError):
        parse(text)


names = st.from_regex(r"[a-zA-Z]{1,8}", fullmatch=True)
scalars = st.one_of(
    st.integers(min_value=0, max_value=2**31 - 1),
    st.floats(min_value=0, allow_nan=False, allow_infinity=False, width=32).map(abs),
    st.from_regex(r'[^"\n]{0,12}', fullmatch=True),
)


@given(st.dictionaries(names, scalars, max_size=10))  # type: ignore[misc]
def test_flat_scalar_round_trip(data: dict[str, Any]) -> None:
    doc = from_python(data)
    assert parse(render(doc)) == doc


trees = st.recursive(
    scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(names, children, max_size=4),
    ),
    max_leaves=15,
)


@given(st.dictionaries(names, trees, max_size=5))  # type: ignore[misc]
def test_nested_round_trip(data: dict[str, Any]) -> None:
    doc = from_python(data)
    assert parse(render(doc)) == doc
