"""Tests for JSON emission."""

import json

import pytest

from tools.data_formatter.highlight import Role, Span, to_text
from tools.data_formatter.json_emitter import emit_json


def render(value):
    return to_text(emit_json(value))


class TestEmitJson:
    """Test pretty-printed JSON."""

    def test_empty_containers_stay_inline(self):
        """Test empty arrays and objects are not expanded."""
        assert render([]) == "[]\n"
        assert render({}) == "{}\n"

    def test_nested_containers(self):
        """Test two-space indentation and one entry per line."""
        assert render({"bar": [0, 1, 2]}) == '{\n  "bar": [\n    0,\n    1,\n    2\n  ]\n}\n'

    def test_empty_members(self):
        """Test empty containers as object members."""
        assert render({"a": {}, "b": []}) == '{\n  "a": {},\n  "b": []\n}\n'

    def test_scalars(self):
        """Test top-level scalars."""
        assert render("bar") == '"bar"\n'
        assert render(42) == "42\n"
        assert render(1.0) == "1.0\n"
        assert render(True) == "true\n"
        assert render(None) == "null\n"

    def test_key_order_is_preserved(self):
        """Test insertion order of keys survives emission."""
        text = render({"z": 1, "a": 2, "m": 3})
        assert text.index('"z"') < text.index('"a"') < text.index('"m"')

    def test_strings_are_escaped(self):
        """Test keys and values use JSON escaping."""
        assert render({'q"k': "line\nbreak"}) == '{\n  "q\\"k": "line\\nbreak"\n}\n'

    def test_roles(self):
        """Test keys and strings carry their highlighting roles."""
        spans = emit_json({"a": "x", "n": 1})
        assert Span('"a"', Role.KEY) in spans
        assert Span('"x"', Role.STRING) in spans
        assert Span("1") in spans

    def test_single_trailing_newline(self):
        """Test the document ends with exactly one newline."""
        spans = emit_json([{"a": [1]}])
        assert spans[-1] == Span("\n")
        assert not to_text(spans).endswith("\n\n")

    def test_does_not_mutate_input(self):
        """Test the input tree is left untouched."""
        value = {"a": [1, None, {"b": None}]}
        emit_json(value)
        assert value == {"a": [1, None, {"b": None}]}

    @pytest.mark.parametrize(
        "value",
        [
            {"name": "jsq", "tags": ["a", "b"], "nested": {"x": None, "y": [1.5, -2, True]}},
            [[], {}, [[1]], {"k": {"k": {"k": "v"}}}],
            "tab\there",
        ],
    )
    def test_round_trip(self, value):
        """Test emitted JSON parses back to the same tree."""
        assert json.loads(render(value)) == value
