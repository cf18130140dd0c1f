"""Tests for YAML emission."""

import yaml

from tools.data_formatter.highlight import Role, Span, to_text
from tools.data_formatter.yaml_emitter import emit_yaml


def render(value):
    return to_text(emit_yaml(value))


WORKFLOW = {
    "name": "publish",
    "on": {"push": {"tags": ["v*"]}},
    "defaults": {"run": {"shell": "bash"}},
    "jobs": {
        "build": {
            "runs-on": "ubuntu-latest",
            "timeout": 30,
            "ratio": 0.5,
            "big": 1e300,
            "enabled": True,
            "skip": None,
            "matrix": [],
            "env": {},
            "steps": [
                {"uses": "actions/checkout@v4"},
                {"name": "Build", "run": "cargo build\ncargo test\n"},
                {"run": "echo done"},
            ],
        }
    },
    "version": "1.0",
    "comment": "a # not a comment",
    "pair": "key: value",
}


class TestEmitYaml:
    """Test block-style YAML."""

    def test_boolean_like_string_is_quoted(self):
        """Test a string that reads as a boolean is quoted."""
        assert render({"foo": "true"}) == 'foo: "true"\n'

    def test_mapping(self):
        """Test nested mappings and sequences as mapping values."""
        value = {"a": 1, "b": [1, 2], "c": {"d": None}}
        assert render(value) == "a: 1\nb:\n  - 1\n  - 2\nc:\n  d: null\n"

    def test_sequence(self):
        """Test mappings and sequences as sequence elements start inline."""
        value = [{"a": 1, "b": 2}, [1, 2]]
        assert render(value) == "- a: 1\n  b: 2\n- - 1\n  - 2\n"

    def test_empty_containers(self):
        """Test empty containers are inline."""
        assert render({"a": [], "b": {}}) == "a: []\nb: {}\n"
        assert render([]) == "[]\n"
        assert render({}) == "{}\n"
        assert render([[], {}]) == "- []\n- {}\n"

    def test_keys_are_quoted_when_needed(self):
        """Test keys follow the flow quoting rule."""
        assert render({"true": 1, "a b": 2, "": 3}) == '"true": 1\na b: 2\n"": 3\n'

    def test_numbers(self):
        """Test integers and floats keep their form."""
        assert render({"i": 1, "f": 1.5, "g": 2.0}) == "i: 1\nf: 1.5\ng: 2.0\n"

    def test_block_scalar(self):
        """Test multi-line strings use a literal block."""
        value = {"script": "echo hi\necho bye\n"}
        assert render(value) == "script: |\n  echo hi\n  echo bye\n"

    def test_nested_block_scalar(self):
        """Test block bodies are indented to the nesting depth."""
        value = {"jobs": {"run": "a\nb"}}
        assert render(value) == "jobs:\n  run: |-\n    a\n    b\n"

    def test_block_scalar_in_sequence(self):
        """Test block scalars as sequence elements."""
        assert render(["a\nb\n"]) == "- |\n  a\n  b\n"

    def test_top_level_block_scalar(self):
        """Test a top-level multi-line string."""
        assert render("a\nb\n") == "|\n  a\n  b\n"
        assert yaml.safe_load(render("a\nb\n")) == "a\nb\n"

    def test_roles(self):
        """Test keys and strings carry their highlighting roles."""
        spans = emit_yaml({"k": "v", "n": 2})
        assert Span("k", Role.KEY) in spans
        assert Span("v", Role.STRING) in spans
        assert Span("2") in spans

    def test_round_trip(self):
        """Test emitted YAML loads back to the same tree."""
        assert yaml.safe_load(render(WORKFLOW)) == WORKFLOW

    def test_round_trip_strings(self):
        """Test awkward strings survive a round trip."""
        value = {
            "leading": "  indented\nbody\n",
            "kept": "a\n\n",
            "stripped": "a\nb",
            "blank": "a\n\nb\n",
            "tab": "a\tb",
            "empty": "",
            "colon": "key:",
            "unicode": "héllo ✓",
            "null": "null",
            "number": "0x1F",
            "value": "=",
            "merge": "<<",
            "=": 1,
            "<<": 2,
        }
        assert yaml.safe_load(render(value)) == value

    def test_value_and_merge_keys_are_quoted(self):
        """Test '=' and '<<' are not written as plain scalars."""
        assert render({"k": "="}) == 'k: "="\n'
        assert render({"<<": 1}) == '"<<": 1\n'
        assert yaml.safe_load(render(["=", "<<"])) == ["=", "<<"]

    def test_nested_round_trip(self):
        """Test deep nesting of sequences and mappings."""
        value = {"a": [[{"b": ["  x\ny", {"c": []}]}]], "d": [{"e": {"f": "g\n"}}]}
        assert yaml.safe_load(render(value)) == value
