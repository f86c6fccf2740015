"""Tests for value and container rendering."""
import copy

from devlog.render import (
    CYCLE_MARKER,
    RenderStyle,
    render_bracketed,
    render_tree,
    render_value,
)

TREE_STYLE = RenderStyle(kind="tree", root_marker="root.")


class Part:
    def get_full_name(self):
        return "Workspace.Model.Part"


class UnprintableKey:
    def __str__(self):
        raise RuntimeError("no str")


class BrokenPart:
    def get_full_name(self):
        raise RuntimeError("detached")


class TestScalars:
    def test_string_is_quoted_verbatim(self):
        assert render_value("hello") == '"hello"'
        assert render_value('say "hi"\n') == '"say "hi"\n"'

    def test_booleans(self):
        assert render_value(True) == "true"
        assert render_value(False) == "false"

    def test_numbers(self):
        assert render_value(42) == "42"
        assert render_value(1.5) == "1.5"
        assert render_value(-3) == "-3"

    def test_none(self):
        assert render_value(None) == "None"

    def test_unknown_type_falls_back_to_type_name(self):
        assert render_value(object()) == "<object>"
        assert render_value(b"raw") == "<bytes>"


class TestQualifiedNames:
    def test_bracketed_style_has_no_root_marker(self):
        assert render_value(Part()) == "Workspace.Model.Part"

    def test_tree_style_prefixes_root_marker(self):
        assert render_value(Part(), TREE_STYLE) == "root.Workspace.Model.Part"

    def test_failing_name_lookup_falls_back_to_type_name(self):
        assert render_value(BrokenPart()) == "<BrokenPart>"


class TestBracketed:
    def test_nested_mapping(self):
        expected = (
            "{\n"
            '    ["a"] = 1,\n'
            '    ["b"] = {\n'
            '        ["c"] = true\n'
            "    }\n"
            "}"
        )
        assert render_value({"a": 1, "b": {"c": True}}) == expected

    def test_non_string_keys_are_not_quoted(self):
        expected = '{\n    [1] = "x",\n    [(1, 2)] = "y",\n    [2.5] = 0\n}'
        assert render_value({1: "x", (1, 2): "y", 2.5: 0}) == expected

    def test_unprintable_key_falls_back_to_type_name(self):
        data = {UnprintableKey(): 1}
        assert render_value(data) == "{\n    [<UnprintableKey>] = 1\n}"
        assert render_tree(data) == "└─ [<UnprintableKey>]: 1"

    def test_list_is_keyed_by_index(self):
        assert render_value([10, 20]) == "{\n    [0] = 10,\n    [1] = 20\n}"

    def test_empty_mapping(self):
        assert render_value({}) == "{}"
        assert render_bracketed([]) == "{}"

    def test_tab_width(self):
        style = RenderStyle(tab_width=2)
        assert render_value({"a": {"b": 1}}, style) == (
            '{\n  ["a"] = {\n    ["b"] = 1\n  }\n}'
        )

    def test_cycle_is_cut(self):
        data = {}
        data["self"] = data
        assert render_value(data) == f'{{\n    ["self"] = {CYCLE_MARKER}\n}}'

    def test_shared_value_is_not_a_cycle(self):
        shared = {"x": 1}
        rendered = render_value({"a": shared, "b": shared})
        assert CYCLE_MARKER not in rendered
        assert rendered.count('["x"] = 1') == 2


class TestTree:
    def test_empty_mapping_renders_nothing(self):
        assert render_tree({}) == ""

    def test_single_entry_is_one_last_branch(self):
        rendered = render_tree({"a": 1})
        assert rendered == '└─ ["a"]: 1'
        assert len(rendered.split("\n")) == 1

    def test_nested_connectors(self):
        data = {"a": 1, "b": {"c": 2, "d": 3}, "e": 4}
        expected = "\n".join([
            '├─ ["a"]: 1',
            '├─ ["b"]:',
            '│  ├─ ["c"]: 2',
            '│  └─ ["d"]: 3',
            '└─ ["e"]: 4',
        ])
        assert render_tree(data) == expected

    def test_last_nested_child_uses_blank_padding(self):
        assert render_tree({"a": {"b": 1}}) == '└─ ["a"]:\n   └─ ["b"]: 1'

    def test_empty_nested_mapping_has_header_only(self):
        assert render_tree({"a": {}, "b": 1}) == '├─ ["a"]:\n└─ ["b"]: 1'

    def test_value_renderer_starts_tree_on_new_line(self):
        assert render_value({"a": 1}, TREE_STYLE) == '\n└─ ["a"]: 1'
        assert render_value({}, TREE_STYLE) == "{}"

    def test_cycle_is_cut(self):
        data = {"x": 1}
        data["me"] = data
        assert render_tree(data) == f'├─ ["x"]: 1\n└─ ["me"]: {CYCLE_MARKER}'


class TestPurity:
    def test_rendering_is_idempotent(self):
        data = {"name": "x", "items": [1, 2, {"deep": False}], 3: None}
        for style in (RenderStyle(), TREE_STYLE):
            assert render_value(data, style) == render_value(data, style)

    def test_rendering_does_not_mutate_input(self):
        data = {"name": "x", "items": [1, 2, {"deep": False}]}
        before = copy.deepcopy(data)
        render_value(data)
        render_value(data, TREE_STYLE)
        assert data == before
