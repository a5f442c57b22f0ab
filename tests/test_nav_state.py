"""Tests for the pure navigation state functions."""

import json

import pytest

from docnav.nav.protocols import StructuralLookup
from docnav.nav.state import (
    ancestors_of,
    ensure_groups,
    parse_expanded_groups,
    parse_scroll_position,
    seed_expanded_groups,
    serialize_expanded_groups,
    serialize_scroll_position,
    toggle_group,
)


class DictLookup:
    """StructuralLookup over a plain parent map."""

    def __init__(self, parents):
        self.parents = parents

    def parent_group_of(self, node_id):
        return self.parents.get(node_id)


class TestParseExpandedGroups:
    def test_absent_value(self):
        assert parse_expanded_groups(None) is None

    def test_array_of_strings(self):
        assert parse_expanded_groups('["a", "b"]') == ["a", "b"]

    def test_empty_array(self):
        assert parse_expanded_groups("[]") == []

    def test_duplicates_collapse_keeping_first(self):
        assert parse_expanded_groups('["a", "b", "a"]') == ["a", "b"]

    @pytest.mark.parametrize(
        "raw",
        [
            '{"a": true}',
            '"a"',
            "42",
            "null",
            '["a", 3]',
            '[["a"]]',
            "not json",
            "",
        ],
    )
    def test_malformed_values_read_as_absent(self, raw):
        assert parse_expanded_groups(raw) is None

    def test_serialize_is_json_array(self):
        raw = serialize_expanded_groups(["root", "mid"])
        assert json.loads(raw) == ["root", "mid"]
        assert parse_expanded_groups(raw) == ["root", "mid"]


class TestScrollPosition:
    def test_numeric_string(self):
        assert parse_scroll_position("120") == 120.0
        assert parse_scroll_position("12.5") == 12.5

    @pytest.mark.parametrize("raw", [None, "", "abc", "-5", "nan", "inf"])
    def test_invalid_reads_as_absent(self, raw):
        assert parse_scroll_position(raw) is None

    def test_serialize_drops_trailing_zero(self):
        assert serialize_scroll_position(120.0) == "120"
        assert serialize_scroll_position(12.5) == "12.5"


class TestSeed:
    def test_absent_state_seeds_first_group(self):
        assert seed_expanded_groups(None, "grp-1") == ["grp-1"]

    def test_empty_state_seeds_first_group(self):
        assert seed_expanded_groups([], "grp-1") == ["grp-1"]

    def test_state_without_first_group_is_replaced(self):
        assert seed_expanded_groups(["grp-2", "grp-3"], "grp-1") == ["grp-1"]

    def test_state_with_first_group_is_kept(self):
        assert seed_expanded_groups(["grp-2", "grp-1"], "grp-1") == ["grp-2", "grp-1"]

    def test_no_first_group_keeps_state(self):
        assert seed_expanded_groups(["a"], None) == ["a"]
        assert seed_expanded_groups(None, None) == []


class TestToggle:
    def test_toggle_adds_absent_group_at_end(self):
        assert toggle_group(["a"], "b") == ["a", "b"]

    def test_toggle_removes_present_group(self):
        assert toggle_group(["a", "b", "c"], "b") == ["a", "c"]

    def test_toggle_twice_restores_membership(self):
        start = ["a", "c"]
        assert toggle_group(toggle_group(start, "b"), "b") == start
        assert set(toggle_group(toggle_group(start, "a"), "a")) == set(start)

    def test_toggle_does_not_mutate_input(self):
        groups = ["a"]
        toggle_group(groups, "b")
        toggle_group(groups, "a")
        assert groups == ["a"]

    def test_ensure_appends_only_missing(self):
        assert ensure_groups(["root"], ["mid", "root"]) == ["root", "mid"]


class TestAncestorsOf:
    def test_walks_to_root_innermost_first(self):
        lookup = DictLookup({"leaf": "mid", "mid": "root", "root": None})
        assert ancestors_of("leaf", lookup) == ["mid", "root"]

    def test_root_has_no_ancestors(self):
        assert ancestors_of("root", DictLookup({"root": None})) == []

    def test_unknown_node_has_no_ancestors(self):
        assert ancestors_of("ghost", DictLookup({})) == []

    def test_cycle_terminates(self):
        lookup = DictLookup({"a": "b", "b": "c", "c": "a"})
        assert ancestors_of("a", lookup) == ["b", "c"]

    def test_dict_lookup_satisfies_protocol(self):
        assert isinstance(DictLookup({}), StructuralLookup)
