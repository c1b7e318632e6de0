"""Tests for rule parsing and compilation."""

import logging

import pytest

from stylegraft.compiler import compile
from stylegraft.compiler.declarations import DeclarationBlock
from stylegraft.compiler.rules import PRETTY, Rule, compile_rules, parse_rule
from stylegraft.config import CompilerFlags
from stylegraft.errors import ConversionError
from stylegraft.units import deg, em, px


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseRule:
    def test_selectors_and_body(self):
        rule = parse_rule(["h1", "h2", {"color": "red"}, ["a", {"x": 1}]])
        assert rule.selectors == ("h1", "h2")
        assert isinstance(rule.body[0], DeclarationBlock)
        assert isinstance(rule.body[1], Rule)
        assert rule.body[1].selectors == ("a",)

    def test_empty_selector_run(self):
        rule = parse_rule([{"color": "red"}, ["a", {"x": 1}]])
        assert rule == Rule(())

    def test_non_string_selector(self):
        assert parse_rule([1, {"a": "b"}]).selectors == ("1",)

    def test_stray_atom_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="stylegraft.compiler.rules"):
            rule = parse_rule(["p", {"a": "b"}, "oops"])
        assert len(rule.body) == 1
        assert "oops" in caplog.text

    def test_non_list_rule_ignored(self):
        assert parse_rule("p") == Rule(())

    def test_parsed_rule_passes_through(self):
        rule = parse_rule(["p", {"a": "b"}])
        assert parse_rule(rule) is rule


# ---------------------------------------------------------------------------
# Compilation
# ---------------------------------------------------------------------------


class TestCompileRules:
    def test_single_rule(self):
        assert compile_rules([["h1", {"font-weight": "bold"}]]) == "h1{font-weight:bold}"

    def test_multiple_selectors(self):
        assert compile_rules([["h1", "h2", {"margin": 0}]]) == "h1,h2{margin:0}"

    def test_cartesian_nesting(self):
        css = compile_rules([["h1", "h2", ["a", {"color": "red"}]]])
        assert css == "h1 a,h2 a{color:red}"

    def test_parent_block_before_children(self):
        css = compile_rules(
            [["ul", ["li", {"float": "left"}], {"margin": 0}]]
        )
        assert css == "ul{margin:0}ul li{float:left}"

    def test_declaration_maps_merged(self):
        css = compile_rules([["p", {"a": 1}, ["b", {"c": 2}], {"d": 3}]])
        assert css == "p{a:1;d:3}p b{c:2}"

    def test_deep_nesting(self):
        css = compile_rules([["nav", ["ul", ["li", {"display": "inline"}]]]])
        assert css == "nav ul li{display:inline}"

    def test_nested_cartesian_is_parent_major(self):
        css = compile_rules([["p1", "p2", ["c1", "c2", {"x": 1}]]])
        assert css == "p1 c1,p1 c2,p2 c1,p2 c2{x:1}"

    def test_empty_rule_emits_nothing(self):
        assert compile_rules([["p"]]) == ""
        assert compile_rules([["p", {}]]) == ""

    def test_zero_selector_subtree_dropped(self):
        css = compile_rules([[{"color": "red"}, ["a", {"color": "blue"}]]])
        assert css == ""

    def test_zero_selector_child_dropped(self):
        css = compile_rules([["p", {"a": 1}, [{"b": 2}, ["i", {"c": 3}]]]])
        assert css == "p{a:1}"

    def test_root_blocks_concatenated(self):
        css = compile_rules([["a", {"x": 1}], ["b", {"y": 2}]])
        assert css == "a{x:1}b{y:2}"

    def test_vendor_prefix_map(self):
        css = compile_rules(
            [[".box", {"-moz": {"border-radius": "3px", "box-sizing": "border-box"}}]]
        )
        assert css == ".box{-moz-border-radius:3px;-moz-box-sizing:border-box}"

    def test_font_lists(self):
        assert compile_rules([["body", {"font": ["16px", "sans-serif"]}]]) == (
            "body{font:16px sans-serif}"
        )
        assert compile_rules(
            [["body", {"font": ["16px", ("Helvetica", "Arial", "sans-serif")]}]]
        ) == "body{font:16px Helvetica,Arial,sans-serif}"

    def test_quantities(self):
        css = compile_rules([["p", {"margin": [px(1), em(0.5)], "width": px.add(10, 5)}]])
        assert css == "p{margin:1px 0.5em;width:15px}"

    def test_deterministic(self):
        tree = [["a", "b", {"x": [1, [2, 3]]}, ["c", {"y": px(1)}]]]
        assert compile_rules(tree) == compile_rules(tree)

    def test_compile_alias(self):
        assert compile([["p", {"a": "b"}]]) == "p{a:b}"

    def test_conversion_error_aborts(self):
        with pytest.raises(ConversionError):
            compile_rules([["p", {"a": 1}], ["q", {"rotate": px(deg(90))}]])


class TestFlags:
    def test_auto_prefix(self):
        flags = CompilerFlags(vendors=("webkit",), auto_prefix=frozenset({"transition"}))
        css = compile_rules([["a", {"transition": "all 1s"}]], flags)
        assert css == "a{-webkit-transition:all 1s;transition:all 1s}"

    def test_pretty_print(self):
        flags = CompilerFlags(pretty_print=True)
        css = compile_rules(
            [["h1", "h2", {"margin": 0, "color": "red"}], ["p", {"a": 1}]], flags
        )
        assert css == "h1,\nh2 {\n  margin: 0;\n  color: red;\n}\n\np {\n  a: 1;\n}"

    def test_pretty_format_block(self):
        assert PRETTY.block(["a"], [("b", "c")]) == "a {\n  b: c;\n}"


class TestEmptyLeadingContainer:
    def test_empty_list_first_drops_everything(self):
        css = compile_rules([[[], {"color": "red"}, ["a", {"color": "blue"}]]])
        assert css == ""
