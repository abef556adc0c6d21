"""Tests for the Rule model and its pure wrapping/combining helpers."""
from __future__ import annotations

import dataclasses

import pytest

from tessera.model.rule import (
    Rule,
    combine_rules,
    create_dynamic_rule,
    create_rule,
    with_declaration_default,
    with_layer,
    wrap_with_media_query,
    wrap_with_selector,
    wrap_with_selector_template,
    wrap_with_supports_query,
)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestCreateRule:
    def test_defaults(self) -> None:
        rule = create_rule({"padding": "1rem"})
        assert rule.declarations == {"padding": "1rem"}
        assert rule.selectors == ()
        assert rule.media_queries == ()
        assert rule.supports_queries == ()
        assert rule.selector_template is None
        assert rule.dynamic_bindings is None
        assert rule.layer is None

    def test_copies_input_mapping(self) -> None:
        source = {"padding": "1rem"}
        rule = create_rule(source)
        source["padding"] = "2rem"
        assert rule.declarations == {"padding": "1rem"}

    def test_lists_become_tuples(self) -> None:
        rule = Rule(declarations={}, selectors=[":hover"], media_queries=["print"])
        assert rule.selectors == (":hover",)
        assert rule.media_queries == ("print",)

    def test_frozen(self) -> None:
        rule = create_rule({"padding": "1rem"})
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.layer = 3  # type: ignore[misc]

    def test_dynamic_rule(self) -> None:
        rule = create_dynamic_rule(
            {"background-color": "var(--tc-d0)"}, {"--tc-d0": "#fff"}
        )
        assert rule.dynamic_bindings == {"--tc-d0": "#fff"}


class TestIsEmpty:
    def test_empty_rule(self) -> None:
        assert create_rule({}).is_empty

    def test_declarations_not_empty(self) -> None:
        assert not create_rule({"color": "red"}).is_empty

    def test_bindings_only_not_empty(self) -> None:
        assert not create_dynamic_rule({}, {"--tc-d0": "1"}).is_empty


# ---------------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------------


class TestCombineRules:
    def test_disjoint_declarations_merge(self) -> None:
        merged = combine_rules([create_rule({"padding": "1rem"}), create_rule({"color": "red"})])
        assert merged.declarations == {"padding": "1rem", "color": "red"}

    def test_last_write_wins(self) -> None:
        merged = combine_rules([create_rule({"padding": "1rem"}), create_rule({"padding": "2rem"})])
        assert merged.declarations == {"padding": "2rem"}

    def test_selectors_deduplicated_in_first_seen_order(self) -> None:
        a = wrap_with_selector(create_rule({"color": "red"}), ":hover")
        b = wrap_with_selector(wrap_with_selector(create_rule({}), ":focus"), ":hover")
        merged = combine_rules([a, b])
        assert merged.selectors == (":hover", ":focus")

    def test_queries_deduplicated(self) -> None:
        a = wrap_with_media_query(create_rule({"color": "red"}), "print")
        b = wrap_with_media_query(create_rule({"margin": "0"}), "print")
        assert combine_rules([a, b]).media_queries == ("print",)

    def test_bindings_merge(self) -> None:
        a = create_dynamic_rule({"color": "var(--tc-d0)"}, {"--tc-d0": "red"})
        b = create_dynamic_rule({"margin": "var(--tc-d1)"}, {"--tc-d1": "4px"})
        merged = combine_rules([a, b, create_rule({"padding": "0"})])
        assert merged.dynamic_bindings == {"--tc-d0": "red", "--tc-d1": "4px"}

    def test_no_bindings_stays_none(self) -> None:
        merged = combine_rules([create_rule({"a": "1"}), create_rule({"b": "2"})])
        assert merged.dynamic_bindings is None

    def test_last_template_and_layer_win(self) -> None:
        a = with_layer(wrap_with_selector_template(create_rule({}), ".group:hover &"), 1)
        b = with_layer(create_rule({}), 5)
        merged = combine_rules([a, b])
        assert merged.selector_template == ".group:hover &"
        assert merged.layer == 5

    def test_empty_input(self) -> None:
        assert combine_rules([]) == Rule()


# ---------------------------------------------------------------------------
# Wrapping
# ---------------------------------------------------------------------------


class TestWrapping:
    def test_wrap_returns_new_rule(self) -> None:
        rule = create_rule({"color": "red"})
        wrapped = wrap_with_selector(rule, ":hover")
        assert rule.selectors == ()
        assert wrapped.selectors == (":hover",)
        assert wrapped.declarations == rule.declarations

    def test_media_queries_append(self) -> None:
        rule = wrap_with_media_query(wrap_with_media_query(create_rule({}), "a"), "b")
        assert rule.media_queries == ("a", "b")

    def test_supports_query(self) -> None:
        rule = wrap_with_supports_query(create_rule({}), "(display: grid)")
        assert rule.supports_queries == ("(display: grid)",)

    def test_selector_template(self) -> None:
        rule = wrap_with_selector_template(create_rule({}), ".peer:checked ~ &")
        assert rule.selector_template == ".peer:checked ~ &"


class TestDeclarationDefault:
    def test_adds_first(self) -> None:
        rule = with_declaration_default(create_rule({"color": "red"}), "content", '""')
        assert list(rule.declarations) == ["content", "color"]

    def test_keeps_existing(self) -> None:
        rule = create_rule({"content": '"x"'})
        assert with_declaration_default(rule, "content", '""') is rule


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------


class TestContext:
    def test_selector_order_does_not_matter(self) -> None:
        a = Rule(declarations={}, selectors=(":hover", ":focus"))
        b = Rule(declarations={}, selectors=(":focus", ":hover"))
        assert a.context == b.context

    def test_conditions_are_tagged(self) -> None:
        rule = Rule(declarations={}, media_queries=("print",), supports_queries=("print",))
        assert rule.conditions == frozenset({("media", "print"), ("supports", "print")})

    def test_template_is_part_of_context(self) -> None:
        a = Rule(declarations={})
        b = Rule(declarations={}, selector_template=".group:hover &")
        assert a.context != b.context
