"""Tests for the ``when`` modifier combinator."""
from __future__ import annotations

from tessera import cx, generate_css, when
from tessera.model.rule import create_rule
from tessera.modifiers import dark, focus, group_hover, hover, md, supports
from tessera.utilities import bg, p
from tessera.when import apply_modifiers


class TestWhen:
    def test_single_modifier(self) -> None:
        rule = when(hover)(bg("blue"))
        assert rule.selectors == (":hover",)
        assert rule.declarations == {"background-color": "blue"}

    def test_merges_rules(self) -> None:
        rule = when(hover)(bg("blue"), p(2))
        assert rule.declarations == {"background-color": "blue", "padding": "0.5rem"}

    def test_mixed_kinds(self) -> None:
        rule = when(hover, md)(bg("blue"))
        assert rule.selectors == (":hover",)
        assert rule.media_queries == ("(min-width: 768px)",)

    def test_last_modifier_is_innermost(self) -> None:
        rule = when(md, dark)(bg("blue"))
        assert rule.media_queries == ("(prefers-color-scheme: dark)", "(min-width: 768px)")

    def test_same_kind_stacks(self) -> None:
        rule = when(hover, focus)(bg("blue"))
        assert rule.selectors == (":focus", ":hover")

    def test_input_rule_untouched(self) -> None:
        base = bg("blue")
        when(hover)(base)
        assert base.selectors == ()

    def test_no_modifiers(self) -> None:
        assert when()(bg("blue")) == bg("blue")

    def test_template_modifier(self) -> None:
        rule = when(group_hover)(bg("blue"))
        assert rule.selector_template == ".group:hover &"


class TestWhenRendering:
    def test_hover_md_renders_nested(self) -> None:
        name = cx(when(hover, md)(bg("blue")))
        css_text = generate_css()
        assert css_text == (
            "@media (min-width: 768px) {\n"
            f".{name}:hover {{\n"
            "  background-color: blue;\n"
            "}\n"
            "}"
        )

    def test_supports_inside_media(self) -> None:
        cx(when(md, supports("(display: grid)"))(create_rule({"display": "grid"})))
        css_text = generate_css()
        assert css_text.index("@media") < css_text.index("@supports")

    def test_outer_media_wraps_last(self) -> None:
        cx(when(md, dark)(bg("blue")))
        css_text = generate_css()
        assert css_text.index("(min-width: 768px)") < css_text.index("(prefers-color-scheme: dark)")


class TestApplyModifiers:
    def test_right_to_left(self) -> None:
        order: list[str] = []

        def tag(name: str):
            def modifier(rule):
                order.append(name)
                return rule

            return modifier

        apply_modifiers(create_rule({}), [tag("a"), tag("b"), tag("c")])
        assert order == ["c", "b", "a"]
