"""Tests for the ``tw`` chain builder."""
from __future__ import annotations

import pytest

from tessera import cx, generate_css, get_session, tw
from tessera.chain import Chain, ModifierChain, lookup, normalize
from tessera.chain.builder import ParamModifier, UtilityCall
from tessera.chain.dispatch import DISPATCH, HandlerKind
from tessera.model.rule import Rule
from tessera.modifiers import hover
from tessera.session import BuildSession, reset
from tessera.utilities import bg, p


def rules_of(chain: Chain) -> list[Rule]:
    return [item for item in chain.rules if isinstance(item, Rule)]


def block_for(css_text: str, class_name: str) -> str:
    """Return the header line of the CSS block containing *class_name*."""
    for line in css_text.splitlines():
        if f".{class_name}" in line:
            return line
    raise AssertionError(f"{class_name} not rendered")


# ---------------------------------------------------------------------------
# Dispatch table
# ---------------------------------------------------------------------------


class TestDispatchTable:
    def test_kinds(self) -> None:
        assert lookup("flex").kind is HandlerKind.STYLE
        assert lookup("group").kind is HandlerKind.RAW
        assert lookup("bg").kind is HandlerKind.UTILITY
        assert lookup("hover").kind is HandlerKind.MODIFIER
        assert lookup("aria").kind is HandlerKind.PARAM_MODIFIER

    def test_unknown(self) -> None:
        assert lookup("card") is None

    def test_camel_case_normalized(self) -> None:
        assert normalize("flexCol") == "flex_col"
        assert normalize("groupFocusVisible") == "group_focus_visible"
        assert lookup("textColor").target is lookup("text_color").target

    def test_digit_suffix_normalized(self) -> None:
        assert normalize("max2xl") == "max_2xl"
        assert normalize("flex1") == "flex_1"
        assert lookup("max2xl").target is lookup("max_2xl").target
        assert lookup("flex1").kind is HandlerKind.STYLE

    def test_leading_capital_kept(self) -> None:
        assert normalize("Hover") == "Hover"
        assert lookup("Hover") is None

    def test_python_keyword_aliases(self) -> None:
        assert "self" in DISPATCH
        assert "open" in DISPATCH
        assert "print" in DISPATCH


# ---------------------------------------------------------------------------
# Accumulation
# ---------------------------------------------------------------------------


class TestAccumulation:
    def test_empty_chain(self) -> None:
        assert str(tw) == ""

    def test_style(self) -> None:
        chain = tw.flex
        assert isinstance(chain, Chain)
        assert rules_of(chain)[0].declarations == {"display": "flex"}

    def test_utility_call(self) -> None:
        chain = tw.p(4).bg("red")
        assert [r.declarations for r in rules_of(chain)] == [
            {"padding": "1rem"},
            {"background-color": "red"},
        ]

    def test_camel_case_chain(self) -> None:
        chain = tw.flexCol.textColor("red")
        assert [r.declarations for r in rules_of(chain)] == [
            {"flex-direction": "column"},
            {"color": "red"},
        ]

    def test_digit_suffix_chain(self) -> None:
        chain = tw.flex1.max2xl.p(4)
        rules = rules_of(chain)
        assert len(rules) == len(chain.rules) == 2
        assert rules[0].declarations == {"flex": "1 1 0%"}
        assert rules[1].media_queries == ("(max-width: 1535px)",)
        assert rules[1].declarations == {"padding": "1rem"}

    def test_unknown_name_is_raw_class(self) -> None:
        tokens = str(tw.p(4).card.bg("red")).split(" ")
        assert tokens[1] == "card"
        assert len(tokens) == 3

    def test_group_and_peer_are_raw(self) -> None:
        assert tw.group.peer.rules == ("group", "peer")

    def test_utility_without_call_uses_defaults(self) -> None:
        chain = tw.rounded.shadow.flex
        assert [r.declarations for r in rules_of(chain)] == [
            {"border-radius": "0.25rem"},
            {"box-shadow": rules_of(tw.shadow())[0].declarations["box-shadow"]},
            {"display": "flex"},
        ]

    def test_utility_call_is_pending_until_used(self) -> None:
        assert isinstance(tw.bg, UtilityCall)
        assert str(tw.cursor) != ""

    def test_private_names_raise(self) -> None:
        with pytest.raises(AttributeError):
            tw._private
        with pytest.raises(AttributeError):
            tw.__wrapped__

    def test_table_names_with_underscore_prefix(self) -> None:
        chain = tw._2xl.p(4)
        assert rules_of(chain)[0].media_queries == ("(min-width: 1536px)",)


class TestIndependence:
    def test_branches_do_not_interfere(self) -> None:
        base = tw.flex.flexCol
        a = base.gap(4).resolve()
        b = base.gap(8).resolve()
        assert a != b
        resolved = base.resolve()
        assert len(resolved.split(" ")) == 2
        css_text = generate_css()
        assert "display: flex;" in css_text
        assert "flex-direction: column;" in css_text
        for name in resolved.split(" "):
            assert get_session().registry.get(name).rule.declarations in (
                {"display": "flex"},
                {"flex-direction": "column"},
            )

    def test_base_unchanged_after_branching(self) -> None:
        base = tw.p(4)
        base.bg("red")
        base.hover
        assert len(base.rules) == 1
        assert base.pending == ()


# ---------------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------------


class TestModifierScoping:
    def test_modifier_applies_to_next_utility_only(self) -> None:
        first_bg, hover_bg, padding = str(tw.bg("white").hover.bg("blue").p(4)).split(" ")
        css_text = generate_css()
        assert ":hover" in block_for(css_text, hover_bg)
        assert ":hover" not in block_for(css_text, padding)
        assert ":hover" not in block_for(css_text, first_bg)

    def test_modifier_returns_dual_mode_chain(self) -> None:
        assert isinstance(tw.hover, ModifierChain)
        assert tw.hover.pending == (hover,)

    def test_stacked_modifiers(self) -> None:
        rule = rules_of(tw.md.hover.bg("blue"))[0]
        assert rule.selectors == (":hover",)
        assert rule.media_queries == ("(min-width: 768px)",)

    def test_modifier_applies_to_style(self) -> None:
        rule = rules_of(tw.md.flex)[0]
        assert rule.media_queries == ("(min-width: 768px)",)

    def test_modifier_before_raw_name_is_consumed(self) -> None:
        chain = tw.hover.card.p(4)
        assert rules_of(chain)[0].selectors == ()

    def test_group_call_wraps_each_rule(self) -> None:
        chain = tw.p(2).hover(tw.bg("blue").textColor("white"))
        padding, background, color = rules_of(chain)
        assert padding.selectors == ()
        assert background.selectors == (":hover",)
        assert color.selectors == (":hover",)
        assert chain.pending == ()

    def test_group_call_with_several_chains(self) -> None:
        chain = tw.md.hover(tw.bg("blue"), tw.p(4))
        for rule in rules_of(chain):
            assert rule.selectors == (":hover",)
            assert rule.media_queries == ("(min-width: 768px)",)

    def test_group_call_ignores_argument_pending(self) -> None:
        chain = tw.hover(tw.bg("blue").focus)
        (rule,) = rules_of(chain)
        assert rule.selectors == (":hover",)

    def test_group_call_keeps_raw_strings(self) -> None:
        chain = tw.hover(tw.bg("blue"), "card")
        assert chain.rules[1] == "card"

    def test_group_call_accepts_rules(self) -> None:
        (rule,) = rules_of(tw.focus(bg("red")))
        assert rule.selectors == (":focus",)

    def test_before_adds_content(self) -> None:
        (rule,) = rules_of(tw.before.textColor("red"))
        assert rule.declarations == {"content": '""', "color": "red"}


class TestParamModifiers:
    def test_param_modifier_then_chain(self) -> None:
        assert isinstance(tw.aria, ParamModifier)
        (rule,) = rules_of(tw.aria("busy").opacity(0.5))
        assert rule.selectors == ("[aria-busy]",)

    def test_param_modifier_group_call(self) -> None:
        chain = tw.supports("(display: grid)")(tw.grid(2), tw.gap(4))
        for rule in rules_of(chain):
            assert rule.supports_queries == ("(display: grid)",)

    def test_group_has_template(self) -> None:
        (rule,) = rules_of(tw.groupHas("img").p(1))
        assert rule.selector_template == ".group:has(img) &"


# ---------------------------------------------------------------------------
# Calling the chain
# ---------------------------------------------------------------------------


class TestCallMerge:
    def test_merges_chains_and_rules(self) -> None:
        chain = tw.flex(tw.p(4).bg("red"), bg("blue"), "card")
        assert len(chain.rules) == 5
        assert chain.rules[-1] == "card"

    def test_keeps_pending(self) -> None:
        chain = Chain((), (hover,))(tw.p(1))
        assert chain.pending == (hover,)

    def test_nested_chains_flatten(self) -> None:
        inner = tw.p(1)
        chain = tw(tw(inner, tw.m(1)), tw.gap(2))
        assert len(chain.rules) == 3


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class TestResolution:
    def test_resolution_is_idempotent(self) -> None:
        chain = tw.p(4).bg("red")
        first = str(chain)
        assert chain.value == first
        assert chain.class_name == first
        assert chain.resolve() == first
        assert len(get_session().entries()) == 2

    def test_resolution_after_reset_reregisters(self) -> None:
        chain = tw.p(4).bg("red")
        str(chain)
        reset()
        names = str(chain).split(" ")
        assert len(names) == 2
        assert all(name in get_session().registry for name in names)
        assert "padding: 1rem;" in generate_css()

    def test_resolution_after_clear_registry_reregisters(self) -> None:
        chain = tw.p(4)
        first = str(chain)
        get_session().clear_registry()
        assert generate_css() == ""
        second = str(chain)
        assert second in get_session().registry
        assert "padding: 1rem;" in generate_css()
        assert second != first

    def test_matches_cx(self) -> None:
        session_a, session_b = BuildSession(), BuildSession()
        via_chain = tw.p(4).bg("red").with_session(session_a).resolve()
        via_cx = cx(p(4), bg("red"), session=session_b)
        assert via_chain == via_cx

    def test_string_concatenation(self) -> None:
        chain = tw.p(4)
        assert ("x " + chain) == "x " + str(chain)
        assert (chain + " y") == str(chain) + " y"

    def test_cx_accepts_chain(self) -> None:
        chain = tw.p(4)
        tokens = cx(chain, "card").split(" ")
        assert tokens[1] == "card"

    def test_repr_does_not_resolve(self) -> None:
        text = repr(tw.p(4).hover)
        assert text.startswith("Chain(")
        assert "pending" in text
        assert generate_css() == ""
