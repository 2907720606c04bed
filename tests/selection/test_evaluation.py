"""Tests for props-level evaluation.

Why these tests exist:
- evaluate() is what hosts call; it wires defaults and props together
- Each rendering mode (self-closing, render props, conditional) is covered
  the way callers actually use it
"""

import pytest

from cfselect import MISSING, DecisionKind, SelectSettings, evaluate, select
from cfselect.core.render import Callback, EchoValue, PassThrough, Suppressed


class TestSelfClosing:
    def test_root_state_without_selector(self, default_state, settings):
        result = evaluate(default_state, settings=settings)

        assert result.state == {"foo": "bar"}
        assert result.decision == EchoValue({"foo": "bar"})

    def test_selector_function(self, default_state, settings):
        result = evaluate(
            default_state, settings=settings, selector=lambda s: {"hello": "world", **s}
        )
        assert result.state == {"hello": "world", "foo": "bar"}

    def test_selector_mapping_with_function_values(self, default_state, settings):
        result = evaluate(
            default_state,
            settings=settings,
            selector={"func": lambda s: {"hello": "world", **s}, "get": "foo"},
        )
        assert result.state["func"]["hello"] == "world"
        assert result.state["get"] == "foo"

    def test_selector_sequence_with_function_values(self, default_state, settings):
        result = evaluate(
            default_state,
            settings=settings,
            selector=[lambda s: {"hello": "world", **s}, "foo"],
        )
        assert result.state[0]["hello"] == "world"
        assert result.state[1] == "foo"

    def test_selector_returning_none_renders_nothing(self, default_state, settings):
        result = evaluate(default_state, settings=settings, selector=lambda s: None)

        assert result.decision == Suppressed()
        assert result.output is None
        assert not result.rendered

    def test_selector_string(self, default_state, settings):
        assert select(default_state, settings=settings, selector="hello") == "hello"

    def test_selector_number(self, default_state, settings):
        assert select(default_state, settings=settings, selector=123) == 123

    def test_echo_ignores_negated_selector(self, default_state, settings):
        result = evaluate(default_state, settings=settings, selector=123, selectorNot=True)
        assert result.decision == EchoValue(123)


class TestRenderProps:
    def test_callback_renders_string(self, settings):
        output = select(
            {"count": 10},
            settings=settings,
            selector=lambda s: "hello",
            children=lambda state, props: state + " world",
        )
        assert output == "hello world"

    def test_callback_renders_number(self, settings):
        output = select(
            {"count": 10},
            settings=settings,
            selector=lambda s: s["count"],
            children=lambda state, props: state,
        )
        assert output == 10

    def test_callback_receives_remaining_props(self, settings):
        seen = {}

        def child(state, props):
            seen.update(props)
            return state

        evaluate(
            {"count": 10},
            {"title": "Cart", "selector": lambda s: s["count"]},
            settings,
            children=child,
            selectorNot=False,
        )

        assert seen == {"title": "Cart"}

    def test_callback_bypasses_gates(self, settings):
        result = evaluate(
            {},
            settings=settings,
            selector=False,
            selectorNot=True,
            children=lambda state, props: f"state={state}",
        )

        assert result.decision == Callback("state=False")
        assert not result.positive_passed
        assert not result.negative_passed


class TestConditionalRender:
    @pytest.fixture
    def empty_state(self):
        return {}

    def test_no_selector_renders_children(self, empty_state, settings):
        result = evaluate(empty_state, settings=settings, children="<div/>")
        assert result.decision == PassThrough("<div/>")

    @pytest.mark.parametrize(
        ("selector", "rendered"),
        [
            (True, True),
            (False, False),
            (lambda s: True, True),
            (lambda s: False, False),
            ({1: True, 2: lambda s: True}, True),
            ({1: True, 2: lambda s: False}, False),
            ([True, True, lambda s: True], True),
            ([True, False, lambda s: True], False),
        ],
    )
    def test_selector_gate(self, empty_state, settings, selector, rendered):
        result = evaluate(empty_state, settings=settings, selector=selector, children="<div/>")
        assert result.rendered is rendered

    @pytest.mark.parametrize(
        ("selector", "selector_not", "rendered"),
        [
            (True, False, True),
            (True, True, False),
            (False, False, False),
            (True, [False, None, lambda s: 0], True),
            (True, {"a": False, "b": lambda s: "x"}, False),
        ],
    )
    def test_dual_gate(self, empty_state, settings, selector, selector_not, rendered):
        result = evaluate(
            empty_state,
            settings=settings,
            selector=selector,
            selectorNot=selector_not,
            children="<div/>",
        )
        assert result.rendered is rendered

    def test_multiple_children_pass_through(self, empty_state, settings):
        children = ["<div/>", "<div/>", "<div/>"]
        result = evaluate(
            empty_state, settings=settings, selector=True, selectorNot=False, children=children
        )

        assert result.decision.kind is DecisionKind.PASS_THROUGH
        assert result.output is children
        assert len(result.output) == 3


class TestDefaults:
    def test_negated_default_is_false(self, settings):
        result = evaluate({}, settings=settings, children="x")
        assert result.state_not is False

    def test_negated_default_from_settings(self):
        settings = SelectSettings(_env_file=None, negated_default=True)
        result = evaluate({}, settings=settings, selector=True, children="x")

        assert result.state_not is True
        assert not result.rendered

    def test_empty_root_state_renders(self, settings):
        """No selector and an empty mapping state pass vacuously."""
        assert evaluate({}, settings=settings, children="x").rendered

    def test_falsy_root_state_suppresses(self, settings):
        assert not evaluate(0, settings=settings, children="x").rendered

    def test_explicit_none_selector_is_not_the_default(self, settings):
        result = evaluate({"foo": "bar"}, settings=settings, selector=None, children="x")

        assert result.state is None
        assert not result.rendered

    def test_missing_selector_kwarg_means_absent(self, settings):
        result = evaluate({"foo": "bar"}, settings=settings, selector=MISSING)
        assert result.state == {"foo": "bar"}

    def test_falsy_children_behave_as_self_closing(self, settings):
        result = evaluate({}, settings=settings, selector=5, children="")
        assert result.decision == EchoValue(5)


class TestProps:
    def test_keywords_override_mapping(self, settings):
        props = {"selector": False, "children": "x"}
        result = evaluate({}, props, settings, selector=True)

        assert result.rendered
        assert props == {"selector": False, "children": "x"}

    def test_rejects_non_mapping_props(self, settings):
        with pytest.raises(TypeError, match="Expected props mapping"):
            evaluate({}, ["selector"], settings)  # type: ignore[arg-type]

    def test_custom_keys(self):
        settings = SelectSettings(
            _env_file=None, selector_key="when", selector_not_key="unless", content_key="then"
        )
        props = {"when": lambda s: s["on"], "unless": False, "then": "x"}
        result = evaluate({"on": True}, props, settings)

        assert result.decision == PassThrough("x")


def test_projector_failure_propagates(settings):
    def broken(state):
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        evaluate({}, settings=settings, selectorNot=broken, children="x")


class AmbiguousTruth:
    def __bool__(self):
        raise ValueError("truth value is ambiguous")


def test_array_like_root_state_renders_children(settings):
    result = evaluate(AmbiguousTruth(), settings=settings, children="x")
    assert result.decision == PassThrough("x")


def test_array_like_negated_projection_suppresses(settings):
    result = evaluate({}, settings=settings, selectorNot=lambda s: AmbiguousTruth(), children="x")
    assert not result.rendered
