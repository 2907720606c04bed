"""Props-level selection: resolve both selectors and decide what to render.

Usage:
    result = evaluate(state, selector=lambda s: s["user"], children=banner)
    if result.rendered:
        mount(result.output)

    # Render props: the callback receives the projected state and other props
    select(state, selector=lambda s: s["count"], children=lambda n, props: f"{n} items")
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from cfselect.config import SelectSettings
from cfselect.core.render import (
    DecisionKind,
    RenderDecision,
    decide,
    is_negative_falsy,
    is_positive_truthy,
)
from cfselect.core.selector import resolve
from cfselect.core.types import State
from cfselect.selection.props import SelectProps, merge_props, split_props


@dataclass(frozen=True, slots=True)
class SelectResult:
    """Outcome of one evaluation.

    Attributes:
        state: Projected value of the positive selector.
        state_not: Projected value of the negated selector.
        decision: What the host should render.
    """

    state: Any
    state_not: Any
    decision: RenderDecision

    @property
    def output(self) -> Any:
        """Value the host should mount (None when suppressed)."""
        return self.decision.output

    @property
    def rendered(self) -> bool:
        """True unless the decision is Suppressed."""
        return self.decision.kind is not DecisionKind.SUPPRESSED

    @property
    def positive_passed(self) -> bool:
        return is_positive_truthy(self.state)

    @property
    def negative_passed(self) -> bool:
        return is_negative_falsy(self.state_not)


def evaluate_props(
    state: State, props: SelectProps, settings: SelectSettings | None = None
) -> SelectResult:
    """Evaluate already split props against state.

    The positive selector defaults to the whole state, the negated selector
    to settings.negated_default.
    """
    settings = settings or SelectSettings()
    warn = settings.warn_ambiguous_shapes
    projected = resolve(state, props.selector, state, warn_ambiguous=warn)
    projected_not = resolve(
        state, props.selector_not, settings.negated_default, warn_ambiguous=warn
    )
    decision = decide(projected, projected_not, props.content, props.remaining)
    return SelectResult(state=projected, state_not=projected_not, decision=decision)


def evaluate(
    state: State,
    props: Mapping[str, Any] | None = None,
    settings: SelectSettings | None = None,
    **kwargs: Any,
) -> SelectResult:
    """Resolve selectors from props and produce a render decision.

    Args:
        state: Current application state.
        props: Caller props (selector, selectorNot, children, anything else).
        settings: Key names and defaults.
        **kwargs: Extra props; they override entries in `props`.

    Returns:
        SelectResult with both projections and the decision.

    Raises:
        TypeError: If props is neither None nor a mapping.
    """
    settings = settings or SelectSettings()
    return evaluate_props(state, split_props(merge_props(props, kwargs), settings), settings)


def select(
    state: State,
    props: Mapping[str, Any] | None = None,
    settings: SelectSettings | None = None,
    **kwargs: Any,
) -> Any:
    """Shorthand for evaluate(...).output."""
    return evaluate(state, props, settings, **kwargs).output
