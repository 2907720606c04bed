"""cfselect: declarative selectors and conditional rendering over app state.

Usage:
    from cfselect import evaluate, select

    state = {"user": {"name": "Ada"}, "loading": False}

    # Self-closing: echo the projected value
    select(state, selector=lambda s: s["user"]["name"])   # "Ada"

    # Conditional: render children only if the selector is truthy
    # and the negated selector is falsy
    result = evaluate(
        state,
        selector={"user": lambda s: s["user"]},
        selectorNot=lambda s: s["loading"],
        children="<Profile />",
    )
    result.output   # "<Profile />"

    # Render props: gates are bypassed, the callback decides
    select(state, selector=lambda s: s["user"], children=lambda user, props: user["name"])
"""

__version__ = "0.1.0"

# Core primitives
from cfselect.core import (
    MISSING,
    Callback,
    DecisionKind,
    EchoValue,
    PassThrough,
    RenderDecision,
    SelectorShapeWarning,
    Suppressed,
    classify_content,
    classify_selector,
    decide,
    gates_pass,
    is_negative_falsy,
    is_positive_truthy,
    is_truthy,
    resolve,
)

# Config
from cfselect.config import SelectSettings

# Host boundary
from cfselect.host import (
    Connection,
    LocalStateSource,
    RecordingRenderer,
    Renderer,
    StateSource,
    connect,
)

# Props-level entry point
from cfselect.selection import SelectResult, evaluate, select, split_props

# Tracing (optional)
from cfselect.tracing import DecisionHistory, DecisionRecord

__all__ = [
    # Version
    "__version__",
    # Core
    "MISSING",
    "resolve",
    "classify_selector",
    "classify_content",
    "is_truthy",
    "is_positive_truthy",
    "is_negative_falsy",
    "gates_pass",
    "decide",
    "RenderDecision",
    "DecisionKind",
    "Callback",
    "PassThrough",
    "Suppressed",
    "EchoValue",
    "SelectorShapeWarning",
    # Selection
    "evaluate",
    "select",
    "split_props",
    "SelectResult",
    # Config
    "SelectSettings",
    # Host
    "StateSource",
    "Renderer",
    "LocalStateSource",
    "RecordingRenderer",
    "Connection",
    "connect",
    # Tracing
    "DecisionHistory",
    "DecisionRecord",
]
