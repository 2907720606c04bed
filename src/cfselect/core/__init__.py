"""Core functionalities: stateless selector resolution and render decisions.

Architecture Note:
    core/ contains pure, stateless functions and frozen models.
    Nothing here reads a store or keeps state between calls.
    For the props-level entry point see selection/, for host wiring see host/.
"""

from cfselect.core.render import (
    Callback,
    CallbackContent,
    ContentKind,
    ContentShape,
    DecisionKind,
    EchoValue,
    NoContent,
    PassThrough,
    RenderDecision,
    StaticContent,
    Suppressed,
    classify_content,
    decide,
    decide_shape,
    gates_pass,
    is_negative_falsy,
    is_positive_truthy,
    is_truthy,
)
from cfselect.core.selector import (
    AbsentSelector,
    LiteralSelector,
    MappingSelector,
    ProjectorSelector,
    SelectorKind,
    SelectorShape,
    SelectorShapeWarning,
    SequenceSelector,
    classify_selector,
    resolve,
    resolve_prop,
    resolve_shape,
)
from cfselect.core.types import MISSING, Missing, Props, State

__all__ = [
    # Types
    "MISSING",
    "Missing",
    "Props",
    "State",
    # Selector
    "SelectorKind",
    "SelectorShape",
    "AbsentSelector",
    "ProjectorSelector",
    "MappingSelector",
    "SequenceSelector",
    "LiteralSelector",
    "SelectorShapeWarning",
    "classify_selector",
    "resolve",
    "resolve_prop",
    "resolve_shape",
    # Render
    "ContentKind",
    "ContentShape",
    "CallbackContent",
    "StaticContent",
    "NoContent",
    "DecisionKind",
    "RenderDecision",
    "Callback",
    "PassThrough",
    "Suppressed",
    "EchoValue",
    "is_truthy",
    "is_positive_truthy",
    "is_negative_falsy",
    "gates_pass",
    "classify_content",
    "decide",
    "decide_shape",
]
