"""Render functionality: gates, content shapes, and render decisions."""

from cfselect.core.render.models import (
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
)
from cfselect.core.render.operations import (
    classify_content,
    decide,
    decide_shape,
    gates_pass,
    is_negative_falsy,
    is_positive_truthy,
    is_truthy,
)

__all__ = [
    # Models
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
    # Operations
    "is_truthy",
    "is_positive_truthy",
    "is_negative_falsy",
    "gates_pass",
    "classify_content",
    "decide",
    "decide_shape",
]
