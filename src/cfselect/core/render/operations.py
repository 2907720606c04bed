"""Gate evaluation and render-mode dispatch."""

from __future__ import annotations

import math
from collections.abc import Mapping, Set
from decimal import Decimal
from numbers import Number
from typing import Any

from cfselect.core.render.models import (
    Callback,
    CallbackContent,
    ContentShape,
    EchoValue,
    NoContent,
    PassThrough,
    RenderDecision,
    StaticContent,
    Suppressed,
)
from cfselect.core.selector.operations import is_mapping, is_sequence
from cfselect.core.types import MISSING


def _is_nan(value: Number) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, complex):
        return math.isnan(value.real) or math.isnan(value.imag)
    return value != value


def is_truthy(value: Any) -> bool:
    """Element truthiness used by both gates.

    Falsy: None, False, numeric zero, NaN, empty str/bytes, MISSING.
    Collections are truthy even when empty; other objects use bool(), and
    an object whose truth value is ambiguous (bool() raises) counts as truthy.
    """
    if value is None or value is MISSING:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, Number):
        return bool(value) and not _is_nan(value)
    if isinstance(value, (str, bytes, bytearray)):
        return len(value) > 0
    if isinstance(value, (Mapping, Set)) or is_sequence(value):
        return True
    try:
        return bool(value)
    except (TypeError, ValueError):
        # Array-likes such as numpy arrays refuse bool()
        return True


def _elements(value: Any) -> Any:
    return value.values() if is_mapping(value) else value


def is_positive_truthy(value: Any) -> bool:
    """Positive gate: every element truthy for collections, else the value itself.

    Empty mappings and sequences pass (vacuous truth).
    """
    if is_mapping(value) or is_sequence(value):
        return all(is_truthy(item) for item in _elements(value))
    return is_truthy(value)


def is_negative_falsy(value: Any) -> bool:
    """Negated gate: every element falsy for collections, else the value itself.

    Empty mappings and sequences pass (vacuous truth).
    """
    if is_mapping(value) or is_sequence(value):
        return not any(is_truthy(item) for item in _elements(value))
    return not is_truthy(value)


def gates_pass(positive: Any, negative: Any) -> bool:
    """Check both gates. Content renders only when this holds."""
    return is_positive_truthy(positive) and is_negative_falsy(negative)


def classify_content(content: Any) -> ContentShape:
    """Classify caller content once, at the boundary.

    MISSING and falsy content count as no content (self-closing usage).
    """
    if not is_truthy(content):
        return NoContent()
    if callable(content):
        return CallbackContent(content)
    return StaticContent(content)


def decide(
    positive: Any,
    negative: Any,
    content: Any = MISSING,
    remaining_props: Any = None,
) -> RenderDecision:
    """Produce the render decision from the two projected values.

    Priority:
    1. Callback content is invoked with (positive, remaining_props); gates are bypassed.
    2. Static content passes through when both gates pass.
    3. Static content is suppressed otherwise.
    4. Without content the positive value is echoed, unless it is None.

    Args:
        positive: Projected value of the positive selector.
        negative: Projected value of the negated selector.
        content: Content descriptor as supplied by the caller.
        remaining_props: Forwarded unmodified to callbacks (empty dict if None).

    Returns:
        Callback, PassThrough, Suppressed or EchoValue.
    """
    return decide_shape(positive, negative, classify_content(content), remaining_props)


def decide_shape(
    positive: Any,
    negative: Any,
    shape: ContentShape,
    remaining_props: Any = None,
) -> RenderDecision:
    """Dispatch on already classified content. See decide for the priority rules."""
    match shape:
        case CallbackContent(fn=fn):
            props = {} if remaining_props is None else remaining_props
            return Callback(fn(positive, props))
        case StaticContent(value=value):
            if gates_pass(positive, negative):
                return PassThrough(value)
            return Suppressed()
        case NoContent():
            if positive is None or positive is MISSING:
                return Suppressed()
            return EchoValue(positive)
    raise TypeError(f"Invalid content shape: {shape!r}")
