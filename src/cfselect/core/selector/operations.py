"""Selector classification and resolution against state."""

from __future__ import annotations

import warnings
from collections.abc import Mapping, Sequence
from typing import Any

from cfselect.core.selector.models import (
    AbsentSelector,
    LiteralSelector,
    MappingSelector,
    ProjectorSelector,
    SelectorShape,
    SelectorShapeWarning,
    SequenceSelector,
)
from cfselect.core.types import MISSING, State

_TEXT_TYPES = (str, bytes, bytearray)


def is_mapping(value: Any) -> bool:
    """Check if value is a keyed mapping."""
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """Check if value is an ordered sequence (text does not count)."""
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def classify_selector(descriptor: Any, *, warn_ambiguous: bool = False) -> SelectorShape:
    """Classify a selector descriptor into exactly one shape.

    Inspection order is fixed and the first match wins:
    absent -> projector -> mapping -> sequence -> literal.

    Args:
        descriptor: Selector as supplied by the caller, or MISSING.
        warn_ambiguous: Emit SelectorShapeWarning when a callable also
            looks like a mapping or sequence.

    Returns:
        The classified SelectorShape.
    """
    if descriptor is MISSING:
        return AbsentSelector()
    if callable(descriptor):
        if warn_ambiguous and (is_mapping(descriptor) or is_sequence(descriptor)):
            warnings.warn(
                f"Selector of type {type(descriptor).__name__} is callable and also a "
                f"collection. It will be invoked as a projector.",
                SelectorShapeWarning,
                stacklevel=2,
            )
        return ProjectorSelector(descriptor)
    if is_mapping(descriptor):
        return MappingSelector(descriptor)
    if is_sequence(descriptor):
        return SequenceSelector(descriptor)
    return LiteralSelector(descriptor)


def _project(value: Any, state: State) -> Any:
    return value(state) if callable(value) else value


def resolve_shape(state: State, shape: SelectorShape, default: Any = None) -> Any:
    """Project an already classified selector against state.

    Args:
        state: Current application state.
        shape: Classified selector.
        default: Returned unchanged for AbsentSelector.

    Returns:
        The projected value. Projector exceptions propagate.
    """
    match shape:
        case AbsentSelector():
            return default
        case ProjectorSelector(fn=fn):
            return fn(state)
        case MappingSelector(entries=entries):
            return {key: _project(value, state) for key, value in entries.items()}
        case SequenceSelector(items=items):
            projected = [_project(item, state) for item in items]
            if isinstance(items, tuple) and hasattr(items, "_make"):
                return type(items)._make(projected)
            return tuple(projected) if isinstance(items, tuple) else projected
        case LiteralSelector(value=value):
            return value
    raise TypeError(f"Invalid selector shape: {shape!r}")


def resolve(
    state: State,
    descriptor: Any = MISSING,
    default: Any = None,
    *,
    warn_ambiguous: bool = False,
) -> Any:
    """Derive a projected value from state using a selector descriptor.

    - MISSING -> default (state is not inspected)
    - callable -> descriptor(state)
    - mapping -> new dict, callable values replaced by their result
    - sequence -> new list (tuple or namedtuple kept), callable items replaced by their result
    - anything else -> descriptor itself

    Args:
        state: Current application state.
        descriptor: Selector in any supported shape.
        default: Value used when no selector was supplied.
        warn_ambiguous: See classify_selector.

    Returns:
        The projected value.

    Example:
        >>> resolve({"x": 1}, {"a": lambda s: s["x"] + 1, "b": "lit"})
        {'a': 2, 'b': 'lit'}
    """
    shape = classify_selector(descriptor, warn_ambiguous=warn_ambiguous)
    return resolve_shape(state, shape, default)


def resolve_prop(
    state: State,
    props: Mapping[str, Any],
    name: str,
    default: Any = None,
    *,
    warn_ambiguous: bool = False,
) -> Any:
    """Resolve the selector stored under `name` in a props mapping.

    A missing key means "no selector" and yields `default`; a key present
    with value None is the literal None.
    """
    return resolve(state, props.get(name, MISSING), default, warn_ambiguous=warn_ambiguous)
