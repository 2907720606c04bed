"""Selector functionality: shape classification and projection."""

from cfselect.core.selector.models import (
    AbsentSelector,
    LiteralSelector,
    MappingSelector,
    ProjectorSelector,
    SelectorKind,
    SelectorShape,
    SelectorShapeWarning,
    SequenceSelector,
)
from cfselect.core.selector.operations import (
    classify_selector,
    is_mapping,
    is_sequence,
    resolve,
    resolve_prop,
    resolve_shape,
)

__all__ = [
    # Models
    "SelectorKind",
    "SelectorShape",
    "AbsentSelector",
    "ProjectorSelector",
    "MappingSelector",
    "SequenceSelector",
    "LiteralSelector",
    "SelectorShapeWarning",
    # Operations
    "classify_selector",
    "is_mapping",
    "is_sequence",
    "resolve",
    "resolve_prop",
    "resolve_shape",
]
