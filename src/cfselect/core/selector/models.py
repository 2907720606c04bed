"""Selector shapes: the closed set of forms a selector descriptor can take.

Usage:
    classify_selector(MISSING)              # AbsentSelector()
    classify_selector(lambda s: s["user"])  # ProjectorSelector(fn)
    classify_selector({"a": f, "b": 1})     # MappingSelector({...})
    classify_selector([f, "lit"])           # SequenceSelector([...])
    classify_selector(123)                  # LiteralSelector(123)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, ClassVar


class SelectorKind(Enum):
    """Selector shape tags, in classification order."""

    ABSENT = auto()
    PROJECTOR = auto()
    MAPPING = auto()
    SEQUENCE = auto()
    LITERAL = auto()


@dataclass(frozen=True, slots=True)
class AbsentSelector:
    """No selector was supplied; resolution yields the default."""

    kind: ClassVar[SelectorKind] = SelectorKind.ABSENT


@dataclass(frozen=True, slots=True)
class ProjectorSelector:
    """A function of state."""

    fn: Callable[[Any], Any]
    kind: ClassVar[SelectorKind] = SelectorKind.PROJECTOR


@dataclass(frozen=True, slots=True)
class MappingSelector:
    """Keyed mapping whose callable values are projected, others kept."""

    entries: Mapping[Any, Any]
    kind: ClassVar[SelectorKind] = SelectorKind.MAPPING


@dataclass(frozen=True, slots=True)
class SequenceSelector:
    """Ordered sequence whose callable elements are projected, others kept."""

    items: Sequence[Any]
    kind: ClassVar[SelectorKind] = SelectorKind.SEQUENCE


@dataclass(frozen=True, slots=True)
class LiteralSelector:
    """Any other value, used verbatim as the projected state."""

    value: Any
    kind: ClassVar[SelectorKind] = SelectorKind.LITERAL


SelectorShape = (
    AbsentSelector | ProjectorSelector | MappingSelector | SequenceSelector | LiteralSelector
)


class SelectorShapeWarning(UserWarning):
    """A selector matched more than one shape and was resolved by precedence."""

    pass
