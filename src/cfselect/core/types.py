"""Core type definitions for cfselect."""

from enum import Enum
from typing import Any, Final, Literal, TypeAlias


class _Missing(Enum):
    """Marker for a key that was not supplied at all."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing.MISSING
"""Sentinel distinguishing "key not supplied" from "supplied as None".

`None` is an ordinary value: a selector given as `None` resolves to `None`,
while a selector that is `MISSING` falls back to its default.
"""

Missing: TypeAlias = Literal[_Missing.MISSING]

State: TypeAlias = Any
"""Opaque application state. Never mutated by cfselect."""

Props: TypeAlias = dict[str, Any]
"""Caller-supplied keys forwarded untouched to render callbacks."""
