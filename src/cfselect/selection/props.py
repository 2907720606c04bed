"""Splitting caller props into selectors, content, and forwarded props."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from cfselect.config import SelectSettings
from cfselect.core.types import MISSING


@dataclass(frozen=True, slots=True)
class SelectProps:
    """Caller props after extraction of the reserved keys.

    Attributes:
        selector: Positive selector descriptor, or MISSING.
        selector_not: Negated selector descriptor, or MISSING.
        content: Children or render callback, or MISSING.
        remaining: Every other key, forwarded to render callbacks.
    """

    selector: Any = MISSING
    selector_not: Any = MISSING
    content: Any = MISSING
    remaining: dict[str, Any] = field(default_factory=dict)


def merge_props(props: Mapping[str, Any] | None, overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Combine a props mapping with keyword overrides. Overrides win.

    Raises:
        TypeError: If props is neither None nor a mapping.
    """
    if props is None:
        return dict(overrides)
    if not isinstance(props, Mapping):
        raise TypeError(f"Expected props mapping, got {type(props).__name__}")
    return {**props, **overrides}


def split_props(
    props: Mapping[str, Any] | None, settings: SelectSettings | None = None
) -> SelectProps:
    """Separate reserved keys from forwarded props without mutating the input.

    Args:
        props: Caller props. Missing reserved keys become MISSING.
        settings: Key names to use (defaults: selector, selectorNot, children).

    Returns:
        SelectProps with the descriptors and the remaining props.
    """
    settings = settings or SelectSettings()
    source = merge_props(props, {})
    reserved = settings.reserved_keys()
    return SelectProps(
        selector=source.get(settings.selector_key, MISSING),
        selector_not=source.get(settings.selector_not_key, MISSING),
        content=source.get(settings.content_key, MISSING),
        remaining={key: value for key, value in source.items() if key not in reserved},
    )
