"""Render models: content shapes and render decisions.

Usage:
    decision = decide(positive, negative, content)
    match decision:
        case Callback(output=out): mount(out)
        case PassThrough(content=c): mount(c)
        case EchoValue(value=v): mount_text(v)
        case Suppressed(): pass
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class ContentKind(Enum):
    """How the caller's content was classified."""

    CALLBACK = "callback"
    STATIC = "static"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class CallbackContent:
    """Render-prop content: called with (projected state, remaining props)."""

    fn: Callable[[Any, Any], Any]
    kind: ClassVar[ContentKind] = ContentKind.CALLBACK


@dataclass(frozen=True, slots=True)
class StaticContent:
    """Opaque content rendered as-is when both gates pass."""

    value: Any
    kind: ClassVar[ContentKind] = ContentKind.STATIC


@dataclass(frozen=True, slots=True)
class NoContent:
    """Self-closing usage: the projected value itself is the output."""

    kind: ClassVar[ContentKind] = ContentKind.NONE


ContentShape = CallbackContent | StaticContent | NoContent


class DecisionKind(Enum):
    """Render decision tags."""

    CALLBACK = "callback"
    PASS_THROUGH = "pass_through"
    SUPPRESSED = "suppressed"
    ECHO_VALUE = "echo_value"


@dataclass(frozen=True, slots=True)
class Callback:
    """Output returned by a render-prop callback. Gates were not consulted."""

    output: Any
    kind: ClassVar[DecisionKind] = DecisionKind.CALLBACK


@dataclass(frozen=True, slots=True)
class PassThrough:
    """Both gates passed; mount the content unchanged."""

    content: Any
    kind: ClassVar[DecisionKind] = DecisionKind.PASS_THROUGH

    @property
    def output(self) -> Any:
        return self.content


@dataclass(frozen=True, slots=True)
class Suppressed:
    """Render nothing."""

    kind: ClassVar[DecisionKind] = DecisionKind.SUPPRESSED

    @property
    def output(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class EchoValue:
    """No content supplied; mount the projected value itself."""

    value: Any
    kind: ClassVar[DecisionKind] = DecisionKind.ECHO_VALUE

    @property
    def output(self) -> Any:
        return self.value


RenderDecision = Callback | PassThrough | Suppressed | EchoValue
