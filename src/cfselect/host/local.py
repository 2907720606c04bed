"""In-memory host implementations.

Suitable for tests, scripts and server-side evaluation where no real
rendering layer is present.

Usage:
    source = LocalStateSource({"user": None})
    renderer = RecordingRenderer()
    connection = Connection(source, renderer, {"selector": lambda s: s["user"]})
"""

from __future__ import annotations

from typing import Any

from cfselect.core.render import RenderDecision


class LocalStateSource:
    """Holds a single state value, replaced wholesale by set_state()."""

    def __init__(self, state: Any = None):
        self._state = state

    def get_state(self) -> Any:
        return self._state

    def set_state(self, state: Any) -> None:
        """Replace the current state."""
        self._state = state


class RecordingRenderer:
    """Keeps every decision it was asked to render, in order."""

    def __init__(self) -> None:
        self.decisions: list[RenderDecision] = []

    def render(self, decision: RenderDecision) -> None:
        self.decisions.append(decision)

    @property
    def last(self) -> RenderDecision | None:
        """Most recent decision, None before the first render."""
        return self.decisions[-1] if self.decisions else None

    @property
    def outputs(self) -> list[Any]:
        """Mounted values of all decisions (None for Suppressed)."""
        return [decision.output for decision in self.decisions]

    def clear(self) -> None:
        self.decisions.clear()
