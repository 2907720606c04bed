"""Host protocols: where state comes from and where decisions go.

The host owns store subscription and tree mounting. It calls
Connection.refresh() once per state-change notification.

Usage:
    connection = Connection(source=my_store, renderer=my_renderer, props=props)
    store.subscribe(connection.refresh)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cfselect.core.render import RenderDecision


@runtime_checkable
class StateSource(Protocol):
    """Anything that can hand out the current application state."""

    def get_state(self) -> Any:
        """Return the current state. Must not be mutated by the caller."""
        ...


@runtime_checkable
class Renderer(Protocol):
    """Host-side consumer of render decisions."""

    def render(self, decision: RenderDecision) -> None:
        """Mount the decision's output (or nothing, for Suppressed)."""
        ...
