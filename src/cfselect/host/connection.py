"""Binding of a state source and a renderer to a fixed set of props."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from cfselect.config import SelectSettings
from cfselect.host.protocol import Renderer, StateSource
from cfselect.selection import SelectResult, evaluate_props, merge_props, split_props
from cfselect.tracing import DecisionHistory, DecisionRecord

logger = logging.getLogger(__name__)


class Connection:
    """Evaluates props against a state source and hands decisions to a renderer.

    Props are split once at construction. Every refresh() reads the state,
    evaluates, renders exactly one decision and optionally records it.

    Args:
        source: Provides the current state.
        renderer: Receives the decision.
        props: Caller props (selector, selectorNot, children, ...).
        settings: Key names and defaults.
        history: Optional DecisionHistory for tracing.
        metadata: Copied into every DecisionRecord this connection writes.
    """

    def __init__(
        self,
        source: StateSource,
        renderer: Renderer,
        props: Mapping[str, Any] | None = None,
        settings: SelectSettings | None = None,
        history: DecisionHistory | None = None,
        metadata: dict[str, Any] | None = None,
    ):
        self._source = source
        self._renderer = renderer
        self._settings = settings or SelectSettings()
        self._props = split_props(props, self._settings)
        self._history = history
        self._metadata = metadata
        self._refresh_count = 0

    @property
    def refresh_count(self) -> int:
        """Number of successful refreshes."""
        return self._refresh_count

    @property
    def props(self) -> Mapping[str, Any]:
        """Props forwarded to render callbacks."""
        return self._props.remaining

    def refresh(self) -> SelectResult:
        """Evaluate against the current state and render the decision.

        Projector and renderer exceptions propagate; a failed refresh is
        neither counted nor recorded.

        Returns:
            The SelectResult that was rendered.
        """
        state = self._source.get_state()
        result = evaluate_props(state, self._props, self._settings)
        sequence = self._refresh_count + 1
        logger.debug(
            "refresh #%d: %s (positive=%s, negative=%s)",
            sequence,
            result.decision.kind.value,
            result.positive_passed,
            result.negative_passed,
        )
        self._renderer.render(result.decision)
        self._refresh_count = sequence
        if self._history is not None and self._settings.trace_decisions:
            self._history.record(
                DecisionRecord(
                    sequence=sequence,
                    timestamp=time.time(),
                    kind=result.decision.kind.value,
                    positive_passed=result.positive_passed,
                    negative_passed=result.negative_passed,
                    metadata=dict(self._metadata) if self._metadata is not None else None,
                )
            )
        return result


def connect(
    source: StateSource,
    renderer: Renderer,
    props: Mapping[str, Any] | None = None,
    *,
    settings: SelectSettings | None = None,
    history: DecisionHistory | None = None,
    metadata: dict[str, Any] | None = None,
    **kwargs: Any,
) -> Connection:
    """Create a Connection; keyword props override entries in `props`."""
    return Connection(source, renderer, merge_props(props, kwargs), settings, history, metadata)
