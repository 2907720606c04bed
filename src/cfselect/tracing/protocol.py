"""Protocols for tracing infrastructure.

These protocols define the interface for decision history backends,
allowing different implementations (in-memory, file, database).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cfselect.tracing.models import DecisionRecord


@runtime_checkable
class DecisionHistory(Protocol):
    """Protocol for storing and retrieving decision records.

    A Connection given a history records one DecisionRecord per successful
    refresh. Useful for debugging why content did or did not render.

    Usage:
        history = MyHistory(max_records=500)
        connection = Connection(source, renderer, props, history=history)
        connection.refresh()
        history.get(1).kind  # "pass_through"
    """

    def record(self, record: DecisionRecord) -> None:
        """Store a decision record.

        Note:
            Implementations may have bounded storage and evict old records.
        """
        ...

    def get(self, sequence: int) -> DecisionRecord | None:
        """Get a record by sequence number, None if not stored."""
        ...

    def clear(self) -> None:
        """Clear all stored records."""
        ...

    @property
    def count(self) -> int:
        """Number of records currently stored."""
        ...
