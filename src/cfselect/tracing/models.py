"""Data models for tracing infrastructure.

Records only carry JSON-serializable summaries; projected values and
content stay with the host.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class DecisionRecord:
    """Summary of a single evaluation for history storage.

    Attributes:
        sequence: Refresh number on the owning connection (1-based).
        timestamp: Unix timestamp when the decision was made.
        kind: DecisionKind value ("callback", "pass_through", ...).
        positive_passed: Whether the positive gate held.
        negative_passed: Whether the negated gate held.
        metadata: Optional arbitrary metadata for annotations.

    Example:
        record = DecisionRecord(
            sequence=3,
            timestamp=1704067200.0,
            kind="suppressed",
            positive_passed=True,
            negative_passed=False,
        )
    """

    sequence: int
    timestamp: float
    kind: str
    positive_passed: bool
    negative_passed: bool
    metadata: dict[str, Any] | None = None

    @property
    def gates_passed(self) -> bool:
        return self.positive_passed and self.negative_passed

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "sequence": self.sequence,
            "timestamp": self.timestamp,
            "kind": self.kind,
            "positive_passed": self.positive_passed,
            "negative_passed": self.negative_passed,
        }
        if self.metadata is not None:
            result["metadata"] = self.metadata
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DecisionRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            sequence=data["sequence"],
            timestamp=data["timestamp"],
            kind=data["kind"],
            positive_passed=data["positive_passed"],
            negative_passed=data["negative_passed"],
            metadata=data.get("metadata"),
        )
