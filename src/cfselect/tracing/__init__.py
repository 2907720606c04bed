"""Tracing infrastructure for recording render decisions.

Usage:
    from cfselect.tracing import DecisionHistory, DecisionRecord

    # Implement DecisionHistory for your storage backend
    class MyHistory:
        def record(self, record: DecisionRecord) -> None:
            ...
"""

from cfselect.tracing.models import DecisionRecord
from cfselect.tracing.protocol import DecisionHistory

__all__ = [
    "DecisionHistory",
    "DecisionRecord",
]
