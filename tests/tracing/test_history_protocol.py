"""Tests for DecisionHistory protocol.

Why these tests exist:
- DecisionHistory is the extension point hosts implement for tracing
- Protocol compliance must be verifiable at runtime
"""

from cfselect.tracing import DecisionHistory, DecisionRecord


class SimpleHistory:
    """Minimal DecisionHistory implementation for testing."""

    def __init__(self, max_records: int = 100) -> None:
        self._records: dict[int, DecisionRecord] = {}
        self._max_records = max_records

    def record(self, record: DecisionRecord) -> None:
        self._records[record.sequence] = record
        # Evict oldest if over limit
        if len(self._records) > self._max_records:
            del self._records[min(self._records)]

    def get(self, sequence: int) -> DecisionRecord | None:
        return self._records.get(sequence)

    def clear(self) -> None:
        self._records.clear()

    @property
    def count(self) -> int:
        return len(self._records)


def _record(sequence: int) -> DecisionRecord:
    return DecisionRecord(sequence, float(sequence), "pass_through", True, True)


def test_simple_history_is_decision_history() -> None:
    assert isinstance(SimpleHistory(), DecisionHistory)


def test_object_without_methods_is_not_history() -> None:
    assert not isinstance(object(), DecisionHistory)


def test_record_and_get() -> None:
    history = SimpleHistory()
    history.record(_record(1))

    assert history.get(1) == _record(1)
    assert history.get(2) is None


def test_bounded_history_evicts_oldest() -> None:
    history = SimpleHistory(max_records=2)
    for sequence in (1, 2, 3):
        history.record(_record(sequence))

    assert history.count == 2
    assert history.get(1) is None
    assert history.get(3) is not None


def test_clear() -> None:
    history = SimpleHistory()
    history.record(_record(1))
    history.clear()
    assert history.count == 0
