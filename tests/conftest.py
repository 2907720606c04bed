"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from cfselect import LocalStateSource, RecordingRenderer, SelectSettings


@pytest.fixture
def default_state():
    """State used by the self-closing and scenario tests."""
    return {"foo": "bar"}


@pytest.fixture
def settings(monkeypatch):
    """Settings isolated from CFSELECT_* variables in the environment."""
    for name in (
        "CFSELECT_SELECTOR_KEY",
        "CFSELECT_SELECTOR_NOT_KEY",
        "CFSELECT_CONTENT_KEY",
        "CFSELECT_NEGATED_DEFAULT",
        "CFSELECT_WARN_AMBIGUOUS_SHAPES",
        "CFSELECT_TRACE_DECISIONS",
    ):
        monkeypatch.delenv(name, raising=False)
    return SelectSettings(_env_file=None)


@pytest.fixture
def source(default_state):
    """Fresh in-memory state source."""
    return LocalStateSource(default_state)


@pytest.fixture
def renderer():
    """Fresh recording renderer."""
    return RecordingRenderer()
