"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for select().

Usage:
    from cfselect.config import SelectSettings

    # Load from environment variables (CFSELECT_*)
    settings = SelectSettings()

    # Or override with explicit values
    settings = SelectSettings(content_key="render", negated_default=None)
"""

from __future__ import annotations

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SelectSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for props-level selection.

    Attributes:
        selector_key: Props key holding the positive selector.
        selector_not_key: Props key holding the negated selector.
        content_key: Props key holding the content (children or callback).
        negated_default: Projected value used when no negated selector is given.
            False or None keep the negated gate open; True closes it.
        warn_ambiguous_shapes: Warn when a callable selector is also a collection.
        trace_decisions: Record a DecisionRecord per refresh when a history is attached.

    Environment Variables:
        CFSELECT_SELECTOR_KEY
        CFSELECT_SELECTOR_NOT_KEY
        CFSELECT_CONTENT_KEY
        CFSELECT_NEGATED_DEFAULT
        CFSELECT_WARN_AMBIGUOUS_SHAPES
        CFSELECT_TRACE_DECISIONS
    """

    model_config = SettingsConfigDict(
        env_prefix="CFSELECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    selector_key: str = "selector"
    selector_not_key: str = "selectorNot"
    content_key: str = "children"
    negated_default: bool | None = False
    warn_ambiguous_shapes: bool = False
    trace_decisions: bool = True

    @model_validator(mode="after")
    def _check_distinct_keys(self) -> SelectSettings:
        keys = (self.selector_key, self.selector_not_key, self.content_key)
        if len(set(keys)) != len(keys):
            raise ValueError(f"Props keys must be distinct, got {keys}")
        return self

    def reserved_keys(self) -> frozenset[str]:
        """Props keys consumed by select and not forwarded to callbacks."""
        return frozenset((self.selector_key, self.selector_not_key, self.content_key))
