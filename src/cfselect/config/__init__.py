"""Configuration module using Pydantic Settings.

Usage:
    from cfselect.config import SelectSettings

    settings = SelectSettings(selector_not_key="unless")
"""

from cfselect.config.settings import SelectSettings

__all__ = [
    "SelectSettings",
]
