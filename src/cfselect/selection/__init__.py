"""Props-level entry point.

Architecture Note:
    selection/ adapts caller props (selector, selectorNot, children, ...) to the
    pure functions in core/. It keeps no state between calls.
"""

from cfselect.selection.props import SelectProps, merge_props, split_props
from cfselect.selection.evaluation import SelectResult, evaluate, evaluate_props, select

__all__ = [
    "SelectProps",
    "SelectResult",
    "merge_props",
    "split_props",
    "evaluate",
    "evaluate_props",
    "select",
]
