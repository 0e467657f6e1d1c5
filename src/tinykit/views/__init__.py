"""Toolkit-agnostic helpers for view trees and their layout constraints."""

from .constraints import (
    constraint_between,
    constraint_by,
    constraints_between,
    constraints_by,
    constraints_with,
    constraints_with_any,
    remove_constraints,
    remove_constraints_with_any,
)
from .hierarchy import (
    add_subview,
    add_subviews,
    remove_subview,
    remove_subviews,
    subview_with_identifier,
)
from .protocols import Constraint, View

__all__ = [
    "View",
    "Constraint",
    "subview_with_identifier",
    "add_subview",
    "add_subviews",
    "remove_subview",
    "remove_subviews",
    "constraints_with",
    "constraints_with_any",
    "constraints_by",
    "constraint_by",
    "constraints_between",
    "constraint_between",
    "remove_constraints",
    "remove_constraints_with_any",
]
