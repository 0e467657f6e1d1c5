"""Queries over the layout constraints attached to a view.

A constraint that relates a view to its siblings or its parent usually lives
on the parent, not on the view itself. So every query looks at the
constraints of the view and of its superview, and keeps the ones that
actually reference the view.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .protocols import Constraint, View


def constraints_with(view: View, other: View | None = None) -> list[Constraint]:
    """Active constraints of ``view``, or only those between ``view`` and ``other``."""
    candidates = list(view.constraints)
    if view.superview is not None:
        candidates += list(view.superview.constraints)
    return [
        c for c in candidates
        if c.active and (
            c.first_item is view and (other is None or c.second_item is other)
            or c.second_item is view and (other is None or c.first_item is other)
        )
    ]


def constraints_with_any(view: View, others: Iterable[View]) -> list[Constraint]:
    result: list[Constraint] = []
    for other in others:
        result += constraints_with(view, other)
    return result


def constraints_by(view: View, attribute: str) -> list[Constraint]:
    """Constraints of ``view`` that pin the given attribute of ``view``."""
    return _filter(constraints_with(view), view, attribute)


def constraint_by(view: View, attribute: str) -> Constraint | None:
    return next(iter(constraints_by(view, attribute)), None)


def constraints_between(view: View, other: View, attribute: str) -> list[Constraint]:
    """Constraints between ``view`` and ``other`` on ``other``'s ``attribute``."""
    return _filter(constraints_with(view, other), other, attribute)


def constraint_between(view: View, other: View, attribute: str) -> Constraint | None:
    return next(iter(constraints_between(view, other, attribute)), None)


def remove_constraints(view: View, other: View | None = None) -> View:
    """Deactivate the constraints of ``view`` (or those shared with ``other``)."""
    _deactivate(constraints_with(view, other))
    return view


def remove_constraints_with_any(view: View, others: Iterable[View]) -> View:
    _deactivate(constraints_with_any(view, others))
    return view


def _filter(constraints: list[Constraint], item: Any, attribute: str) -> list[Constraint]:
    return [
        c for c in constraints
        if c.first_item is item and c.first_attribute == attribute
        or c.second_item is item and c.second_attribute == attribute
    ]


def _deactivate(constraints: Iterable[Constraint]) -> None:
    for constraint in constraints:
        constraint.active = False
