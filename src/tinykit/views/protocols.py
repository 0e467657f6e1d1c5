"""Structural types for the toolkit objects the view helpers operate on.

Any GUI toolkit whose views and layout constraints expose these attributes
can be used; nothing here imports a toolkit.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class Constraint(Protocol):
    """A layout constraint relating an attribute of one item to another."""

    first_item: Any
    second_item: Any
    first_attribute: str
    second_attribute: str
    active: bool


class View(Protocol):
    """A node of a view tree that may hold layout constraints."""

    identifier: str | None
    superview: View | None

    @property
    def subviews(self) -> Sequence[View]: ...

    @property
    def constraints(self) -> Sequence[Constraint]: ...

    def add_subview(
        self,
        subview: View,
        positioned: str | None = None,
        relative_to: View | None = None,
    ) -> None: ...

    def remove_from_superview(self) -> None: ...
