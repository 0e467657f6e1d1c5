"""View tree search and subview bookkeeping."""

from __future__ import annotations

from collections.abc import Iterable

from .protocols import View


ORDERING_MODES = ("above", "below")


def subview_with_identifier(view: View, identifier: str) -> View | None:
    """Depth-first search below ``view`` for a subview with ``identifier``.

    Each direct subview is checked before descending into it, and its whole
    subtree is searched before moving on to the next sibling. ``view`` itself
    is never returned.
    """
    for subview in view.subviews:
        if subview.identifier == identifier:
            return subview
        if subview.subviews:
            found = subview_with_identifier(subview, identifier)
            if found is not None:
                return found
    return None


def add_subview(
    view: View,
    subview: View,
    positioned: str | None = None,
    relative_to: View | None = None,
) -> None:
    """Add ``subview`` to ``view``, optionally ordered above/below a sibling."""
    if positioned is None:
        view.add_subview(subview)
        return
    if positioned not in ORDERING_MODES:
        raise ValueError(
            f"Unknown ordering '{positioned}'. Use 'above', 'below', or None."
        )
    view.add_subview(subview, positioned=positioned, relative_to=relative_to)


def add_subviews(view: View, subviews: Iterable[View]) -> None:
    for subview in subviews:
        add_subview(view, subview)


def remove_subview(view: View, subview: View) -> None:
    """Detach ``subview`` only if ``view`` is its current superview."""
    if subview.superview is view:
        subview.remove_from_superview()


def remove_subviews(view: View, subviews: Iterable[View]) -> None:
    # copy: removing may mutate the sequence being iterated
    for subview in list(subviews):
        remove_subview(view, subview)
