"""Shared test fixtures for tinykit."""

from dataclasses import dataclass
import plistlib

import pytest

from tinykit.geometry import Point, Rect


@pytest.fixture
def unit_rect():
    """10x10 square at the origin."""
    return Rect(0, 0, 10, 10)


@pytest.fixture
def container():
    """100x100 reference rectangle at the origin."""
    return Rect(0, 0, 100, 100)


@pytest.fixture
def offset_rect():
    """Rectangle away from the origin with distinct width and height."""
    return Rect(20, 30, 40, 20)


@pytest.fixture
def pivot():
    return Point(10, 0)


class FakeView:
    """Minimal view tree node satisfying tinykit.views.View."""

    def __init__(self, identifier=None):
        self.identifier = identifier
        self.superview = None
        self._subviews = []
        self._constraints = []

    @property
    def subviews(self):
        return tuple(self._subviews)

    @property
    def constraints(self):
        return tuple(self._constraints)

    def add_constraint(self, constraint):
        self._constraints.append(constraint)
        return constraint

    def add_subview(self, subview, positioned=None, relative_to=None):
        if subview.superview is not None:
            subview.remove_from_superview()
        if positioned is None:
            self._subviews.append(subview)
        elif relative_to is None:
            index = len(self._subviews) if positioned == "above" else 0
            self._subviews.insert(index, subview)
        else:
            index = self._subviews.index(relative_to)
            self._subviews.insert(index + 1 if positioned == "above" else index, subview)
        subview.superview = self

    def remove_from_superview(self):
        if self.superview is not None:
            self.superview._subviews.remove(self)
            self.superview = None

    def __repr__(self):
        return f"FakeView({self.identifier!r})"


@dataclass(eq=False)
class FakeConstraint:
    """Layout constraint double compared by identity."""

    first_item: object
    first_attribute: str
    second_item: object = None
    second_attribute: str = ""
    active: bool = True


@pytest.fixture
def make_view():
    return FakeView


@pytest.fixture
def make_constraint():
    return FakeConstraint


@pytest.fixture
def view_tree():
    """root -> (header -> (title, close), body -> (content -> (title)))."""
    root = FakeView("root")
    header = FakeView("header")
    title = FakeView("title")
    close = FakeView("close")
    body = FakeView("body")
    content = FakeView("content")
    nested_title = FakeView("title")
    root.add_subview(header)
    root.add_subview(body)
    header.add_subview(title)
    header.add_subview(close)
    body.add_subview(content)
    content.add_subview(nested_title)
    return {
        "root": root,
        "header": header,
        "title": title,
        "close": close,
        "body": body,
        "content": content,
        "nested_title": nested_title,
    }


@pytest.fixture
def info_dictionary():
    return {
        "CFBundleIdentifier": "com.example.tiny",
        "CFBundleShortVersionString": "1.4.2",
        "Build": {"Number": 42, "Flags": {"Debug": False}},
        "Features": ["geometry", "views"],
    }


@pytest.fixture
def bundle_dir(tmp_path, info_dictionary):
    """An app-style bundle directory with Contents/Info.plist."""
    root = tmp_path / "Example.app"
    contents = root / "Contents"
    contents.mkdir(parents=True)
    with (contents / "Info.plist").open("wb") as fh:
        plistlib.dump(info_dictionary, fh)
    return root
