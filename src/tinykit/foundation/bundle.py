"""Bundle metadata: key-path lookups into a bundle's Info.plist."""

from __future__ import annotations

import logging
import os
import plistlib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Searched in order below the bundle root.
INFO_PLIST_CANDIDATES = ("Contents/Info.plist", "Info.plist")

_MISSING = object()


class Bundle:
    """A directory bundle and its info dictionary.

    Key-path lookups are cached on the instance (``key_path_cache``), misses
    included. Nothing invalidates the cache except ``clear_cache()``: the
    info dictionary is read once and treated as immutable.
    """

    __slots__ = ("_path", "_info", "key_path_cache")

    def __init__(self, path: str | os.PathLike) -> None:
        self._path = Path(path)
        self._info = _load_info_dictionary(self._path)
        self.key_path_cache: dict[str, Any] = {}

    @classmethod
    def from_info_dictionary(
        cls,
        info: Mapping[str, Any],
        path: str | os.PathLike = ".",
    ) -> Bundle:
        """Create a bundle from an in-memory info dictionary."""
        obj = object.__new__(cls)
        obj._path = Path(path)
        obj._info = dict(info)
        obj.key_path_cache = {}
        return obj

    @property
    def path(self) -> Path:
        return self._path

    @property
    def info_dictionary(self) -> dict[str, Any] | None:
        """Parsed Info.plist, or None if the bundle has none."""
        return self._info

    def object_for_info_dictionary(
        self,
        key_path: str,
        cache: bool = True,
        expected_type: type | tuple[type, ...] | None = None,
    ) -> Any:
        """Return the value at a period-separated key path, e.g. ``"App.Build"``.

        Returns None when any key along the path is missing, or when the
        value is not an instance of ``expected_type``.
        """
        if cache and key_path in self.key_path_cache:
            logger.debug("Info key path %r served from cache", key_path)
            value = self.key_path_cache[key_path]
        elif self._info is None:
            return None
        else:
            value = _resolve_key_path(self._info, key_path)
            if cache:
                logger.debug("Info key path %r cached", key_path)
                self.key_path_cache[key_path] = value
        if expected_type is not None and not isinstance(value, expected_type):
            return None
        return value

    def clear_cache(self) -> None:
        self.key_path_cache.clear()

    def __repr__(self) -> str:
        return f"Bundle({str(self._path)!r})"


def _load_info_dictionary(root: Path) -> dict[str, Any] | None:
    for candidate in INFO_PLIST_CANDIDATES:
        plist_path = root / candidate
        if plist_path.is_file():
            with plist_path.open("rb") as fh:
                info = plistlib.load(fh)
            logger.debug("Loaded info dictionary from %s", plist_path)
            return info
    logger.debug("No Info.plist found under %s", root)
    return None


def _resolve_key_path(info: Mapping[str, Any], key_path: str) -> Any:
    value: Any = info
    for key in key_path.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(key, _MISSING)
        if value is _MISSING:
            return None
    return value
