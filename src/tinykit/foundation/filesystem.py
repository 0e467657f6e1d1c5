"""Directory existence checks and creation."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class FileAlreadyExistsError(FileExistsError):
    """A non-directory already occupies the path where a directory is wanted."""


def file_exists(path: str | os.PathLike) -> bool:
    """Whether anything (file, directory, ...) exists at ``path``."""
    return Path(path).exists()


def directory_exists(path: str | os.PathLike) -> bool:
    return Path(path).is_dir()


def assure_directory(path: str | os.PathLike) -> None:
    """Create the directory at ``path`` (with parents) unless it already exists.

    Raises FileAlreadyExistsError if a file is already at ``path``.
    """
    target = Path(path)
    if target.is_dir():
        return
    if target.exists():
        raise FileAlreadyExistsError(
            f"Cannot create directory '{target}': a file with that name already exists."
        )
    target.mkdir(parents=True, exist_ok=True)
    logger.debug("Created directory %s", target)
