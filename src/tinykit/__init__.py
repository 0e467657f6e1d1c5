"""tinykit: small geometry, view-tree and file-system conveniences."""

from ._version import __version__
from .geometry import Point, Rect, Size
from .foundation import (
    Bundle,
    DateFormatter,
    FileAlreadyExistsError,
    assure_directory,
    directory_exists,
    file_exists,
)

__all__ = [
    "__version__",
    "Point",
    "Size",
    "Rect",
    "Bundle",
    "DateFormatter",
    "FileAlreadyExistsError",
    "assure_directory",
    "directory_exists",
    "file_exists",
]
