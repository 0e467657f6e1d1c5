"""Bundle metadata, file-system and date formatting helpers."""

from .bundle import Bundle
from .dates import DateFormatter
from .filesystem import (
    FileAlreadyExistsError,
    assure_directory,
    directory_exists,
    file_exists,
)

__all__ = [
    "Bundle",
    "DateFormatter",
    "FileAlreadyExistsError",
    "assure_directory",
    "directory_exists",
    "file_exists",
]
