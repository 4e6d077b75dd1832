"""
File utility functions.
"""

from collections.abc import Iterator
from pathlib import Path


def has_extension(path: str | Path, extension: str) -> bool:
    """Check whether a path ends with the given extension (case-sensitive)."""
    return Path(path).suffix == extension


def change_extension(path: str | Path, extension: str) -> Path:
    """Return the side-by-side path with the extension replaced."""
    return Path(path).with_suffix(extension)


def iter_input_files(root: str | Path, extension: str) -> Iterator[Path]:
    """
    Find all files with the given extension below a directory.

    Args:
        root: Directory to search recursively
        extension: File extension including the leading dot (e.g. ".rdfe")

    Yields:
        Matching file paths in sorted order
    """
    for path in sorted(Path(root).rglob(f"*{extension}")):
        if path.is_file() and has_extension(path, extension):
            yield path
