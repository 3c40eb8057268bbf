"""Filename extension helpers for ffpress."""

from __future__ import annotations

from pathlib import PurePath


def get_extension(filename: str) -> str | None:
    """Return the extension of the final path component, without the dot.

    The extension is whatever follows the last dot of the file name, so
    ``"clip."`` has an empty extension while ``".bashrc"`` (a hidden file
    whose only dot is the leading one) has none at all.

    Args:
        filename: The filename or path to inspect.

    Returns:
        The extension (possibly empty), or None if there is no extension.
    """
    name = PurePath(filename).name
    if name in ("", ".", ".."):
        return None

    dot = name.rfind(".")
    if dot <= 0:
        return None
    return name[dot + 1 :]


def has_extension(filename: str) -> bool:
    """Check if a filename has an extension component.

    Args:
        filename: The filename to check.

    Returns:
        True if the filename has an extension, False otherwise.
    """
    return get_extension(filename) is not None
