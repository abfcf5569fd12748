"""Enumerations for keyglot type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading one locale catalog file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Catalog file read and decoded into a message tree."""

    NOT_FOUND = "not_found"
    """No catalog file exists for the locale."""

    ERROR = "error"
    """Catalog file exists but could not be read or decoded."""


class MissKind(StrEnum):
    """Why a key failed to reach a string leaf.

    StrEnum provides automatic string conversion: str(MissKind.NOT_FOUND) == "not_found"
    """

    NOT_FOUND = "not_found"
    """Path does not exist in the bundle (or walks through a leaf)."""

    NOT_LEAF = "not_leaf"
    """Path ends on a sub-tree; the key is a prefix of deeper keys."""


__all__ = [
    "LoadStatus",
    "MissKind",
]
