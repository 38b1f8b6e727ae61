"""
Import classification into standard library, third-party and local groups.
"""

from __future__ import annotations

from typing import AbstractSet

from .model import Category


def classify(path: str, local_package: str, stdlib: AbstractSet[str]) -> Category:
    """
    Classify an unquoted import path into one of the three groups.

    Order of checks matters: the standard library and the local prefix win
    over the dot heuristic.
    """
    if not path:
        return Category.BLANK_LINE
    if path in stdlib:
        return Category.STANDARD_LIBRARY
    if local_package and path.startswith(local_package):
        return Category.LOCAL_PACKAGE
    if "." in path:
        # A dot in the path nearly always means a hosted module (github.com/...).
        return Category.THIRD_PARTY
    # Neither standard library nor obviously third-party, assume local.
    return Category.LOCAL_PACKAGE


__all__ = ["classify"]
