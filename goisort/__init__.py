"""
goisort - a small and opinionated Go import sorter.

Imports are formatted to a single style: three groups (standard library,
third-party, local package) separated by blank lines, sorted within a group.

Example
-------
>>> from goisort import reformat, rewrite
>>> changes = reformat("main.go", local_package="github.com/me/proj")
>>> if changes.needed:
...     rewrite("main.go", "main.go", changes)
"""

from __future__ import annotations

from .classifier import classify
from .errors import ConfigError, GoisortUserError, LengthMismatchError, ParseError, RewriteError
from .model import BLANK, BlankLine, Category, ChangeSet, Import
from .reformat import format_source, reformat, reformat_text
from .rewrite import render_imports, rewrite
from .stdlib import GO_STDLIB, load_stdlib

__all__ = [
    "reformat",
    "reformat_text",
    "format_source",
    "rewrite",
    "render_imports",
    "classify",
    "Category",
    "ChangeSet",
    "Import",
    "BlankLine",
    "BLANK",
    "GO_STDLIB",
    "load_stdlib",
    "GoisortUserError",
    "ParseError",
    "LengthMismatchError",
    "RewriteError",
    "ConfigError",
]
