"""
Data model of the import formatter: import records, separators and change sets.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple, Union


class Category(IntEnum):
    """Import group. Value order is the output order of the groups."""
    STANDARD_LIBRARY = 0
    THIRD_PARTY = 1
    LOCAL_PACKAGE = 2
    BLANK_LINE = 3


@dataclass(frozen=True)
class Import:
    """A single import spec."""
    path: str                        # Import path as written, quotes included
    name: str = ""                   # Local name, empty if not set
    doc: Tuple[str, ...] = ()        # Comment lines immediately preceding the spec
    comment: str = ""                # Comment on the same line as the spec

    def __post_init__(self):
        if not self.path:
            raise ValueError("Import path must not be empty")

    @property
    def unquoted_path(self) -> str:
        return unquote(self.path)

    @property
    def is_cgo(self) -> bool:
        return self.unquoted_path == "C"


@dataclass(frozen=True)
class BlankLine:
    """Blank-line separator between two import groups."""


ImportRecord = Union[Import, BlankLine]

BLANK = BlankLine()


@dataclass(frozen=True)
class ChangeSet:
    """
    Set of changes requested to a file.

    Attributes
    ----------
    start_line : int
        Line the first import spec begins on, 1-indexed (0 if the file has no imports).
    end_line : int
        Line the last import spec ends on.
    block_start_line, block_start_column : int
        Position of the first `import` keyword (column in bytes).
    block_end_line, block_end_column : int
        End of the last import declaration (the closing parenthesis of a block),
        including comments that follow it on the same line.
    imports : tuple
        Canonical sequence of imports and separators.
    dangling : tuple
        Comments found after the last spec inside a parenthesized block.
    needed : bool
        True if the file's import block differs from the canonical one.
    """
    start_line: int = 0
    end_line: int = 0
    block_start_line: int = 0
    block_start_column: int = 0
    block_end_line: int = 0
    block_end_column: int = 0
    imports: Tuple[ImportRecord, ...] = ()
    dangling: Tuple[str, ...] = ()
    needed: bool = False

    @property
    def real_imports(self) -> Tuple[Import, ...]:
        return tuple(imp for imp in self.imports if isinstance(imp, Import))


@dataclass(frozen=True)
class ExtractedImports:
    """Raw import records of a file, in source order, with their line span."""
    imports: Tuple[ImportRecord, ...] = ()
    start_line: int = 0
    end_line: int = 0
    block_start_line: int = 0
    block_start_column: int = 0
    block_end_line: int = 0
    block_end_column: int = 0
    dangling: Tuple[str, ...] = ()


def unquote(path: str) -> str:
    """Strip the quotes of an interpreted or raw Go string literal."""
    if len(path) >= 2 and path[0] == path[-1] and path[0] in ('"', '`'):
        return path[1:-1]
    return path.strip('"')


def same_record(a: ImportRecord, b: ImportRecord) -> bool:
    """Positional equality used to decide whether a rewrite is needed."""
    if isinstance(a, BlankLine) or isinstance(b, BlankLine):
        return isinstance(a, BlankLine) and isinstance(b, BlankLine)
    return a.path == b.path and a.name == b.name


__all__ = [
    "Category",
    "Import",
    "BlankLine",
    "BLANK",
    "ImportRecord",
    "ChangeSet",
    "ExtractedImports",
    "unquote",
    "same_record",
]
