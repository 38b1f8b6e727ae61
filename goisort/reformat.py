"""
Import sorter & grouper for Go.

This currently formats to a single style, with three groups
(stdlib, third-party and local) separated by blank lines.
"""

from __future__ import annotations

from pathlib import Path
from typing import AbstractSet, List, Optional, Sequence, Tuple

from .classifier import classify
from .errors import ParseError, PathLike
from .extractor import extract_imports
from .model import BLANK, Category, ChangeSet, Import, ImportRecord, same_record
from .stdlib import GO_STDLIB
from .tree_sitter_support import GoDocument


def reformat(
    filename: PathLike,
    local_package: str = "",
    stdlib: Optional[AbstractSet[str]] = None,
) -> ChangeSet:
    """Reformat an existing file and return the details of changes to be made."""
    try:
        text = Path(filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(filename, e) from e
    return reformat_text(text, local_package, stdlib, source=filename)


def reformat_text(
    text: str,
    local_package: str = "",
    stdlib: Optional[AbstractSet[str]] = None,
    source: PathLike = "<input>",
) -> ChangeSet:
    """Same as reformat() for source code already in memory."""
    std = GO_STDLIB if stdlib is None else stdlib
    extracted = extract_imports(GoDocument(text), source)
    original = extracted.imports

    canonical = group_imports(original, local_package, std)

    return ChangeSet(
        start_line=extracted.start_line,
        end_line=extracted.end_line,
        block_start_line=extracted.block_start_line,
        block_start_column=extracted.block_start_column,
        block_end_line=extracted.block_end_line,
        block_end_column=extracted.block_end_column,
        imports=canonical,
        dangling=extracted.dangling,
        needed=is_change_needed(original, canonical),
    )


def group_imports(
    records: Sequence[ImportRecord], local_package: str, stdlib: AbstractSet[str]
) -> Tuple[ImportRecord, ...]:
    """
    Sort imports by (group, path, name) and put one blank line between groups.

    Separators present in the input are dropped and recomputed from scratch.
    cgo imports (`import "C"`) come first, on their own, so that their preamble
    comment stays attached.
    """
    imports = [rec for rec in records if isinstance(rec, Import)]
    cgo = [imp for imp in imports if imp.is_cgo]
    ranked: List[Tuple[Category, Import]] = [
        (classify(imp.unquoted_path, local_package, stdlib), imp)
        for imp in imports
        if not imp.is_cgo
    ]
    ranked.sort(key=lambda item: (item[0], item[1].unquoted_path, item[1].name))

    out: List[ImportRecord] = list(cgo)
    if cgo and ranked:
        out.append(BLANK)
    last_category: Optional[Category] = None
    for category, imp in ranked:
        if last_category is not None and category != last_category:
            out.append(BLANK)
        out.append(imp)
        last_category = category
    return tuple(out)


def is_change_needed(original: Sequence[ImportRecord], canonical: Sequence[ImportRecord]) -> bool:
    if len(original) != len(canonical):
        return True
    return not all(same_record(a, b) for a, b in zip(original, canonical))


def format_source(
    text: str,
    local_package: str = "",
    stdlib: Optional[AbstractSet[str]] = None,
) -> str:
    """Return `text` with its import block in canonical form."""
    from .rewrite import apply_changes

    changes = reformat_text(text, local_package, stdlib)
    if not changes.needed:
        return text
    return apply_changes(text, changes)


__all__ = ["reformat", "reformat_text", "group_imports", "is_change_needed", "format_source"]
