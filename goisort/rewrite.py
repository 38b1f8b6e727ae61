"""
Regeneration of the import block and in-place rewriting of Go files.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List, Tuple

from .errors import LengthMismatchError, PathLike, RewriteError
from .model import BlankLine, ChangeSet, Import

INDENT = "\t"


def rewrite(infile: PathLike, outfile: PathLike, changes: ChangeSet) -> bool:
    """
    Rewrite the contents of a file based on a set of changes.

    Returns True if `outfile` was written. Nothing is touched when no change is needed.
    """
    if not changes.needed:
        return False
    try:
        text = Path(infile).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RewriteError(infile, e) from e

    new_text = apply_changes(text, changes)
    _write_text_atomic(Path(outfile), new_text)
    return True


def apply_changes(text: str, changes: ChangeSet) -> str:
    """Substitute the canonical import block into `text`."""
    lines = text.split("\n")
    block_end = changes.block_end_line or changes.end_line
    expected = max(changes.end_line, block_end)
    if len(lines) < expected:
        raise LengthMismatchError(expected, len(lines))

    block_start = changes.block_start_line or changes.start_line
    eol = "\r" if lines[0].endswith("\r") else ""

    out: List[str] = []
    for line in lines[:block_start - 1]:
        # The declaration keyword marks the real start of the block being replaced
        if line.startswith("import"):
            break
        out.append(line)
    if changes.block_start_line:
        # Code sharing a line with the declaration (`package main; import "fmt"`)
        head, _ = _split_line(lines[block_start - 1], changes.block_start_column)
        if head.strip():
            out.append(head.rstrip(" \t;") + eol)
    out.extend(line + eol for line in render_imports(changes))
    if changes.block_end_column:
        _, tail = _split_line(lines[block_end - 1], changes.block_end_column)
        tail = tail.lstrip(" \t;")
        if tail.strip():
            out.append(tail)
    out.extend(lines[block_end:])
    return "\n".join(out)


def render_imports(changes: ChangeSet) -> List[str]:
    """Render the import declarations as a list of lines (without newlines)."""
    records = list(changes.imports)
    lines: List[str] = []
    # cgo needs `import "C"` as a declaration of its own, right below its preamble
    while records and isinstance(records[0], Import) and records[0].is_cgo:
        imp = records.pop(0)
        lines.extend(imp.doc)
        lines.append("import " + _spec_text(imp))
    if lines:
        while records and isinstance(records[0], BlankLine):
            records.pop(0)
        if not records and not changes.dangling:
            return lines
        lines.append("")

    real = [rec for rec in records if isinstance(rec, Import)]
    if len(real) == 1 and not changes.dangling:
        # Special case to write on a single line.
        imp = real[0]
        return lines + [*imp.doc, "import " + _spec_text(imp)]

    lines.append("import (")
    for rec in records:
        if isinstance(rec, BlankLine):
            lines.append("")
            continue
        lines.extend(INDENT + doc for doc in rec.doc)
        lines.append(INDENT + _spec_text(rec))
    lines.extend(INDENT + comment for comment in changes.dangling)
    lines.append(")")
    return lines


def _split_line(line: str, column: int) -> Tuple[str, str]:
    """Split a line at a Tree-sitter column (a byte offset)."""
    raw = line.encode("utf-8")
    return raw[:column].decode("utf-8"), raw[column:].decode("utf-8")


def _spec_text(imp: Import) -> str:
    text = f"{imp.name} {imp.path}" if imp.name else imp.path
    if imp.comment:
        text += " " + imp.comment
    return text


def _write_text_atomic(path: Path, content: str) -> None:
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
        if path.exists():
            shutil.copymode(path, tmp)
        tmp.replace(path)
    except OSError as e:
        if tmp.exists():
            tmp.unlink()
        raise RewriteError(path, e) from e


__all__ = ["rewrite", "apply_changes", "render_imports"]
