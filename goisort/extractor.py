"""
Go import extraction using Tree-sitter AST.

Walks the top-level import declarations of a parsed Go file and turns every
import spec into an Import record, attaching the surrounding comments by line.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .errors import ParseError, PathLike
from .model import BLANK, ExtractedImports, Import, ImportRecord
from .tree_sitter_support import GoDocument, Node

# Top-level nodes that may appear before the first non-import declaration (files without imports)
_HEADER_NODE_TYPES = {"package_clause", "import_declaration", "comment", "ERROR"}


def check_header(doc: GoDocument, source: PathLike) -> None:
    """
    Raise ParseError if the package clause or the import declarations are malformed.

    Errors past the import section (function bodies etc.) are not reported,
    same as an imports-only parse.
    """
    decls = doc.query_nodes("imports")
    limit_byte: Optional[int] = None
    if decls:
        limit_byte = decls[-1].end_byte
    else:
        for child in doc.root_node.children:
            if child.type not in _HEADER_NODE_TYPES:
                limit_byte = child.start_byte
                break

    error = doc.first_syntax_error(limit_byte)
    if error is not None:
        line, column = error.start_point[0] + 1, error.start_point[1] + 1
        what = "missing " + error.type if error.is_missing else "syntax error"
        raise ParseError(source, f"{line}:{column}: {what}")

    if not doc.query_nodes("package"):
        raise ParseError(source, "expected 'package' clause")


def extract_imports(doc: GoDocument, source: PathLike = "<input>") -> ExtractedImports:
    """
    Collect import records in source order.

    A BlankLine is inserted wherever the previous spec and the current one
    (including its leading comments) are separated by at least one empty line.
    """
    check_header(doc, source)

    decls = doc.query_nodes("imports")
    if not decls:
        return ExtractedImports()

    region_start, region_end = decls[0].start_byte, decls[-1].end_byte
    last_row = decls[-1].end_point[0]
    spec_nodes: List[Node] = []
    for decl in decls:
        spec_nodes.extend(doc.find_nodes_by_type("import_spec", decl))
    comments = [
        c for c in doc.query_nodes("comments")
        if region_start <= c.start_byte
        and (c.end_byte <= region_end or c.start_point[0] == last_row)
    ]

    entries, dangling = _attach_comments(spec_nodes, comments)

    records: List[ImportRecord] = []
    start_line = end_line = 0
    for i, (spec, doc_nodes, trailing) in enumerate(entries):
        spec_start, spec_end = doc.get_line_range(spec)
        first_line = doc.get_line_range(doc_nodes[0])[0] if doc_nodes else spec_start
        if start_line == 0:
            start_line = spec_start
        if i > 0 and first_line > end_line + 1:
            records.append(BLANK)
        end_line = spec_end
        records.append(_make_import(doc, spec, doc_nodes, trailing, source))

    # Trailing comments on the last declaration line are replaced along with it
    block_end = max(
        [tuple(decls[-1].end_point)] + [tuple(c.end_point) for c in comments if c.start_point[0] == last_row]
    )

    return ExtractedImports(
        imports=tuple(records),
        start_line=start_line,
        end_line=end_line,
        block_start_line=decls[0].start_point[0] + 1,
        block_start_column=decls[0].start_point[1],
        block_end_line=block_end[0] + 1,
        block_end_column=block_end[1],
        dangling=tuple(_comment_text(doc, c) for c in dangling),
    )


def _attach_comments(
    specs: List[Node], comments: List[Node]
) -> Tuple[List[Tuple[Node, List[Node], List[Node]]], List[Node]]:
    """
    Split comments into (spec, leading, trailing) entries plus dangling comments.

    A comment starting on the line a spec ends on trails that spec; every
    other comment leads the next spec.
    """
    entries: List[Tuple[Node, List[Node], List[Node]]] = []
    pending: List[Node] = []
    for node in sorted(specs + comments, key=lambda n: n.start_byte):
        if node.type == "import_spec":
            entries.append((node, pending, []))
            pending = []
        elif entries and not pending and node.start_point[0] == entries[-1][0].end_point[0]:
            entries[-1][2].append(node)
        else:
            pending.append(node)
    return entries, pending


def _make_import(
    doc: GoDocument, spec: Node, doc_nodes: List[Node], trailing: List[Node], source: PathLike
) -> Import:
    path_node = spec.child_by_field_name("path")
    if path_node is None:
        line = spec.start_point[0] + 1
        raise ParseError(source, f"{line}: import spec without path")
    name_node = spec.child_by_field_name("name")
    return Import(
        path=doc.get_node_text(path_node),
        name=doc.get_node_text(name_node) if name_node is not None else "",
        doc=tuple(_comment_text(doc, c) for c in doc_nodes),
        comment=" ".join(_comment_text(doc, c) for c in trailing),
    )


def _comment_text(doc: GoDocument, node: Node) -> str:
    # Line comments of CRLF files end with the carriage return
    return doc.get_node_text(node).rstrip("\r")


__all__ = ["extract_imports", "check_header"]
