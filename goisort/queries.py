"""
Tree-sitter query definitions for Go source files.
Only the constructs the import formatter looks at are covered.
"""

from __future__ import annotations

QUERIES = {
    # Package clause (must precede imports)
    "package": """
    (source_file
      (package_clause) @package)
    """,

    # Top-level import declarations, single-line or parenthesized
    "imports": """
    (source_file
      (import_declaration) @import)
    """,

    # Comments anywhere in the file
    "comments": """
    (comment) @comment
    """,
}
