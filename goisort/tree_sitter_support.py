"""
Tree-sitter infrastructure for the Go import formatter.
Provides grammar loading, query management, and utilities for AST parsing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from tree_sitter import Tree, Node, Parser, Query, Language, QueryCursor


class TreeSitterDocument(ABC):
    """
    Wrapper for Tree-sitter parsed document with query system.
    """

    def __init__(self, text: str):
        self.text = text
        self.tree: Optional[Tree] = None
        self._text_bytes = text.encode('utf-8')
        self._query_cache: Dict[str, Query] = {}
        self._parse()

    @abstractmethod
    def get_language(self) -> Language:
        """
        Get Language instance for queries.

        Returns:
            Language instance
        """
        pass

    @abstractmethod
    def get_query_definitions(self) -> Dict[str, str]:
        """
        Get named query definitions for this language.

        Returns:
            Dict mapping query names to query strings
        """
        pass

    def get_parser(self) -> Parser:
        return Parser(self.get_language())

    def _parse(self):
        """Parse the document with Tree-sitter."""
        parser = self.get_parser()
        self.tree = parser.parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    def query(self, query_name: str) -> List[Tuple[Node, str]]:
        """
        Execute a named query on the document.

        Args:
            query_name: Name of the query to execute

        Returns:
            List of (node, capture_name) tuples in source order

        Raises:
            ValueError: If query is not defined for this language
        """
        root_node = self.root_node

        query_definitions = self.get_query_definitions()
        if query_name not in query_definitions:
            raise ValueError(f"Unknown query: {query_name}")

        if query_name not in self._query_cache:
            query_string = query_definitions[query_name]
            self._query_cache[query_name] = Query(self.get_language(), query_string)

        cursor = QueryCursor(self._query_cache[query_name])

        results = []
        for _pattern_index, captures in cursor.matches(root_node):
            for capture_name, nodes in captures.items():
                for node in nodes:
                    results.append((node, capture_name))

        results.sort(key=lambda item: item[0].start_byte)
        return results

    def query_nodes(self, query_name: str) -> List[Node]:
        """Execute a named query and return only the captured nodes."""
        return [node for node, _ in self.query(query_name)]

    def find_nodes_by_type(self, node_type: str, start_node: Optional[Node] = None) -> List[Node]:
        """
        Find all nodes of a specific type.

        Args:
            node_type: Type of nodes to find
            start_node: Node to start search from (default: root)

        Returns:
            List of matching nodes
        """
        if start_node is None:
            start_node = self.root_node

        results = []

        def visit(node: Node):
            if node.type == node_type:
                results.append(node)
            for child in node.children:
                visit(child)

        visit(start_node)
        return results

    def get_node_text(self, node: Node) -> str:
        """Get text content for a node."""
        return self._text_bytes[node.start_byte:node.end_byte].decode('utf-8')

    @staticmethod
    def get_line_range(node: Node) -> Tuple[int, int]:
        """Get line range (1-based, inclusive) for a node."""
        return node.start_point[0] + 1, node.end_point[0] + 1

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        if not self.tree:
            return True
        return self.root_node.has_error

    def get_errors(self) -> List[Node]:
        """Get all error and missing nodes in the tree, in source order."""
        errors: List[Node] = []

        def visit(node: Node):
            if node.is_error or node.is_missing:
                errors.append(node)
                return
            if node.has_error:
                for child in node.children:
                    visit(child)

        visit(self.root_node)
        return errors


class GoDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_go as tsgo
        return Language(tsgo.language())

    def get_query_definitions(self) -> Dict[str, str]:
        from .queries import QUERIES
        return QUERIES

    def first_syntax_error(self, limit_byte: Optional[int] = None) -> Optional[Node]:
        """
        First error node starting before `limit_byte` (anywhere if None).
        """
        if not self.has_error():
            return None
        for node in self.get_errors():
            if limit_byte is None or node.start_byte < limit_byte:
                return node
        return None


__all__ = ["TreeSitterDocument", "GoDocument", "Node"]
