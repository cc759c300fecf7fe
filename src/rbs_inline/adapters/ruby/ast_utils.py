"""Ruby AST utility functions.

This module provides utility functions for extracting information
from tree-sitter AST nodes for Ruby source code.
"""

from __future__ import annotations

from tree_sitter import Node


class RubyAstUtils:
    """Ruby AST utility functions for tree-sitter nodes."""

    @staticmethod
    def get_node_text(node: Node, content: bytes) -> str:
        """Get the text content of a node.

        Args:
            node: The AST node
            content: Source file content

        Returns:
            The text content of the node
        """
        return content[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    @staticmethod
    def get_line(node: Node) -> int:
        """Get the 1-based line a node starts on."""
        return node.start_point[0] + 1

    @staticmethod
    def get_field_text(node: Node, field: str, content: bytes) -> str | None:
        """Get the text of a named field, or None when the field is absent."""
        child = node.child_by_field_name(field)
        if child is None:
            return None
        return RubyAstUtils.get_node_text(child, content)

    @staticmethod
    def is_interpolated(node: Node) -> bool:
        return any(child.type == "interpolation" for child in node.named_children)

    @staticmethod
    def symbol_value(node: Node, content: bytes) -> str | None:
        """Get the value of a symbol literal.

        Handles ``:foo`` and ``:"foo bar"``. Returns None for interpolated
        symbols and for anything that is not a symbol.
        """
        if node.type == "simple_symbol":
            return RubyAstUtils.get_node_text(node, content)[1:]
        if node.type == "delimited_symbol":
            if RubyAstUtils.is_interpolated(node):
                return None
            return "".join(
                RubyAstUtils.get_node_text(child, content)
                for child in node.named_children
                if child.type == "string_content"
            )
        return None
