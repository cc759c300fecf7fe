"""Conversion of tree-sitter-ruby nodes into syntax nodes.

``RubySyntaxBuilder`` maps the handful of Ruby constructs the declaration
entities inspect (method definitions, parameter lists, aliases and calls)
onto the closed node model in ``rbs_inline.syntax``. Expressions it does not
recognize become ``ExpressionNode`` with their source text.
"""

from __future__ import annotations

import logging

from tree_sitter import Node

from rbs_inline.adapters.ruby.ast_utils import RubyAstUtils
from rbs_inline.syntax.nodes import (
    AliasMethodNode,
    BlockParameter,
    CallNode,
    ConstantReadNode,
    DefNode,
    DestructuredParameter,
    ExpressionNode,
    ForwardingParameter,
    KeywordRestParameter,
    NoKeywordsParameter,
    OptionalKeywordParameter,
    OptionalParameter,
    ParametersNode,
    RequiredKeywordParameter,
    RequiredParameter,
    RestParameter,
    SelfNode,
    SymbolNode,
)

logger = logging.getLogger(__name__)

DEF_NODE_TYPES = ("method", "singleton_method")

# Bare method names that `alias` accepts in place of a symbol.
_METHOD_NAME_TYPES = ("identifier", "constant", "setter", "operator")


class RubySyntaxBuilder:
    """Builds syntax nodes from tree-sitter-ruby nodes."""

    def build_def(self, node: Node, content: bytes) -> DefNode:
        """Build a definition node from a ``method`` or ``singleton_method``."""
        receiver = None
        if node.type == "singleton_method":
            object_node = node.child_by_field_name("object")
            if object_node is not None:
                receiver = self.build_expression(object_node, content)

        params_node = node.child_by_field_name("parameters")
        return DefNode(
            name=RubyAstUtils.get_field_text(node, "name", content) or "",
            receiver=receiver,
            parameters=self.build_parameters(params_node, content) if params_node else None,
            line=RubyAstUtils.get_line(node),
        )

    def build_parameters(self, node: Node, content: bytes) -> ParametersNode:
        """Group the parameters of a ``method_parameters`` node by kind."""
        requireds: list[RequiredParameter | DestructuredParameter] = []
        optionals: list[OptionalParameter] = []
        posts: list[RequiredParameter | DestructuredParameter] = []
        keywords: list[RequiredKeywordParameter | OptionalKeywordParameter] = []
        rest = None
        keyword_rest = None
        block = None

        for child in node.named_children:
            node_type = child.type
            if node_type in ("identifier", "destructured_parameter"):
                param = (
                    RequiredParameter(name=RubyAstUtils.get_node_text(child, content))
                    if node_type == "identifier"
                    else DestructuredParameter(source=RubyAstUtils.get_node_text(child, content))
                )
                if rest is None and not optionals:
                    requireds.append(param)
                else:
                    posts.append(param)
            elif node_type == "optional_parameter":
                optionals.append(
                    OptionalParameter(
                        name=RubyAstUtils.get_field_text(child, "name", content) or "",
                        default=RubyAstUtils.get_field_text(child, "value", content) or "",
                    )
                )
            elif node_type == "splat_parameter":
                rest = RestParameter(name=RubyAstUtils.get_field_text(child, "name", content))
            elif node_type == "keyword_parameter":
                name = RubyAstUtils.get_field_text(child, "name", content) or ""
                value = RubyAstUtils.get_field_text(child, "value", content)
                if value is None:
                    keywords.append(RequiredKeywordParameter(name=name))
                else:
                    keywords.append(OptionalKeywordParameter(name=name, default=value))
            elif node_type == "hash_splat_parameter":
                keyword_rest = KeywordRestParameter(
                    name=RubyAstUtils.get_field_text(child, "name", content)
                )
            elif node_type == "hash_splat_nil":
                keyword_rest = NoKeywordsParameter()
            elif node_type == "forward_parameter":
                rest = ForwardingParameter()
                keyword_rest = ForwardingParameter()
            elif node_type == "block_parameter":
                block = BlockParameter(name=RubyAstUtils.get_field_text(child, "name", content))
            elif node_type != "comment":
                logger.debug(f"Unknown parameter node: {node_type}")

        return ParametersNode(
            requireds=tuple(requireds),
            optionals=tuple(optionals),
            rest=rest,
            posts=tuple(posts),
            keywords=tuple(keywords),
            keyword_rest=keyword_rest,
            block=block,
        )

    def build_alias(self, node: Node, content: bytes) -> AliasMethodNode:
        """Build an alias node; tree-sitter stores the new name in ``name``."""
        new_node = node.child_by_field_name("name")
        old_node = node.child_by_field_name("alias")
        return AliasMethodNode(
            new_name=self._alias_name(new_node, content),
            old_name=self._alias_name(old_node, content),
            line=RubyAstUtils.get_line(node),
        )

    def build_call(self, node: Node, content: bytes) -> CallNode:
        """Build a call node from a ``call`` or a bare ``identifier``."""
        if node.type == "identifier":
            return CallNode(
                name=RubyAstUtils.get_node_text(node, content),
                line=RubyAstUtils.get_line(node),
            )

        receiver_node = node.child_by_field_name("receiver")
        arguments_node = node.child_by_field_name("arguments")
        arguments = None
        if arguments_node is not None:
            arguments = tuple(
                self.build_argument(arg, content)
                for arg in arguments_node.named_children
                if arg.type != "comment"
            )
        return CallNode(
            name=RubyAstUtils.get_field_text(node, "method", content) or "",
            receiver=self.build_expression(receiver_node, content) if receiver_node else None,
            arguments=arguments,
            line=RubyAstUtils.get_line(node),
        )

    def build_argument(
        self, node: Node, content: bytes
    ) -> SelfNode | ConstantReadNode | SymbolNode | ExpressionNode | DefNode:
        if node.type in DEF_NODE_TYPES:
            return self.build_def(node, content)
        return self.build_expression(node, content)

    def build_expression(
        self, node: Node, content: bytes
    ) -> SelfNode | ConstantReadNode | SymbolNode | ExpressionNode:
        node_type = node.type
        if node_type == "self":
            return SelfNode()
        if node_type == "constant":
            return ConstantReadNode(name=RubyAstUtils.get_node_text(node, content))
        if node_type in ("simple_symbol", "delimited_symbol") and not RubyAstUtils.is_interpolated(
            node
        ):
            return SymbolNode(value=RubyAstUtils.symbol_value(node, content))
        return ExpressionNode(source=RubyAstUtils.get_node_text(node, content))

    def _alias_name(
        self, node: Node | None, content: bytes
    ) -> SelfNode | ConstantReadNode | SymbolNode | ExpressionNode:
        if node is None:
            return ExpressionNode()
        if node.type in _METHOD_NAME_TYPES:
            return SymbolNode(value=RubyAstUtils.get_node_text(node, content))
        return self.build_expression(node, content)
