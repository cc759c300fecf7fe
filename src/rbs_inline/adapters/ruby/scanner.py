"""Ruby declaration scanner.

This module walks a tree-sitter-ruby tree in source order and builds one
declaration entity per supported declaration, attaching the annotation
parsing result registered for the declaration's line and tracking the
default visibility set by bare ``private``/``public`` calls. Methods in a
``class << self`` body are collected as singleton methods.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import tree_sitter_ruby as tsruby
from tree_sitter import Language, Node, Parser

from rbs_inline.adapters.ruby.ast_utils import RubyAstUtils
from rbs_inline.adapters.ruby.builder import DEF_NODE_TYPES, RubySyntaxBuilder
from rbs_inline.annotations.lookup import first_application, first_assertion
from rbs_inline.annotations.models import ParsingResult
from rbs_inline.core.config import get_config
from rbs_inline.core.members import Visibility
from rbs_inline.declarations import (
    AliasDecl,
    AttrDecl,
    AttrKind,
    Declaration,
    MethodDecl,
    MixinDecl,
    MixinKind,
    PrivateMarker,
    PublicMarker,
)
from rbs_inline.syntax.nodes import DefNode, SelfNode

logger = logging.getLogger(__name__)

_VISIBILITY_CALLS = {
    "private": Visibility.PRIVATE,
    "public": Visibility.PUBLIC,
}
_MIXIN_CALLS = {kind.value for kind in MixinKind}
_ATTR_CALLS = {kind.value for kind in AttrKind}


@dataclass(frozen=True)
class ScannedDeclaration:
    """A declaration together with where and under which visibility it appeared."""

    declaration: Declaration
    owner: str | None
    default_visibility: Visibility

    @property
    def visibility(self) -> Visibility:
        """Effective visibility: the explicit tag wins over the running default."""
        if isinstance(self.declaration, MethodDecl) and self.declaration.visibility is not None:
            return self.declaration.visibility
        return self.default_visibility


class RubyDeclarationScanner:
    """Collects declaration entities from Ruby source.

    Annotations are supplied by the caller as a mapping from the 1-based line
    a declaration starts on to its parsing result.
    """

    def __init__(self, parser: Parser | None = None) -> None:
        self._parser = parser or Parser(Language(tsruby.language()))
        self._builder = RubySyntaxBuilder()

    def scan_file(
        self,
        file_path: Path,
        annotations: Mapping[int, ParsingResult] | None = None,
    ) -> list[ScannedDeclaration]:
        """Scan a Ruby file.

        Raises:
            OSError: If the file cannot be read.
        """
        text = file_path.read_text(encoding=get_config().source_encoding)
        return self.scan(text, annotations)

    def scan(
        self,
        source: str | bytes,
        annotations: Mapping[int, ParsingResult] | None = None,
    ) -> list[ScannedDeclaration]:
        """Scan Ruby source text.

        Args:
            source: Ruby source code
            annotations: Parsing results keyed by declaration line

        Returns:
            Declarations in source order
        """
        content = source.encode("utf-8") if isinstance(source, str) else source
        tree = self._parser.parse(content)
        results: list[ScannedDeclaration] = []
        self._scan_body(tree.root_node.named_children, content, None, annotations or {}, results)
        return results

    def _scan_body(
        self,
        statements: list[Node],
        content: bytes,
        owner: str | None,
        annotations: Mapping[int, ParsingResult],
        results: list[ScannedDeclaration],
        singleton: bool = False,
    ) -> None:
        """Scan one body. Inside ``class << self`` only methods are collected."""
        visibility = Visibility.PUBLIC

        for child in statements:
            node_type = child.type
            comments = annotations.get(RubyAstUtils.get_line(child))

            if node_type in ("class", "module"):
                name = RubyAstUtils.get_field_text(child, "name", content) or ""
                qualified = f"{owner}::{name}" if owner else name
                body = child.child_by_field_name("body")
                self._scan_body(
                    body.named_children if body is not None else [],
                    content,
                    qualified,
                    annotations,
                    results,
                )
                continue

            if node_type == "singleton_class":
                self._scan_singleton_class(child, content, owner, annotations, results)
                continue

            declaration: Declaration | None = None
            if node_type in DEF_NODE_TYPES:
                declaration = MethodDecl(self._build_def(child, content, singleton), comments)
            elif node_type in ("identifier", "call"):
                declaration = self._call_declaration(child, content, comments, singleton)
            elif singleton and node_type != "comment":
                line = RubyAstUtils.get_line(child)
                logger.debug(f"Skipping {node_type} in `class << self` at line {line}")
            elif node_type == "alias":
                alias_node = child.child_by_field_name("name")
                if alias_node is not None and alias_node.type == "global_variable":
                    logger.debug(f"Skipping global variable alias at line {RubyAstUtils.get_line(child)}")
                    continue
                declaration = AliasDecl(self._builder.build_alias(child, content), comments)
            elif node_type != "comment":
                logger.debug(f"Skipping {node_type} at line {RubyAstUtils.get_line(child)}")

            if declaration is None:
                continue
            if isinstance(declaration, (PrivateMarker, PublicMarker)):
                visibility = declaration.visibility
            results.append(ScannedDeclaration(declaration, owner, visibility))

    def _call_declaration(
        self,
        node: Node,
        content: bytes,
        comments: ParsingResult | None,
        singleton: bool = False,
    ) -> Declaration | None:
        call = self._builder.build_call(node, content)
        if call.receiver is not None:
            return None

        if call.name in _VISIBILITY_CALLS:
            arguments = call.argument_list
            if not arguments:
                if call.name == "private":
                    return PrivateMarker(call)
                return PublicMarker(call)
            args_node = node.child_by_field_name("arguments")
            def_nodes = [n for n in args_node.named_children if n.type in DEF_NODE_TYPES]
            if len(arguments) == 1 and len(def_nodes) == 1:
                return MethodDecl(
                    self._build_def(def_nodes[0], content, singleton),
                    comments,
                    _VISIBILITY_CALLS[call.name],
                )
            logger.debug(f"Unsupported `{call.name}` call at line {call.line}")
            return None

        if node.type == "identifier":
            return None
        if singleton:
            logger.debug(f"Skipping `{call.name}` in `class << self` at line {call.line}")
            return None
        if call.name in _MIXIN_CALLS:
            return MixinDecl(call, comments, first_application(comments))
        if call.name in _ATTR_CALLS:
            return AttrDecl(call, comments, first_assertion(comments))
        return None

    def _scan_singleton_class(
        self,
        node: Node,
        content: bytes,
        owner: str | None,
        annotations: Mapping[int, ParsingResult],
        results: list[ScannedDeclaration],
    ) -> None:
        value = node.child_by_field_name("value")
        if value is None or value.type != "self":
            logger.debug(f"Skipping `class << obj` at line {RubyAstUtils.get_line(node)}")
            return
        body = node.child_by_field_name("body")
        if body is None:
            return
        self._scan_body(body.named_children, content, owner, annotations, results, singleton=True)

    def _build_def(self, node: Node, content: bytes, singleton: bool) -> DefNode:
        """Build a definition; plain ``def`` in ``class << self`` gets a ``self`` receiver."""
        def_node = self._builder.build_def(node, content)
        if singleton and def_node.receiver is None:
            return def_node.model_copy(update={"receiver": SelfNode()})
        return def_node
