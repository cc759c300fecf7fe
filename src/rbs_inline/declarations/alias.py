"""Method alias entity."""

from __future__ import annotations

from dataclasses import dataclass

from rbs_inline.annotations import lookup
from rbs_inline.annotations.models import ParsingResult
from rbs_inline.core.members import Alias
from rbs_inline.core.result import Result
from rbs_inline.declarations.base import Declaration
from rbs_inline.syntax.nodes import AliasMethodNode, Receiver, SymbolNode


def _symbol_name(node: Receiver, role: str) -> Result[str]:
    if not isinstance(node, SymbolNode):
        return Result.failure(
            f"Alias {role} name must be a literal symbol",
            details=f"got {node.node_type} node",
        )
    if node.value is None:
        return Result.failure(f"Alias {role} name has no literal value")
    return Result.success(node.value)


@dataclass(frozen=True)
class AliasDecl(Declaration):
    """``alias new_name old_name`` with literal symbol names.

    Aliases with computed names (``alias :"#{x}" y``) are structural errors.
    """

    node: AliasMethodNode
    comments: ParsingResult | None = None

    def old_name(self) -> Result[str]:
        return _symbol_name(self.node.old_name, "old")

    def new_name(self) -> Result[str]:
        return _symbol_name(self.node.new_name, "new")

    def rbs(self) -> Result[Alias]:
        old_name = self.old_name()
        if old_name.error is not None:
            return Result(error=old_name.error)
        new_name = self.new_name()
        if new_name.error is not None:
            return Result(error=new_name.error)
        return Result.success(
            Alias(
                new_name=new_name.unwrap(),
                old_name=old_name.unwrap(),
                comment=lookup.comment_text(self.comments),
            )
        )
