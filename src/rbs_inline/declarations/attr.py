"""``attr_reader``/``attr_writer``/``attr_accessor`` call entity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rbs_inline.annotations import lookup
from rbs_inline.annotations.models import Assertion, ParsingResult
from rbs_inline.core.members import AttrAccessor, AttrMember, AttrReader, AttrWriter, MethodKind
from rbs_inline.core.result import Result
from rbs_inline.core.types import RbsType
from rbs_inline.declarations.base import Declaration
from rbs_inline.syntax.nodes import CallNode, SymbolNode


class AttrKind(str, Enum):
    READER = "attr_reader"
    WRITER = "attr_writer"
    ACCESSOR = "attr_accessor"


ATTR_MEMBERS: dict[AttrKind, type[AttrMember]] = {
    AttrKind.READER: AttrReader,
    AttrKind.WRITER: AttrWriter,
    AttrKind.ACCESSOR: AttrAccessor,
}


@dataclass(frozen=True)
class AttrDecl(Declaration):
    """An attribute declaration typed by a trailing assertion::

        attr_reader :name, :email #: String
    """

    node: CallNode
    comments: ParsingResult | None = None
    assertion: Assertion | None = None

    def attribute_names(self) -> Result[list[str]]:
        names: list[str] = []
        for arg in self.node.argument_list:
            if not isinstance(arg, SymbolNode):
                continue
            if arg.value is None:
                return Result.failure(f"Line {self.node.line}: attribute name has no literal value")
            names.append(arg.value)
        return Result.success(names)

    def attribute_type(self) -> Result[RbsType]:
        """Type shared by all names; ``untyped`` when not annotated."""
        return lookup.attribute_type(self.assertion)

    def rbs(self) -> Result[list[AttrMember]]:
        """One member per symbol argument.

        An empty list means the call declares no literal names.
        """
        try:
            member_class = ATTR_MEMBERS[AttrKind(self.node.name)]
        except ValueError:
            return Result.failure(f"`{self.node.name}` is not an attribute declaration")

        names = self.attribute_names()
        if names.error is not None:
            return Result(error=names.error)
        if not names.unwrap():
            return Result.success([])

        attr_type = self.attribute_type()
        if attr_type.error is not None:
            return Result(error=attr_type.error)

        comment = lookup.comment_text(self.comments)
        return Result.success(
            [
                member_class(
                    name=name,
                    type=attr_type.unwrap(),
                    kind=MethodKind.INSTANCE,
                    comment=comment,
                )
                for name in names.unwrap()
            ]
        )
