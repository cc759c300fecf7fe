"""``include``/``extend``/``prepend`` call entity."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from rbs_inline.annotations import lookup
from rbs_inline.annotations.models import Application, ParsingResult
from rbs_inline.core.members import Extend, Include, MixinMember, Prepend
from rbs_inline.core.types import RbsType, TypeName
from rbs_inline.declarations.base import Declaration
from rbs_inline.syntax.nodes import CallNode, ConstantReadNode

logger = logging.getLogger(__name__)


class MixinKind(str, Enum):
    INCLUDE = "include"
    EXTEND = "extend"
    PREPEND = "prepend"


MIXIN_MEMBERS: dict[MixinKind, type[MixinMember]] = {
    MixinKind.INCLUDE: Include,
    MixinKind.EXTEND: Extend,
    MixinKind.PREPEND: Prepend,
}


@dataclass(frozen=True)
class MixinDecl(Declaration):
    """A mixin call, optionally followed by a type application::

        include Enumerable #[String]
    """

    node: CallNode
    comments: ParsingResult | None = None
    application: Application | None = None

    @property
    def kind(self) -> MixinKind | None:
        try:
            return MixinKind(self.node.name)
        except ValueError:
            return None

    def type_args(self) -> list[RbsType]:
        if self.application is None or self.application.types is None:
            return []
        return list(self.application.types)

    def rbs(self) -> MixinMember | None:
        """The mixin member, or None when the call has an unsupported shape.

        Only a single bare constant argument is supported; ``include A, B``
        and ``include Foo::Bar`` produce nothing.
        """
        kind = self.kind
        if kind is None:
            return None

        arguments = self.node.argument_list
        if len(arguments) != 1 or not isinstance(arguments[0], ConstantReadNode):
            logger.debug(f"Line {self.node.line}: unsupported `{kind.value}` arguments")
            return None

        return MIXIN_MEMBERS[kind](
            name=TypeName(name=arguments[0].name),
            args=tuple(self.type_args()),
            comment=lookup.comment_text(self.comments),
        )
