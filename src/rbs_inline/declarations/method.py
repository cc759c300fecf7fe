"""Method definition entity."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rbs_inline.annotations import lookup
from rbs_inline.annotations.models import Assertion, ParsingResult
from rbs_inline.core.config import get_config
from rbs_inline.core.members import (
    Annotation,
    MethodDefinition,
    MethodKind,
    Overload,
    Visibility,
)
from rbs_inline.core.types import MethodType, RbsType
from rbs_inline.declarations.base import Declaration
from rbs_inline.declarations.signature import SignatureBuilder
from rbs_inline.syntax.nodes import DefNode, SelfNode

logger = logging.getLogger(__name__)

# Delimiters left around each passthrough item: `%a{` and `}`.
_PASSTHROUGH_PREFIX = 3
_PASSTHROUGH_SUFFIX = 1


@dataclass(frozen=True)
class MethodDecl(Declaration):
    """A ``def`` with its annotations.

    ``visibility`` is the visibility directly attached to the definition::

        def foo() end            # None
        private def foo() end    # Visibility.PRIVATE

    It does not reflect the default visibility set by a preceding bare
    ``private`` call; the driver tracks that.
    """

    node: DefNode
    comments: ParsingResult | None = None
    visibility: Visibility | None = None

    @property
    def method_name(self) -> str:
        return self.node.name

    @property
    def method_kind(self) -> MethodKind:
        """Instance or singleton, from the receiver of the definition.

        Only ``self`` is recognized. ``def obj.foo`` is reported as an
        instance method.
        """
        receiver = self.node.receiver
        if isinstance(receiver, SelfNode):
            return MethodKind.SINGLETON
        if receiver is not None and get_config().warn_unsupported_receiver:
            logger.warning(
                f"Line {self.node.line}: receiver of `def {self.node.name}` is not `self`, "
                "treating it as an instance method"
            )
        return MethodKind.INSTANCE

    def method_type_annotations(self) -> list[Assertion]:
        return lookup.method_type_assertions(self.comments)

    def return_type(self) -> RbsType | None:
        return lookup.return_type(self.comments)

    def var_type_hash(self) -> dict[str, RbsType | None]:
        return lookup.var_type_map(self.comments)

    def method_overloads(self) -> list[Overload]:
        """Overloads of the method.

        Explicit ``#: (...) -> T`` assertions are used verbatim, one overload
        each. Without them, a single overload is derived from the parameter
        list.
        """
        assertions = self.method_type_annotations()
        if assertions:
            return [
                Overload(method_type=assertion.type)
                for assertion in assertions
                if isinstance(assertion.type, MethodType)
            ]

        builder = SignatureBuilder(self.var_type_hash(), self.return_type())
        return [Overload(method_type=builder.build(self.node.parameters))]

    def method_annotations(self) -> list[Annotation]:
        """Passthrough ``%a{...}`` annotations, delimiters stripped."""
        return [
            Annotation(string=content[_PASSTHROUGH_PREFIX:-_PASSTHROUGH_SUFFIX])
            for content in lookup.passthrough_contents(self.comments)
        ]

    def rbs(self) -> MethodDefinition:
        return MethodDefinition(
            name=self.method_name,
            kind=self.method_kind,
            overloads=tuple(self.method_overloads()),
            annotations=tuple(self.method_annotations()),
            comment=lookup.comment_text(self.comments),
            visibility=self.visibility,
        )
