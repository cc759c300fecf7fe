"""Read-only queries over annotation parsing results.

Every function accepts ``None`` for a declaration without comments and treats
it as an empty result. Missing annotations are never an error.
"""

from __future__ import annotations

from rbs_inline.annotations.models import (
    Application,
    Assertion,
    ParsingResult,
    RBSAnnotation,
    ReturnType,
    VarType,
)
from rbs_inline.core.result import Result
from rbs_inline.core.types import UNTYPED, MethodType, RbsType


def method_type_assertions(comments: ParsingResult | None) -> list[Assertion]:
    """Select assertions carrying a full method signature.

    Args:
        comments: Annotations attached to a method definition.

    Returns:
        The explicit overloads, in source order.
    """
    if comments is None:
        return []
    return [
        annotation
        for annotation in comments.annotations
        if isinstance(annotation, Assertion) and isinstance(annotation.type, MethodType)
    ]


def return_type(comments: ParsingResult | None) -> RbsType | None:
    """Return the first ``@rbs return:`` type, if any."""
    if comments is None:
        return None
    for annotation in comments.annotations:
        if isinstance(annotation, ReturnType):
            return annotation.type
    return None


def var_type_map(comments: ParsingResult | None) -> dict[str, RbsType | None]:
    """Build the name -> type mapping from ``@rbs name: T`` annotations.

    Later annotations for the same name replace earlier ones. Annotations
    without a name are ignored. Callers apply the ``untyped`` fallback.
    """
    types: dict[str, RbsType | None] = {}
    if comments is None:
        return types
    for annotation in comments.annotations:
        if isinstance(annotation, VarType) and annotation.name:
            types[annotation.name] = annotation.type
    return types


def attribute_type(assertion: Assertion | None) -> Result[RbsType]:
    """Resolve the type shared by every name of an attribute declaration.

    Returns ``untyped`` when there is no assertion.
    """
    if assertion is None:
        return Result.success(UNTYPED)
    if isinstance(assertion.type, MethodType):
        return Result.failure(
            "Attribute type assertion must be a plain type",
            details=f"got method type `{assertion.type}`",
        )
    return Result.success(assertion.type)


def first_assertion(comments: ParsingResult | None) -> Assertion | None:
    if comments is None:
        return None
    return next((a for a in comments.annotations if isinstance(a, Assertion)), None)


def first_application(comments: ParsingResult | None) -> Application | None:
    if comments is None:
        return None
    return next((a for a in comments.annotations if isinstance(a, Application)), None)


def passthrough_contents(comments: ParsingResult | None) -> list[str]:
    """Collect the raw ``%a{...}`` items of every passthrough annotation."""
    if comments is None:
        return []
    contents: list[str] = []
    for annotation in comments.annotations:
        if isinstance(annotation, RBSAnnotation):
            contents.extend(annotation.contents)
    return contents


def comment_text(comments: ParsingResult | None) -> str | None:
    """Documentation text of the comment block, None when it is blank."""
    if comments is None:
        return None
    return comments.content or None
