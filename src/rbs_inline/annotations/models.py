"""Annotation values attached to declarations.

These are produced by the comment annotation parser and consumed read-only by
the declaration entities. Each value is tagged so that a ``ParsingResult`` can
hold an ordered, heterogeneous sequence of them.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from rbs_inline.core.types import AssertedType, RbsType


class _AnnotationBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str = Field(default="", description="Comment text the annotation was parsed from")


class Assertion(_AnnotationBase):
    """Type assertion: ``#: String`` or ``#: (Integer) -> void``."""

    tag: Literal["assertion"] = "assertion"
    type: AssertedType


class ReturnType(_AnnotationBase):
    """``@rbs return: T``"""

    tag: Literal["return_type"] = "return_type"
    type: RbsType


class VarType(_AnnotationBase):
    """``@rbs name: T`` for a parameter, block parameter or instance variable."""

    tag: Literal["var_type"] = "var_type"
    name: str | None = None
    type: RbsType | None = None


class Application(_AnnotationBase):
    """Type application: ``#[Integer, String]``."""

    tag: Literal["application"] = "application"
    types: tuple[RbsType, ...] | None = None


class RBSAnnotation(_AnnotationBase):
    """Raw RBS annotations: ``@rbs %a{pure} %a{deprecated}``.

    Each content item is the captured ``%a{...}`` substring, delimiters
    included.
    """

    tag: Literal["rbs_annotation"] = "rbs_annotation"
    contents: tuple[str, ...] = ()


AnnotationValue = Annotated[
    Union[Assertion, ReturnType, VarType, Application, RBSAnnotation],
    Field(discriminator="tag"),
]


class ParsingResult(BaseModel):
    """Annotations parsed from the comment block attached to one node."""

    model_config = ConfigDict(frozen=True)

    annotations: tuple[AnnotationValue, ...] = ()
    content: str = Field(default="", description="Comment text without the leading `#`")
