"""RBS member records.

These are the output records produced by declaration entities and consumed by
an emitter: method definitions with overloads, aliases, mixins, attribute
accessors and passthrough annotations.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict

from rbs_inline.core.types import MethodType, RbsType, TypeName


class MethodKind(str, Enum):
    """Whether a method is defined on instances or on the singleton."""

    INSTANCE = "instance"
    SINGLETON = "singleton"


class Visibility(str, Enum):
    """Visibility modifier."""

    PUBLIC = "public"
    PRIVATE = "private"


class Member(BaseModel):
    """Base class for all member records."""

    model_config = ConfigDict(frozen=True)


class Annotation(Member):
    """Free-form annotation fragment (``%a{...}``) passed through verbatim."""

    string: str

    def __str__(self) -> str:
        return f"%a{{{self.string}}}"


class Overload(Member):
    """One signature of a method definition."""

    method_type: MethodType
    annotations: tuple[Annotation, ...] = ()


class MethodDefinition(Member):
    """``def`` member with one or more overloads."""

    name: str
    kind: MethodKind = MethodKind.INSTANCE
    overloads: tuple[Overload, ...]
    annotations: tuple[Annotation, ...] = ()
    comment: str | None = None
    visibility: Visibility | None = None


class Alias(Member):
    """``alias new_name old_name`` member."""

    new_name: str
    old_name: str
    kind: MethodKind = MethodKind.INSTANCE
    comment: str | None = None


class MixinMember(Member):
    """Base for ``include``/``extend``/``prepend`` members."""

    keyword: Literal["include", "extend", "prepend"]
    name: TypeName
    args: tuple[RbsType, ...] = ()
    comment: str | None = None

    def __str__(self) -> str:
        if not self.args:
            return f"{self.keyword} {self.name}"
        return f"{self.keyword} {self.name}[{', '.join(str(a) for a in self.args)}]"


class Include(MixinMember):
    keyword: Literal["include"] = "include"


class Extend(MixinMember):
    keyword: Literal["extend"] = "extend"


class Prepend(MixinMember):
    keyword: Literal["prepend"] = "prepend"


class AttrMember(Member):
    """Base for ``attr_reader``/``attr_writer``/``attr_accessor`` members.

    ``ivar_name=None`` means the default instance variable (``@name``).
    """

    keyword: Literal["attr_reader", "attr_writer", "attr_accessor"]
    name: str
    type: RbsType
    ivar_name: str | None = None
    kind: MethodKind = MethodKind.INSTANCE
    annotations: tuple[Annotation, ...] = ()
    comment: str | None = None
    visibility: Visibility | None = None

    def __str__(self) -> str:
        return f"{self.keyword} {self.name}: {self.type}"


class AttrReader(AttrMember):
    keyword: Literal["attr_reader"] = "attr_reader"


class AttrWriter(AttrMember):
    keyword: Literal["attr_writer"] = "attr_writer"


class AttrAccessor(AttrMember):
    keyword: Literal["attr_accessor"] = "attr_accessor"

