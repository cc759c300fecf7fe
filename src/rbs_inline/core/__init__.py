"""Core module containing the RBS type model, member records and results."""

from rbs_inline.core.members import (
    Alias,
    Annotation,
    AttrAccessor,
    AttrMember,
    AttrReader,
    AttrWriter,
    Extend,
    Include,
    Member,
    MethodDefinition,
    MethodKind,
    MixinMember,
    Overload,
    Prepend,
    Visibility,
)
from rbs_inline.core.result import Result, StructuralError
from rbs_inline.core.types import (
    UNTYPED,
    AnyType,
    AssertedType,
    BaseType,
    Block,
    ClassInstance,
    Function,
    MethodType,
    OptionalType,
    Param,
    ProcType,
    RbsType,
    TypeName,
    UnionType,
    Variable,
)

__all__ = [
    "UNTYPED",
    "Alias",
    "Annotation",
    "AnyType",
    "AssertedType",
    "AttrAccessor",
    "AttrMember",
    "AttrReader",
    "AttrWriter",
    "BaseType",
    "Block",
    "ClassInstance",
    "Extend",
    "Function",
    "Include",
    "Member",
    "MethodDefinition",
    "MethodKind",
    "MethodType",
    "MixinMember",
    "OptionalType",
    "Overload",
    "Param",
    "Prepend",
    "ProcType",
    "RbsType",
    "Result",
    "StructuralError",
    "TypeName",
    "UnionType",
    "Variable",
    "Visibility",
]
