"""RBS type model.

This module defines the immutable data structures for the RBS type language:
plain types, function types, blocks and method types. The models are closed
discriminated unions (on the ``kind`` field) so that every consumer can
dispatch over a known set of variants.

``str()`` on any model renders RBS syntax. It is meant for diagnostics and the
CLI, not as a full emitter.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class TypeName(_Frozen):
    """Name of a class, module or interface.

    An empty namespace with ``absolute=False`` is a top-level simple name
    such as ``Array``; ``::Array`` has an empty namespace but is absolute.
    """

    name: str = Field(..., description="Last segment of the name")
    namespace: tuple[str, ...] = Field(default=(), description="Leading segments")
    absolute: bool = False

    def is_simple(self, name: str) -> bool:
        """Check for an unqualified top-level name."""
        return self.name == name and not self.namespace and not self.absolute

    def __str__(self) -> str:
        prefix = "::" if self.absolute else ""
        return prefix + "::".join((*self.namespace, self.name))


class AnyType(_Frozen):
    """The unknown type, written ``untyped``."""

    kind: Literal["any"] = "any"

    def __str__(self) -> str:
        return "untyped"


class BaseType(_Frozen):
    """Built-in keyword types."""

    kind: Literal["base"] = "base"
    name: Literal["void", "bool", "nil", "self", "top", "bot", "instance", "class", "boolish"]

    def __str__(self) -> str:
        return self.name


class ClassInstance(_Frozen):
    """Instance of a class or module, with optional type arguments."""

    kind: Literal["class_instance"] = "class_instance"
    name: TypeName
    args: tuple[RbsType, ...] = ()

    def __str__(self) -> str:
        if not self.args:
            return str(self.name)
        return f"{self.name}[{', '.join(str(arg) for arg in self.args)}]"


class Variable(_Frozen):
    """Type variable such as ``T``."""

    kind: Literal["variable"] = "variable"
    name: str

    def __str__(self) -> str:
        return self.name


class OptionalType(_Frozen):
    """``T?``"""

    kind: Literal["optional"] = "optional"
    type: RbsType

    def __str__(self) -> str:
        if isinstance(self.type, (UnionType, ProcType)):
            return f"({self.type})?"
        return f"{self.type}?"


class UnionType(_Frozen):
    """``A | B``"""

    kind: Literal["union"] = "union"
    types: tuple[RbsType, ...]

    def __str__(self) -> str:
        return " | ".join(str(t) for t in self.types)


class ProcType(_Frozen):
    """Callable value type, written ``^(params) -> R``."""

    kind: Literal["proc"] = "proc"
    type: Function
    self_type: RbsType | None = None

    def __str__(self) -> str:
        self_part = f"[self: {self.self_type}] " if self.self_type is not None else ""
        return f"^{self.type.param_string()} {self_part}-> {self.type.return_type}"


class Param(_Frozen):
    """A single function parameter.

    Keyword parameters carry ``name=None``: the keyword itself is the key in
    the owning ``Function`` mapping.
    """

    name: str | None = None
    type: RbsType

    def __str__(self) -> str:
        if self.name is None:
            return str(self.type)
        return f"{self.type} {self.name}"


class Function(_Frozen):
    """Structural type of a callable: parameters and return type."""

    required_positionals: tuple[Param, ...] = ()
    optional_positionals: tuple[Param, ...] = ()
    rest_positionals: Param | None = None
    trailing_positionals: tuple[Param, ...] = ()
    required_keywords: dict[str, Param] = Field(default_factory=dict)
    optional_keywords: dict[str, Param] = Field(default_factory=dict)
    rest_keywords: Param | None = None
    return_type: RbsType

    def param_string(self) -> str:
        """Render the parenthesized parameter list."""
        parts: list[str] = [str(p) for p in self.required_positionals]
        parts.extend(f"?{p}" for p in self.optional_positionals)
        if self.rest_positionals is not None:
            parts.append(f"*{self.rest_positionals}")
        parts.extend(str(p) for p in self.trailing_positionals)
        parts.extend(f"{key}: {p}" for key, p in self.required_keywords.items())
        parts.extend(f"?{key}: {p}" for key, p in self.optional_keywords.items())
        if self.rest_keywords is not None:
            parts.append(f"**{self.rest_keywords}")
        return f"({', '.join(parts)})"

    def __str__(self) -> str:
        return f"{self.param_string()} -> {self.return_type}"


class Block(_Frozen):
    """Block accepted by a method."""

    type: Function
    required: bool
    self_type: RbsType | None = None

    def __str__(self) -> str:
        self_part = f" [self: {self.self_type}]" if self.self_type is not None else ""
        prefix = "" if self.required else "?"
        return f"{prefix}{{ {self.type.param_string()}{self_part} -> {self.type.return_type} }}"


class MethodType(_Frozen):
    """Full method signature: type parameters, function and optional block."""

    kind: Literal["method_type"] = "method_type"
    type_params: tuple[str, ...] = ()
    type: Function
    block: Block | None = None

    def __str__(self) -> str:
        text = self.type.param_string()
        if self.type_params:
            text = f"[{', '.join(self.type_params)}] {text}"
        if self.block is not None:
            text = f"{text} {self.block}"
        return f"{text} -> {self.type.return_type}"


RbsType = Annotated[
    Union[AnyType, BaseType, ClassInstance, Variable, OptionalType, UnionType, ProcType],
    Field(discriminator="kind"),
]

# Payload of a type assertion: either a plain type or a full method signature.
AssertedType = Annotated[
    Union[
        AnyType,
        BaseType,
        ClassInstance,
        Variable,
        OptionalType,
        UnionType,
        ProcType,
        MethodType,
    ],
    Field(discriminator="kind"),
]

UNTYPED = AnyType()

for _model in (ClassInstance, OptionalType, UnionType, ProcType, Param, Function, Block, MethodType):
    _model.model_rebuild()
