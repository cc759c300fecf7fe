"""Syntax nodes consumed by the declaration entities.

A deliberately small, closed model of the Ruby syntax the translation looks
at. Every category (expressions, parameters, declarations) is a discriminated
union on ``node_type``; anything the translation does not inspect is an
``ExpressionNode`` holding its source text.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


# Expressions


class SelfNode(_Node):
    node_type: Literal["self"] = "self"


class ConstantReadNode(_Node):
    """Bare constant reference such as ``Comparable``."""

    node_type: Literal["constant_read"] = "constant_read"
    name: str


class SymbolNode(_Node):
    """Literal symbol. ``value`` is None when it is not statically known."""

    node_type: Literal["symbol"] = "symbol"
    value: str | None = None


class ExpressionNode(_Node):
    """Any other expression."""

    node_type: Literal["expression"] = "expression"
    source: str = ""


# Parameters


class RequiredParameter(_Node):
    node_type: Literal["required_parameter"] = "required_parameter"
    name: str


class DestructuredParameter(_Node):
    """``def foo((a, b))``"""

    node_type: Literal["destructured_parameter"] = "destructured_parameter"
    source: str = ""


class OptionalParameter(_Node):
    node_type: Literal["optional_parameter"] = "optional_parameter"
    name: str
    default: str = Field(default="", description="Source of the default expression")


class RestParameter(_Node):
    """``*args``; ``name`` is None for an anonymous ``*``."""

    node_type: Literal["rest_parameter"] = "rest_parameter"
    name: str | None = None


class ForwardingParameter(_Node):
    """``...``"""

    node_type: Literal["forwarding_parameter"] = "forwarding_parameter"


class RequiredKeywordParameter(_Node):
    node_type: Literal["required_keyword_parameter"] = "required_keyword_parameter"
    name: str


class OptionalKeywordParameter(_Node):
    node_type: Literal["optional_keyword_parameter"] = "optional_keyword_parameter"
    name: str
    default: str = ""


class KeywordRestParameter(_Node):
    """``**opts``; ``name`` is None for an anonymous ``**``."""

    node_type: Literal["keyword_rest_parameter"] = "keyword_rest_parameter"
    name: str | None = None


class NoKeywordsParameter(_Node):
    """``**nil``"""

    node_type: Literal["no_keywords_parameter"] = "no_keywords_parameter"


class BlockParameter(_Node):
    """``&block``; ``name`` is None for an anonymous ``&``."""

    node_type: Literal["block_parameter"] = "block_parameter"
    name: str | None = None


RequiredParam = Annotated[
    Union[RequiredParameter, DestructuredParameter],
    Field(discriminator="node_type"),
]
RestParam = Annotated[
    Union[RestParameter, ForwardingParameter],
    Field(discriminator="node_type"),
]
KeywordParam = Annotated[
    Union[RequiredKeywordParameter, OptionalKeywordParameter],
    Field(discriminator="node_type"),
]
KeywordRestParam = Annotated[
    Union[KeywordRestParameter, NoKeywordsParameter, ForwardingParameter],
    Field(discriminator="node_type"),
]


class ParametersNode(_Node):
    """Parameter list of a method definition, grouped by kind."""

    node_type: Literal["parameters"] = "parameters"
    requireds: tuple[RequiredParam, ...] = ()
    optionals: tuple[OptionalParameter, ...] = ()
    rest: RestParam | None = None
    posts: tuple[RequiredParam, ...] = ()
    keywords: tuple[KeywordParam, ...] = ()
    keyword_rest: KeywordRestParam | None = None
    block: BlockParameter | None = None


# Declarations


Receiver = Annotated[
    Union[SelfNode, ConstantReadNode, SymbolNode, ExpressionNode],
    Field(discriminator="node_type"),
]


class DefNode(_Node):
    """``def name(params)`` or ``def receiver.name(params)``."""

    node_type: Literal["def"] = "def"
    name: str
    receiver: Receiver | None = None
    parameters: ParametersNode | None = None
    line: int = 0


class AliasMethodNode(_Node):
    """``alias new_name old_name``"""

    node_type: Literal["alias"] = "alias"
    new_name: Receiver
    old_name: Receiver
    line: int = 0


Argument = Annotated[
    Union[SelfNode, ConstantReadNode, SymbolNode, ExpressionNode, DefNode],
    Field(discriminator="node_type"),
]


class CallNode(_Node):
    """Method call; ``arguments`` is None when the call has no argument list."""

    node_type: Literal["call"] = "call"
    name: str
    receiver: Receiver | None = None
    arguments: tuple[Argument, ...] | None = None
    line: int = 0

    @property
    def argument_list(self) -> tuple[Argument, ...]:
        return self.arguments or ()


for _model in (ParametersNode, DefNode, AliasMethodNode, CallNode):
    _model.model_rebuild()
