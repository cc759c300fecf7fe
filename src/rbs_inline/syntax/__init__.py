"""Syntax node variants understood by the declaration entities."""

from rbs_inline.syntax.nodes import (
    AliasMethodNode,
    BlockParameter,
    CallNode,
    ConstantReadNode,
    DefNode,
    DestructuredParameter,
    ExpressionNode,
    ForwardingParameter,
    KeywordRestParameter,
    NoKeywordsParameter,
    OptionalKeywordParameter,
    OptionalParameter,
    ParametersNode,
    RequiredKeywordParameter,
    RequiredParameter,
    RestParameter,
    SelfNode,
    SymbolNode,
)

__all__ = [
    "AliasMethodNode",
    "BlockParameter",
    "CallNode",
    "ConstantReadNode",
    "DefNode",
    "DestructuredParameter",
    "ExpressionNode",
    "ForwardingParameter",
    "KeywordRestParameter",
    "NoKeywordsParameter",
    "OptionalKeywordParameter",
    "OptionalParameter",
    "ParametersNode",
    "RequiredKeywordParameter",
    "RequiredParameter",
    "RestParameter",
    "SelfNode",
    "SymbolNode",
]
