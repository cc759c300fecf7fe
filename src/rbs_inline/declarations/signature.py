"""Parameter list to method type translation.

``SignatureBuilder`` derives the single implicit overload of a method
definition from its parameter list and the ``@rbs name: T`` annotations
attached to it. Every position without an annotation is ``untyped``.

Unwrapping rules for rest parameters::

    # @rbs *args: Array[String]         -> *String args
    # @rbs *args: String                -> *String args
    # @rbs **opts: Hash[Symbol, Integer] -> **Integer opts

Block parameters only produce a block when annotated with a proc type::

    # @rbs &block: ^(Integer) -> void    -> { (Integer) -> void }
    # @rbs &block: (^(Integer) -> void)? -> ?{ (Integer) -> void }
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from rbs_inline.core.types import (
    UNTYPED,
    Block,
    ClassInstance,
    Function,
    MethodType,
    OptionalType,
    Param,
    ProcType,
    RbsType,
)
from rbs_inline.syntax.nodes import (
    BlockParameter,
    KeywordRestParameter,
    OptionalKeywordParameter,
    ParametersNode,
    RequiredKeywordParameter,
    RequiredParameter,
    RestParameter,
)

logger = logging.getLogger(__name__)

REST_CONTAINER = "Array"
KEYWORD_REST_CONTAINER = "Hash"


class SignatureBuilder:
    """Builds the implicit method type of a ``def``.

    Args:
        var_types: ``@rbs`` name -> type mapping of the definition.
        return_type: ``@rbs return:`` type, if annotated.
    """

    def __init__(
        self,
        var_types: Mapping[str, RbsType | None],
        return_type: RbsType | None = None,
    ) -> None:
        self._var_types = var_types
        self._return_type = return_type

    def build(self, parameters: ParametersNode | None) -> MethodType:
        """Derive one method type from a parameter list.

        Args:
            parameters: Parameter list node, None for a definition without one.

        Returns:
            Method type with no type parameters.
        """
        required_positionals: list[Param] = []
        optional_positionals: list[Param] = []
        rest_positionals: Param | None = None
        required_keywords: dict[str, Param] = {}
        optional_keywords: dict[str, Param] = {}
        rest_keywords: Param | None = None
        block: Block | None = None

        if parameters is not None:
            for param in parameters.requireds:
                if isinstance(param, RequiredParameter):
                    required_positionals.append(
                        Param(name=param.name, type=self._lookup(param.name))
                    )
                else:
                    logger.debug(f"Skipping destructured parameter {param.source!r}")

            for param in parameters.optionals:
                optional_positionals.append(Param(name=param.name, type=self._lookup(param.name)))

            if parameters.posts:
                logger.debug(f"Ignoring {len(parameters.posts)} parameter(s) after the rest parameter")

            if isinstance(parameters.rest, RestParameter):
                rest_positionals = Param(
                    name=parameters.rest.name,
                    type=self._rest_type(parameters.rest.name, REST_CONTAINER, arity=1, index=0),
                )

            for keyword in parameters.keywords:
                if isinstance(keyword, RequiredKeywordParameter):
                    required_keywords[keyword.name] = Param(type=self._lookup(keyword.name))
                elif isinstance(keyword, OptionalKeywordParameter):
                    optional_keywords[keyword.name] = Param(type=self._lookup(keyword.name))

            if isinstance(parameters.keyword_rest, KeywordRestParameter):
                rest_keywords = Param(
                    name=parameters.keyword_rest.name,
                    type=self._rest_type(
                        parameters.keyword_rest.name, KEYWORD_REST_CONTAINER, arity=2, index=1
                    ),
                )

            if parameters.block is not None:
                block = self._block(parameters.block)

        return MethodType(
            type_params=(),
            type=Function(
                required_positionals=tuple(required_positionals),
                optional_positionals=tuple(optional_positionals),
                rest_positionals=rest_positionals,
                required_keywords=required_keywords,
                optional_keywords=optional_keywords,
                rest_keywords=rest_keywords,
                return_type=self._return_type or UNTYPED,
            ),
            block=block,
        )

    def _lookup(self, name: str) -> RbsType:
        return self._var_types.get(name) or UNTYPED

    def _rest_type(self, name: str | None, container: str, arity: int, index: int) -> RbsType:
        """Resolve the element type of a rest parameter.

        A top-level ``container`` instance with exactly ``arity`` arguments is
        unwrapped to its argument at ``index``. Other types are kept as is.
        """
        if name is None:
            return UNTYPED
        rest_type = self._var_types.get(name)
        if rest_type is None:
            return UNTYPED
        if (
            isinstance(rest_type, ClassInstance)
            and rest_type.name.is_simple(container)
            and len(rest_type.args) == arity
        ):
            return rest_type.args[index]
        return rest_type

    def _block(self, param: BlockParameter) -> Block | None:
        """Build the block from a ``&block`` annotation.

        Returns None when the parameter is anonymous or its annotation is not
        a (possibly optional) proc type.
        """
        if param.name is None:
            return None
        var_type = self._var_types.get(param.name)

        required = True
        if isinstance(var_type, OptionalType):
            required = False
            var_type = var_type.type

        if isinstance(var_type, ProcType):
            return Block(type=var_type.type, self_type=var_type.self_type, required=required)

        if var_type is not None:
            logger.debug(f"Block parameter &{param.name} is not annotated with a proc type")
        return None
