"""Unit tests for SignatureBuilder."""

from rbs_inline.core.types import (
    UNTYPED,
    BaseType,
    Block,
    ClassInstance,
    Function,
    OptionalType,
    Param,
    ProcType,
    TypeName,
)
from rbs_inline.declarations.signature import SignatureBuilder
from rbs_inline.syntax.nodes import (
    BlockParameter,
    DestructuredParameter,
    ForwardingParameter,
    KeywordRestParameter,
    NoKeywordsParameter,
    OptionalKeywordParameter,
    OptionalParameter,
    ParametersNode,
    RequiredKeywordParameter,
    RequiredParameter,
    RestParameter,
)


def _ci(name: str, *args, namespace: tuple[str, ...] = (), absolute: bool = False) -> ClassInstance:
    return ClassInstance(
        name=TypeName(name=name, namespace=namespace, absolute=absolute), args=args
    )


STRING = _ci("String")
INTEGER = _ci("Integer")
SYMBOL = _ci("Symbol")
VOID = BaseType(name="void")
PROC = ProcType(
    type=Function(required_positionals=(Param(type=INTEGER),), return_type=VOID),
    self_type=STRING,
)


class TestZeroArity:
    """Definitions without a parameter list."""

    def test_no_parameters(self) -> None:
        method_type = SignatureBuilder({}).build(None)
        assert method_type.type_params == ()
        assert method_type.block is None
        assert method_type.type == Function(return_type=UNTYPED)

    def test_empty_parameter_list(self) -> None:
        method_type = SignatureBuilder({}).build(ParametersNode())
        assert method_type.type == Function(return_type=UNTYPED)

    def test_return_type(self) -> None:
        method_type = SignatureBuilder({}, return_type=STRING).build(None)
        assert method_type.type.return_type == STRING


class TestPositionals:
    """Required and optional positional parameters."""

    def test_required_untyped(self) -> None:
        params = ParametersNode(requireds=(RequiredParameter(name="a"),))
        function = SignatureBuilder({}).build(params).type
        assert function.required_positionals == (Param(name="a", type=UNTYPED),)

    def test_required_and_optional_typed(self) -> None:
        params = ParametersNode(
            requireds=(RequiredParameter(name="a"),),
            optionals=(OptionalParameter(name="b", default="1"),),
        )
        function = SignatureBuilder({"a": STRING, "b": INTEGER}).build(params).type
        assert function.required_positionals == (Param(name="a", type=STRING),)
        assert function.optional_positionals == (Param(name="b", type=INTEGER),)

    def test_none_entry_falls_back_to_untyped(self) -> None:
        params = ParametersNode(requireds=(RequiredParameter(name="a"),))
        function = SignatureBuilder({"a": None}).build(params).type
        assert function.required_positionals[0].type == UNTYPED

    def test_destructured_parameter_skipped(self) -> None:
        params = ParametersNode(
            requireds=(DestructuredParameter(source="(x, y)"), RequiredParameter(name="z")),
        )
        function = SignatureBuilder({}).build(params).type
        assert function.required_positionals == (Param(name="z", type=UNTYPED),)

    def test_posts_not_reflected(self) -> None:
        params = ParametersNode(
            rest=RestParameter(name="rest"),
            posts=(RequiredParameter(name="last"),),
        )
        function = SignatureBuilder({}).build(params).type
        assert function.trailing_positionals == ()


class TestRestPositionals:
    """Rest parameter unwrapping."""

    def _rest(self, var_types, name: str | None = "args") -> Param | None:
        params = ParametersNode(rest=RestParameter(name=name))
        return SignatureBuilder(var_types).build(params).type.rest_positionals

    def test_unannotated(self) -> None:
        assert self._rest({}) == Param(name="args", type=UNTYPED)

    def test_array_unwrapped(self) -> None:
        assert self._rest({"args": _ci("Array", STRING)}) == Param(name="args", type=STRING)

    def test_plain_type_kept(self) -> None:
        assert self._rest({"args": STRING}) == Param(name="args", type=STRING)

    def test_array_without_argument_kept(self) -> None:
        assert self._rest({"args": _ci("Array")}).type == _ci("Array")

    def test_qualified_array_kept(self) -> None:
        absolute = _ci("Array", STRING, absolute=True)
        namespaced = _ci("Array", STRING, namespace=("Foo",))
        assert self._rest({"args": absolute}).type == absolute
        assert self._rest({"args": namespaced}).type == namespaced

    def test_anonymous_rest(self) -> None:
        assert self._rest({"args": STRING}, name=None) == Param(name=None, type=UNTYPED)

    def test_forwarding_has_no_rest(self) -> None:
        params = ParametersNode(rest=ForwardingParameter(), keyword_rest=ForwardingParameter())
        function = SignatureBuilder({}).build(params).type
        assert function.rest_positionals is None
        assert function.rest_keywords is None


class TestKeywords:
    """Keyword and keyword rest parameters."""

    def test_keywords_keyed_by_name(self) -> None:
        params = ParametersNode(
            keywords=(
                RequiredKeywordParameter(name="key"),
                OptionalKeywordParameter(name="opt", default="nil"),
            )
        )
        function = SignatureBuilder({"key": SYMBOL}).build(params).type
        assert function.required_keywords == {"key": Param(name=None, type=SYMBOL)}
        assert function.optional_keywords == {"opt": Param(name=None, type=UNTYPED)}

    def test_hash_unwrapped_to_value(self) -> None:
        params = ParametersNode(keyword_rest=KeywordRestParameter(name="opts"))
        function = SignatureBuilder({"opts": _ci("Hash", SYMBOL, INTEGER)}).build(params).type
        assert function.rest_keywords == Param(name="opts", type=INTEGER)

    def test_hash_with_one_argument_kept(self) -> None:
        params = ParametersNode(keyword_rest=KeywordRestParameter(name="opts"))
        hash_type = _ci("Hash", SYMBOL)
        function = SignatureBuilder({"opts": hash_type}).build(params).type
        assert function.rest_keywords == Param(name="opts", type=hash_type)

    def test_array_is_not_unwrapped_for_keywords(self) -> None:
        params = ParametersNode(keyword_rest=KeywordRestParameter(name="opts"))
        array_type = _ci("Array", STRING)
        function = SignatureBuilder({"opts": array_type}).build(params).type
        assert function.rest_keywords.type == array_type

    def test_no_keywords_parameter(self) -> None:
        params = ParametersNode(keyword_rest=NoKeywordsParameter())
        assert SignatureBuilder({}).build(params).type.rest_keywords is None


class TestBlock:
    """Block parameter handling."""

    def _block(self, var_types, name: str | None = "blk") -> Block | None:
        params = ParametersNode(block=BlockParameter(name=name))
        return SignatureBuilder(var_types).build(params).block

    def test_bare_proc_is_required(self) -> None:
        block = self._block({"blk": PROC})
        assert block == Block(type=PROC.type, self_type=STRING, required=True)

    def test_optional_proc_is_not_required(self) -> None:
        block = self._block({"blk": OptionalType(type=PROC)})
        assert block is not None
        assert block.required is False
        assert block.type == PROC.type

    def test_unannotated_block_omitted(self) -> None:
        assert self._block({}) is None

    def test_non_proc_block_omitted(self) -> None:
        assert self._block({"blk": STRING}) is None
        assert self._block({"blk": OptionalType(type=STRING)}) is None

    def test_anonymous_block_omitted(self) -> None:
        assert self._block({"blk": PROC}, name=None) is None
