"""Unit tests for AttrDecl."""

import pytest

from rbs_inline.annotations.models import Assertion, ParsingResult
from rbs_inline.core.members import AttrAccessor, AttrReader, AttrWriter, MethodKind
from rbs_inline.core.result import StructuralError
from rbs_inline.core.types import UNTYPED, ClassInstance, Function, MethodType, TypeName
from rbs_inline.declarations import AttrDecl, AttrKind
from rbs_inline.declarations.attr import ATTR_MEMBERS
from rbs_inline.syntax.nodes import CallNode, ConstantReadNode, ExpressionNode, SymbolNode

STRING = ClassInstance(name=TypeName(name="String"))


def _call(name: str, *arguments) -> CallNode:
    return CallNode(name=name, arguments=arguments, line=4)


def _symbols(*names: str) -> tuple[SymbolNode, ...]:
    return tuple(SymbolNode(value=name) for name in names)


class TestAttrMembers:
    """Tests for AttrDecl.rbs."""

    def test_reader_with_assertion(self) -> None:
        decl = AttrDecl(_call("attr_reader", *_symbols("x", "y")), assertion=Assertion(type=STRING))
        members = decl.rbs().unwrap()
        assert [m.name for m in members] == ["x", "y"]
        assert all(isinstance(m, AttrReader) for m in members)
        assert all(m.type == STRING for m in members)
        assert all(m.kind == MethodKind.INSTANCE for m in members)
        assert all(m.ivar_name is None for m in members)

    def test_untyped_without_assertion(self) -> None:
        members = AttrDecl(_call("attr_writer", *_symbols("x"))).rbs().unwrap()
        assert isinstance(members[0], AttrWriter)
        assert members[0].type == UNTYPED

    def test_accessor(self) -> None:
        members = AttrDecl(_call("attr_accessor", *_symbols("count"))).rbs().unwrap()
        assert isinstance(members[0], AttrAccessor)
        assert str(members[0]) == "attr_accessor count: untyped"

    def test_non_symbol_arguments_skipped(self) -> None:
        decl = AttrDecl(
            _call(
                "attr_reader",
                SymbolNode(value="a"),
                ExpressionNode(source='"b"'),
                ConstantReadNode(name="C"),
                SymbolNode(value="d"),
            )
        )
        assert [m.name for m in decl.rbs().unwrap()] == ["a", "d"]

    def test_no_symbols_yields_no_members(self) -> None:
        assert AttrDecl(_call("attr_reader")).rbs().unwrap() == []
        assert AttrDecl(_call("attr_reader", ExpressionNode(source="name"))).rbs().unwrap() == []

    def test_comment_attached(self) -> None:
        decl = AttrDecl(_call("attr_reader", *_symbols("x")), ParsingResult(content="The x"))
        assert decl.rbs().unwrap()[0].comment == "The x"

    def test_blank_comment_is_none(self) -> None:
        decl = AttrDecl(_call("attr_reader", *_symbols("x")), ParsingResult())
        assert decl.rbs().unwrap()[0].comment is None

    def test_every_kind_has_member_class(self) -> None:
        assert set(ATTR_MEMBERS) == set(AttrKind)


class TestAttrStructuralErrors:
    """Shapes that are structural errors."""

    def test_method_type_assertion(self) -> None:
        assertion = Assertion(type=MethodType(type=Function(return_type=STRING)))
        result = AttrDecl(_call("attr_reader", *_symbols("x")), assertion=assertion).rbs()
        with pytest.raises(StructuralError, match="plain type"):
            result.unwrap()

    def test_method_type_assertion_without_names_is_not_checked(self) -> None:
        assertion = Assertion(type=MethodType(type=Function(return_type=STRING)))
        assert AttrDecl(_call("attr_reader"), assertion=assertion).rbs().unwrap() == []

    def test_symbol_without_value(self) -> None:
        result = AttrDecl(_call("attr_reader", SymbolNode(value=None))).rbs()
        assert isinstance(result.error, StructuralError)

    def test_unknown_call_name(self) -> None:
        result = AttrDecl(_call("attr", *_symbols("x"))).rbs()
        assert isinstance(result.error, StructuralError)
