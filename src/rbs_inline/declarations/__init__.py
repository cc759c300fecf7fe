"""Declaration entities translating Ruby declarations into RBS members."""

from rbs_inline.declarations.alias import AliasDecl
from rbs_inline.declarations.attr import AttrDecl, AttrKind
from rbs_inline.declarations.base import Declaration
from rbs_inline.declarations.method import MethodDecl
from rbs_inline.declarations.mixin import MixinDecl, MixinKind
from rbs_inline.declarations.signature import SignatureBuilder
from rbs_inline.declarations.visibility import PrivateMarker, PublicMarker, VisibilityMarker

__all__ = [
    "AliasDecl",
    "AttrDecl",
    "AttrKind",
    "Declaration",
    "MethodDecl",
    "MixinDecl",
    "MixinKind",
    "PrivateMarker",
    "PublicMarker",
    "SignatureBuilder",
    "VisibilityMarker",
]
