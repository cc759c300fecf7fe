"""Language adapters for parsing source code.

This module provides the front-ends that turn source files into the syntax
nodes and declaration entities consumed by the translation core.
"""

from rbs_inline.adapters.ruby import (
    RubyDeclarationScanner,
    RubySyntaxBuilder,
    ScannedDeclaration,
)

__all__ = [
    "RubyDeclarationScanner",
    "RubySyntaxBuilder",
    "ScannedDeclaration",
]
