"""Ruby language adapter submodule.

This module provides the tree-sitter based front-end that turns Ruby
source into declaration entities.
"""

from rbs_inline.adapters.ruby.builder import RubySyntaxBuilder
from rbs_inline.adapters.ruby.scanner import RubyDeclarationScanner, ScannedDeclaration

__all__ = ["RubyDeclarationScanner", "RubySyntaxBuilder", "ScannedDeclaration"]
