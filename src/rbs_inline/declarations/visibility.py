"""Bare ``private``/``public`` calls."""

from __future__ import annotations

from dataclasses import dataclass

from rbs_inline.core.members import Visibility
from rbs_inline.declarations.base import Declaration
from rbs_inline.syntax.nodes import CallNode


@dataclass(frozen=True)
class PrivateMarker(Declaration):
    """``private`` without arguments."""

    node: CallNode

    @property
    def visibility(self) -> Visibility:
        return Visibility.PRIVATE


@dataclass(frozen=True)
class PublicMarker(Declaration):
    """``public`` without arguments."""

    node: CallNode

    @property
    def visibility(self) -> Visibility:
        return Visibility.PUBLIC


VisibilityMarker = PrivateMarker | PublicMarker
