"""Base class for declaration entities.

A declaration entity wraps one syntax node (and the annotations attached to
it) and derives RBS members from it on demand. Entities are immutable and do
not cache anything.
"""

from __future__ import annotations


class Declaration:
    """Marker base class for all declaration entities."""

    @property
    def line(self) -> int:
        """1-based source line of the wrapped node."""
        return self.node.line  # type: ignore[attr-defined]
