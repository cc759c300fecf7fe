"""Unit tests for visibility markers and the Result type."""

import pytest

from rbs_inline.core.members import Visibility
from rbs_inline.core.result import Result, StructuralError
from rbs_inline.declarations import PrivateMarker, PublicMarker
from rbs_inline.syntax.nodes import CallNode


class TestVisibilityMarkers:
    """Tests for PrivateMarker/PublicMarker."""

    def test_private(self) -> None:
        marker = PrivateMarker(CallNode(name="private", line=10))
        assert marker.visibility == Visibility.PRIVATE
        assert marker.line == 10

    def test_public(self) -> None:
        assert PublicMarker(CallNode(name="public")).visibility == Visibility.PUBLIC

    def test_identity_only(self) -> None:
        node = CallNode(name="private", line=1)
        assert PrivateMarker(node).node is node
        assert PrivateMarker(node) == PrivateMarker(node)


class TestResult:
    """Tests for Result."""

    def test_success(self) -> None:
        result = Result.success([])
        assert result.is_ok
        assert result.unwrap() == []

    def test_failure(self) -> None:
        result = Result.failure("Bad shape", details="got expression")
        assert not result.is_ok
        assert result.value is None
        assert str(result.error) == "Bad shape: got expression"
        with pytest.raises(StructuralError) as exc_info:
            result.unwrap()
        assert exc_info.value.message == "Bad shape"
        assert exc_info.value.details == "got expression"

    def test_error_without_details(self) -> None:
        assert str(StructuralError("Bad shape")) == "Bad shape"
