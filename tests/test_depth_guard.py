"""Tests for core.depth_guard: DepthGuard and depth_clamp."""

from __future__ import annotations

import logging
import sys

import pytest

from ftlcanon.constants import MAX_DEPTH
from ftlcanon.core import DepthGuard, DepthLimitExceededError, depth_clamp
from ftlcanon.diagnostics import DiagnosticCode
from ftlcanon.syntax.serializer import SerializationDepthError


class TestDepthGuard:
    """Context manager depth tracking."""

    def test_default_limit(self) -> None:
        """Default limit is MAX_DEPTH."""
        assert DepthGuard().max_depth == MAX_DEPTH

    def test_enter_exit_tracks_depth(self) -> None:
        """Depth increments inside and decrements after."""
        guard = DepthGuard(max_depth=5)

        with guard:
            assert guard.depth == 1
            with guard:
                assert guard.depth == 2
        assert guard.depth == 0

    def test_limit_raises(self) -> None:
        """Entering beyond the limit raises."""
        guard = DepthGuard(max_depth=2)

        with guard, guard, pytest.raises(DepthLimitExceededError) as exc_info, guard:
            pass

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.MAX_DEPTH_EXCEEDED
        assert "(2)" in str(exc_info.value)

    def test_failed_enter_keeps_state(self) -> None:
        """A rejected __enter__ does not leave depth elevated."""
        guard = DepthGuard(max_depth=1)

        with guard:
            with pytest.raises(DepthLimitExceededError):
                guard.__enter__()
            assert guard.depth == 1
        assert guard.depth == 0

    def test_depth_released_on_exception(self) -> None:
        """Exceptions inside the block still decrement depth."""
        guard = DepthGuard(max_depth=3)

        with pytest.raises(KeyError), guard:
            raise KeyError("boom")

        assert guard.depth == 0

    def test_custom_error_class(self) -> None:
        """error_class selects the raised subclass."""
        guard = DepthGuard(max_depth=0, error_class=SerializationDepthError)

        with pytest.raises(SerializationDepthError), guard:
            pass


class TestDepthClamp:
    """Clamping against the interpreter recursion limit."""

    def test_within_limit_unchanged(self) -> None:
        """Small depths pass through."""
        assert depth_clamp(10) == 10

    def test_clamped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Excessive depths are clamped and logged."""
        limit = sys.getrecursionlimit()

        with caplog.at_level(logging.WARNING, logger="ftlcanon.core.depth_guard"):
            result = depth_clamp(limit * 2)

        assert result == limit - 50
        assert "exceeds Python recursion limit" in caplog.text

    def test_guard_clamps_on_init(self) -> None:
        """DepthGuard applies depth_clamp to max_depth."""
        limit = sys.getrecursionlimit()

        assert DepthGuard(max_depth=limit * 2).max_depth == limit - 50
