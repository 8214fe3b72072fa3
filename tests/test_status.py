"""Tests for status icons and the status state machine."""

import pytest

from messaging.bubble import (
    ALLOWED_TRANSITIONS,
    StatusIcon,
    can_transition,
    parse_status,
    status_indicator,
    transition,
)
from messaging.errors import InvalidStatusTransition
from messaging.models import MessageStatus


class TestStatusIndicator:
    """Tests for status_indicator()."""

    def test_sent_is_single_muted_check(self):
        """Test that sent is a single muted check."""
        assert status_indicator("sent") == StatusIcon(glyph="check", tone="muted")

    def test_delivered_is_double_muted_check(self):
        """Test that delivered is a double muted check."""
        assert status_indicator("delivered") == StatusIcon(
            glyph="double_check", tone="muted"
        )

    def test_read_is_double_accent_check(self):
        """Test that read is a double accent check."""
        assert status_indicator(MessageStatus.READ) == StatusIcon(
            glyph="double_check", tone="accent"
        )

    @pytest.mark.parametrize("status", ["sent", "delivered", "read", "failed", ""])
    def test_total_over_any_value(self, status):
        """Every value maps to something (possibly None) without raising."""
        status_indicator(status)

    def test_unknown_status_has_no_icon(self):
        """Test unknown status has no icon."""
        assert status_indicator("queued") is None


class TestTransitions:
    """Tests for the sent -> delivered -> read state machine."""

    def test_forward_moves_are_allowed(self):
        """Test that forward moves are allowed."""
        assert can_transition("sent", "delivered")
        assert can_transition("delivered", "read")
        assert can_transition("sent", "read")

    def test_backward_and_same_moves_are_rejected(self):
        """Test that backward and repeated moves are rejected."""
        assert not can_transition("read", "delivered")
        assert not can_transition("delivered", "sent")
        assert not can_transition("read", "read")

    def test_unknown_values_are_rejected(self):
        """Test that unknown values are rejected."""
        assert not can_transition("sent", "bogus")
        assert not can_transition("bogus", "read")

    def test_read_is_terminal(self):
        """Test that read is terminal."""
        assert ALLOWED_TRANSITIONS[MessageStatus.READ] == frozenset()

    def test_transition_returns_new_status(self):
        """Test that transition returns the new status."""
        assert transition("sent", "delivered") is MessageStatus.DELIVERED

    def test_transition_raises_on_backward_move(self):
        """Test that transition raises on a backward move."""
        with pytest.raises(InvalidStatusTransition) as exc_info:
            transition(MessageStatus.READ, MessageStatus.SENT)
        assert exc_info.value.current == "read"
        assert exc_info.value.new == "sent"

    def test_invalid_transition_is_a_value_error(self):
        """Test that InvalidStatusTransition is a ValueError."""
        with pytest.raises(ValueError):
            transition("read", "delivered")

    def test_parse_status(self):
        """Test parsing status values."""
        assert parse_status("read") is MessageStatus.READ
        assert parse_status("nope") is None
