"""Tests for MessageBubble."""

from datetime import timedelta, timezone
from unittest.mock import Mock

import pytest

from messaging.bubble import MessageBubble, format_timestamp
from messaging.catalog import default_catalog
from messaging.models import Catalog, EmojiCategory, Message, Reaction


@pytest.fixture
def message(now):
    return Message(
        id="m1",
        chat_id="c1",
        text="Hello",
        sender="user",
        timestamp=now,
        status="delivered",
    )


@pytest.fixture
def handlers():
    return {
        "on_react": Mock(),
        "on_pin": Mock(),
        "on_reply": Mock(),
        "on_remove_reaction": Mock(),
    }


@pytest.fixture
def bubble(message, handlers):
    return MessageBubble(message, **handlers)


class TestRendering:
    """Tests for derived display data."""

    def test_local_message_is_right_aligned_with_icon(self, bubble):
        """Test that a local message is right-aligned with a status icon."""
        assert bubble.alignment == "right"
        assert bubble.status_icon.glyph == "double_check"
        assert bubble.status_icon.tone == "muted"

    def test_remote_message_has_no_status_icon(self, message, handlers):
        """Test that a remote message has no status icon."""
        message.sender = "alice"
        bubble = MessageBubble(message, **handlers)

        assert bubble.alignment == "left"
        assert bubble.status_icon is None

    def test_unknown_status_has_no_icon(self, message, handlers):
        """Test unknown status has no icon."""
        message.status = "archived"
        assert MessageBubble(message, **handlers).status_icon is None

    def test_display_timestamp_uses_display_zone(self, message, handlers):
        """Test that the bubble renders the time in the zone it was given."""
        bubble = MessageBubble(
            message, display_tz=timezone(timedelta(hours=2)), **handlers
        )
        assert bubble.display_timestamp == "11:41"

    def test_display_timestamp_defaults_to_local_time(self, bubble, now):
        """Test that without a zone the bubble shows local wall-clock time."""
        assert bubble.display_timestamp == now.astimezone().strftime("%H:%M")

    def test_format_timestamp(self, now):
        """Test HH:MM rendering of a UTC instant."""
        assert format_timestamp(now, timezone.utc) == "09:41"
        assert format_timestamp(now, timezone(timedelta(hours=-5))) == "04:41"

    def test_indicators_follow_message(self, message, handlers):
        """Test that pin and reply indicators follow the message."""
        message.is_pinned = True
        message.reply_to = "m0"
        bubble = MessageBubble(message, **handlers)

        assert bubble.shows_pin_indicator
        assert bubble.shows_reply_indicator

    def test_reaction_summary(self, message, handlers, now):
        """Test the grouped reaction badges."""
        message.reactions = [
            Reaction(id="r1", emoji="👍", user_id="a", timestamp=now),
            Reaction(id="r2", emoji="❤️", user_id="b", timestamp=now),
            Reaction(id="r3", emoji="👍", user_id="c", timestamp=now),
        ]
        bubble = MessageBubble(message, **handlers)

        assert [(s.emoji, s.count) for s in bubble.reaction_summary] == [
            ("👍", 2),
            ("❤️", 1),
        ]

    def test_quick_reactions_are_first_six_common(self, bubble):
        """Test that the quick bar shows the first six common reactions."""
        assert bubble.quick_reactions == default_catalog().common_reactions[:6]
        assert len(bubble.quick_reactions) == 6


class TestHover:
    """Tests for hover-driven disclosure."""

    def test_pointer_enter_shows_actions(self, bubble):
        """Test that hovering shows the action bar."""
        bubble.pointer_enter()
        assert bubble.actions_visible

    def test_pointer_leave_closes_bar_and_picker(self, bubble):
        """Test that leaving closes the action bar and the picker."""
        bubble.pointer_enter()
        bubble.toggle_picker()
        assert bubble.picker_open

        bubble.pointer_leave()

        assert not bubble.actions_visible
        assert not bubble.picker_open

    def test_pointer_leave_keeps_pin_and_reply_indicators(self, message, handlers):
        """Test that leaving keeps the pin and reply indicators."""
        message.is_pinned = True
        message.reply_to = "m0"
        bubble = MessageBubble(message, **handlers)

        bubble.pointer_enter()
        bubble.pointer_leave()

        assert bubble.shows_pin_indicator
        assert bubble.shows_reply_indicator


class TestPicker:
    """Tests for the category picker."""

    def test_default_category_is_smileys(self, bubble):
        """Test that the picker opens on the smileys tab."""
        assert bubble.selected_category == "smileys"
        assert "😊" in bubble.visible_emojis

    def test_select_category_switches_grid(self, bubble):
        """Test that selecting a tab switches the emoji grid."""
        bubble.select_category("objects")
        assert bubble.visible_emojis == default_catalog().emoji_categories[
            "objects"
        ].emojis

    def test_select_unknown_category_raises(self, bubble):
        """Test that selecting an unknown tab raises KeyError."""
        with pytest.raises(KeyError):
            bubble.select_category("flags")

    def test_categories_lists_tabs(self, bubble):
        """Test the picker tab labels."""
        assert bubble.categories == [
            ("smileys", "Smileys"),
            ("reactions", "Reactions"),
            ("objects", "Objects"),
        ]

    def test_injected_catalog_without_smileys(self, message, handlers):
        """Test a catalog without a smileys category."""
        catalog = Catalog(
            emoji_categories={"work": EmojiCategory(name="Work", emojis=["📚"])},
            common_reactions=["👍"],
        )
        bubble = MessageBubble(message, catalog=catalog, **handlers)

        assert bubble.selected_category == "work"
        assert bubble.quick_reactions == ["👍"]


class TestIntents:
    """Tests for emitted intents."""

    def test_react_emits_and_closes_picker(self, bubble, handlers):
        """Test that reacting emits the intent and closes the picker."""
        bubble.toggle_picker()
        bubble.react("🎉")

        handlers["on_react"].assert_called_once_with("m1", "🎉")
        assert not bubble.picker_open

    def test_quick_bar_and_picker_share_contract(self, bubble, handlers):
        """Test that the quick bar and the picker emit the same intent."""
        bubble.react(bubble.quick_reactions[0])
        bubble.select_category("reactions")
        bubble.react(bubble.visible_emojis[-1])

        assert handlers["on_react"].call_count == 2
        assert handlers["on_react"].call_args_list[0].args == ("m1", "👍")
        assert handlers["on_react"].call_args_list[1].args == ("m1", "🙏")

    def test_pin_and_reply_forward_id(self, bubble, handlers):
        """Test that pin and reply forward the message id."""
        bubble.pin()
        bubble.reply()

        handlers["on_pin"].assert_called_once_with("m1")
        handlers["on_reply"].assert_called_once_with("m1")
        assert bubble.message.is_pinned is False

    def test_remove_reaction(self, bubble, handlers):
        """Test removing a reaction."""
        bubble.remove_reaction("r9")
        handlers["on_remove_reaction"].assert_called_once_with("m1", "r9")

    def test_remove_reaction_without_handler_is_noop(self, message):
        """Test removing a reaction without a handler does nothing."""
        bubble = MessageBubble(message, on_react=Mock(), on_pin=Mock(), on_reply=Mock())
        bubble.remove_reaction("r9")
