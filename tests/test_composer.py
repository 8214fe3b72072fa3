"""Tests for the Composer."""

from unittest.mock import Mock

import pytest

from messaging.composer import (
    ACCEPT_FILTERS,
    DEFAULT_ACCEPT,
    Composer,
    classify_attachment,
)
from messaging.models import AttachmentKind, Blob, QuickReply


@pytest.fixture
def handlers():
    return {
        "on_send": Mock(),
        "on_attach": Mock(),
        "on_voice_message": Mock(),
        "on_input_change": Mock(),
        "open_file_picker": Mock(),
    }


@pytest.fixture
def composer(handlers, capture_device):
    return Composer(capture_device=capture_device, **handlers)


class TestSend:
    """Tests for send gating and keyboard handling."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_input_cannot_send(self, composer, handlers, text):
        """Test that blank input cannot be sent."""
        composer.set_input(text)

        assert not composer.can_send
        assert composer.send() is False
        handlers["on_send"].assert_not_called()

    def test_send_emits_raw_input_without_clearing(self, composer, handlers):
        """Test that send emits the raw input and leaves the buffer."""
        composer.set_input("  hi  ")

        assert composer.send() is True
        handlers["on_send"].assert_called_once_with("  hi  ")
        assert composer.input == "  hi  "

    def test_enter_sends(self, composer, handlers):
        """Test that Enter sends."""
        composer.set_input("hello")

        assert composer.handle_key("Enter") is True
        handlers["on_send"].assert_called_once_with("hello")

    def test_enter_on_blank_input_is_consumed_without_sending(self, composer, handlers):
        """Test that Enter on blank input is consumed without sending."""
        composer.set_input("   ")

        assert composer.handle_key("Enter") is True
        handlers["on_send"].assert_not_called()

    def test_shift_enter_is_left_to_caller(self, composer, handlers):
        """Test that Shift+Enter is left to the caller."""
        composer.set_input("line one")

        assert composer.handle_key("Enter", shift=True) is False
        handlers["on_send"].assert_not_called()

    def test_other_keys_pass_through(self, composer):
        """Test that other keys pass through."""
        assert composer.handle_key("a") is False

    def test_set_input_notifies(self, composer, handlers):
        """Test that input changes are reported."""
        composer.set_input("typing")
        handlers["on_input_change"].assert_called_once_with("typing")

    def test_initial_input(self, handlers, capture_device):
        """Test an initial draft."""
        composer = Composer(
            capture_device=capture_device, initial_input="draft", **handlers
        )
        assert composer.can_send


class TestQuickReplies:
    """Tests for the quick-reply menu."""

    def test_default_replies_from_catalog(self, composer):
        """Test that quick replies default to the catalog."""
        assert composer.quick_replies[0].text == "Hey! How are you?"

    def test_choose_fills_buffer_without_sending(self, composer, handlers):
        """Test that a quick reply fills the buffer without sending."""
        composer.toggle_quick_replies()
        assert composer.quick_replies_open

        composer.choose_quick_reply(QuickReply(text="Thanks!", icon="🙏"))

        assert composer.input == "Thanks!"
        assert not composer.quick_replies_open
        handlers["on_send"].assert_not_called()
        handlers["on_input_change"].assert_called_once_with("Thanks!")

    def test_custom_replies(self, handlers, capture_device):
        """Test injected quick replies."""
        replies = [QuickReply(text="On my way")]
        composer = Composer(
            capture_device=capture_device, quick_replies=replies, **handlers
        )
        assert composer.quick_replies == replies


class TestAttachments:
    """Tests for the attach menu and file selection."""

    @pytest.mark.parametrize(
        "mime, kind",
        [
            ("image/png", AttachmentKind.IMAGE),
            ("video/mp4", AttachmentKind.VIDEO),
            ("application/pdf", AttachmentKind.DOCUMENT),
            ("IMAGE/JPEG", AttachmentKind.IMAGE),
            ("", AttachmentKind.DOCUMENT),
            (None, AttachmentKind.DOCUMENT),
            ("audio/mpeg", AttachmentKind.DOCUMENT),
        ],
    )
    def test_classify_attachment(self, mime, kind):
        """Test classification by MIME prefix."""
        assert classify_attachment(mime) is kind

    @pytest.mark.parametrize(
        "mime, kind",
        [
            ("image/png", AttachmentKind.IMAGE),
            ("video/mp4", AttachmentKind.VIDEO),
            ("application/pdf", AttachmentKind.DOCUMENT),
        ],
    )
    def test_select_file_emits_kind_and_closes_menu(
        self, composer, handlers, mime, kind
    ):
        """Test that a picked file is emitted with its kind."""
        blob = Blob(data=b"x", mime_type=mime, name="file")
        composer.toggle_attach_menu()

        assert composer.select_file(blob) is kind
        handlers["on_attach"].assert_called_once_with(kind, blob)
        assert not composer.attach_menu_open

    def test_cancelled_picker_is_noop(self, composer, handlers):
        """Test that a cancelled picker does nothing."""
        composer.toggle_attach_menu()

        assert composer.select_file(None) is None
        handlers["on_attach"].assert_not_called()
        assert composer.attach_menu_open

    def test_choose_kind_narrows_picker(self, composer, handlers):
        """Test that choosing a kind narrows the picker filter."""
        assert composer.file_accept == DEFAULT_ACCEPT

        accept = composer.choose_attachment_kind("document")

        assert accept == ACCEPT_FILTERS[AttachmentKind.DOCUMENT]
        handlers["open_file_picker"].assert_called_once_with(accept)

    def test_narrowed_picker_still_classifies_by_mime(self, composer, handlers):
        """Test that a narrowed picker still classifies by MIME type."""
        composer.choose_attachment_kind(AttachmentKind.IMAGE)

        kind = composer.select_file(Blob(data=b"%PDF", mime_type="application/pdf"))

        assert kind is AttachmentKind.DOCUMENT


class TestVoice:
    """Tests for the mic button."""

    async def test_toggle_records_and_sends(self, composer, handlers, capture_device):
        """Test that the mic button records and sends."""
        await composer.toggle_recording()
        assert composer.is_recording

        composer.recorder.push_chunk(b"abc")
        await composer.toggle_recording()

        assert not composer.is_recording
        blob = handlers["on_voice_message"].call_args.args[0]
        assert blob.data == b"abc"
        assert capture_device.open_streams == []

    async def test_recording_error_is_forwarded(self, handlers, denied_capture_device):
        """Test that a recording error reaches the owner."""
        on_error = Mock()
        composer = Composer(
            capture_device=denied_capture_device,
            on_recording_error=on_error,
            **handlers,
        )

        error = await composer.start_recording()

        assert error is not None
        on_error.assert_called_once_with(error)
        assert not composer.is_recording
