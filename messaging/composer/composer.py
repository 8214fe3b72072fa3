"""Composer (message input) view model."""

from typing import Callable

from ..catalog import default_catalog
from ..logging_config import get_logger
from ..models import AttachmentKind, Blob, QuickReply
from .attachments import ACCEPT_FILTERS, DEFAULT_ACCEPT, classify_attachment
from .recorder import (
    ICaptureDevice,
    RecordingError,
    RecordingErrorHandler,
    VoiceMessageHandler,
    VoiceRecorder,
)

logger = get_logger(__name__)

SendHandler = Callable[[str], None]
AttachHandler = Callable[[AttachmentKind, Blob], None]
InputChangeHandler = Callable[[str], None]
FilePickerHandler = Callable[[str], None]


class Composer:
    """
    Collects the next contribution to the active chat.

    Emits one of four intents: send text, attach a file, send a voice
    message, or fill the buffer from a quick reply. The composer never
    clears its own buffer after sending; the owner does that with
    ``set_input("")``.
    """

    def __init__(
        self,
        on_send: SendHandler,
        on_attach: AttachHandler,
        on_voice_message: VoiceMessageHandler,
        capture_device: ICaptureDevice,
        quick_replies: list[QuickReply] | None = None,
        on_input_change: InputChangeHandler | None = None,
        open_file_picker: FilePickerHandler | None = None,
        on_recording_error: RecordingErrorHandler | None = None,
        initial_input: str = "",
    ):
        self._on_send = on_send
        self._on_attach = on_attach
        self._on_input_change = on_input_change
        self._open_file_picker = open_file_picker
        self.quick_replies = (
            quick_replies
            if quick_replies is not None
            else default_catalog().quick_replies
        )
        self.recorder = VoiceRecorder(
            capture_device,
            on_voice_message=on_voice_message,
            on_error=on_recording_error,
        )

        self.input = initial_input
        self.attach_menu_open = False
        self.quick_replies_open = False
        self.file_accept = DEFAULT_ACCEPT

    # Text

    def set_input(self, text: str) -> None:
        self.input = text
        if self._on_input_change is not None:
            self._on_input_change(text)

    @property
    def can_send(self) -> bool:
        return bool(self.input.strip())

    def send(self) -> bool:
        """Emit the send intent if there is text. Returns whether it fired."""
        if not self.can_send:
            return False
        self._on_send(self.input)
        return True

    def handle_key(self, key: str, shift: bool = False) -> bool:
        """
        Handle a key press in the text area.

        Returns True when the key was consumed. Enter without Shift submits
        instead of inserting a newline; everything else is left to the caller.
        """
        if key == "Enter" and not shift:
            self.send()
            return True
        return False

    # Quick replies

    def toggle_quick_replies(self) -> None:
        self.quick_replies_open = not self.quick_replies_open

    def choose_quick_reply(self, reply: QuickReply) -> None:
        """Put a canned phrase in the buffer. Does not send it."""
        self.set_input(reply.text)
        self.quick_replies_open = False

    # Attachments

    def toggle_attach_menu(self) -> None:
        self.attach_menu_open = not self.attach_menu_open

    def choose_attachment_kind(self, kind: AttachmentKind | str) -> str:
        """Narrow the picker to one kind of file and open it."""
        self.file_accept = ACCEPT_FILTERS[AttachmentKind(kind)]
        if self._open_file_picker is not None:
            self._open_file_picker(self.file_accept)
        return self.file_accept

    def select_file(self, file: Blob | None) -> AttachmentKind | None:
        """Forward a picked file to the owner. None means the picker was cancelled."""
        if file is None:
            return None
        kind = classify_attachment(file.mime_type)
        logger.debug("Attaching %s file %s", kind.value, file.name)
        self._on_attach(kind, file)
        self.attach_menu_open = False
        return kind

    # Voice

    @property
    def is_recording(self) -> bool:
        return self.recorder.is_recording

    async def start_recording(self) -> RecordingError | None:
        return await self.recorder.start()

    def stop_recording(self) -> Blob | None:
        return self.recorder.stop()

    async def toggle_recording(self) -> None:
        """Mic button: start when idle, stop when recording."""
        if self.recorder.is_recording:
            self.stop_recording()
        else:
            await self.start_recording()
