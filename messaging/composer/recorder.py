"""Voice message capture."""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol

from ..logging_config import get_logger
from ..models import Blob

logger = get_logger(__name__)

VOICE_MIME_TYPE = "audio/webm"
VOICE_FILE_NAME = "voice-message.webm"


class RecorderState(str, Enum):
    """Recording lifecycle."""

    IDLE = "idle"
    ACQUIRING = "acquiring"
    RECORDING = "recording"


class ICaptureStream(Protocol):
    """An open microphone stream."""

    def stop(self) -> None:
        """Stop all tracks and release the device."""
        ...


class ICaptureDevice(Protocol):
    """Source of microphone streams (asks the OS for permission)."""

    async def acquire(self) -> ICaptureStream:
        """Open a stream. Raises if the device is unavailable or denied."""
        ...


@dataclass
class RecordingError:
    """Why a recording could not start."""

    message: str
    cause: Exception | None = None


VoiceMessageHandler = Callable[[Blob], None]
RecordingErrorHandler = Callable[[RecordingError], None]


class VoiceRecorder:
    """
    Records one voice message at a time.

    ``idle -> acquiring -> recording -> idle``. Only one capture stream is
    ever held; start() outside ``idle`` and stop() outside ``recording``
    are no-ops.
    """

    def __init__(
        self,
        capture_device: ICaptureDevice,
        on_voice_message: VoiceMessageHandler,
        on_error: RecordingErrorHandler | None = None,
        mime_type: str = VOICE_MIME_TYPE,
    ):
        self._device = capture_device
        self._on_voice_message = on_voice_message
        self._on_error = on_error
        self._mime_type = mime_type

        self.state = RecorderState.IDLE
        self.last_error: RecordingError | None = None
        self._stream: ICaptureStream | None = None
        self._chunks: list[bytes] = []
        self._cancel_requested = False

    @property
    def is_recording(self) -> bool:
        return self.state is RecorderState.RECORDING

    async def start(self) -> RecordingError | None:
        """Acquire the microphone and begin buffering. Returns the error on failure."""
        if self.state is not RecorderState.IDLE:
            logger.debug("start() ignored in state %s", self.state.value)
            return None

        self.state = RecorderState.ACQUIRING
        self._cancel_requested = False
        self.last_error = None

        try:
            stream = await self._device.acquire()
        except asyncio.CancelledError:
            self.state = RecorderState.IDLE
            raise
        except Exception as e:
            self.state = RecorderState.IDLE
            error = RecordingError(message=f"Failed to start recording: {e}", cause=e)
            self.last_error = error
            logger.warning("Failed to start recording: %s", e)
            if self._on_error is not None:
                self._on_error(error)
            return error

        if self._cancel_requested:
            # stop() arrived while the device was being acquired
            self._cancel_requested = False
            self.state = RecorderState.IDLE
            stream.stop()
            logger.info("Recording cancelled before it started")
            return None

        self._stream = stream
        self._chunks = []
        self.state = RecorderState.RECORDING
        logger.info("Recording started")
        return None

    def push_chunk(self, data: bytes) -> None:
        """Buffer a chunk of captured audio. Empty chunks are dropped."""
        if self.state is not RecorderState.RECORDING or not data:
            return
        self._chunks.append(data)

    def stop(self) -> Blob | None:
        """Finish the recording, release the stream and emit the voice message."""
        if self.state is RecorderState.ACQUIRING:
            self._cancel_requested = True
            return None
        if self.state is not RecorderState.RECORDING:
            return None

        stream = self._stream
        blob = Blob(
            data=b"".join(self._chunks),
            mime_type=self._mime_type,
            name=VOICE_FILE_NAME,
        )
        self._stream = None
        self._chunks = []
        self.state = RecorderState.IDLE

        try:
            self._on_voice_message(blob)
        finally:
            if stream is not None:
                stream.stop()

        logger.info("Recording stopped (%d bytes)", blob.size)
        return blob
