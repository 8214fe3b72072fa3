"""Composer module."""

from .attachments import ACCEPT_FILTERS, DEFAULT_ACCEPT, classify_attachment
from .composer import Composer
from .recorder import (
    ICaptureDevice,
    ICaptureStream,
    RecorderState,
    RecordingError,
    VoiceRecorder,
)

__all__ = [
    "ACCEPT_FILTERS",
    "DEFAULT_ACCEPT",
    "classify_attachment",
    "Composer",
    "ICaptureDevice",
    "ICaptureStream",
    "RecorderState",
    "RecordingError",
    "VoiceRecorder",
]
