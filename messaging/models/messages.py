"""Message-related data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

LOCAL_SENDER = "user"


class MessageStatus(str, Enum):
    """Delivery status of an outgoing message."""

    SENT = "sent"
    DELIVERED = "delivered"
    READ = "read"


class AttachmentKind(str, Enum):
    """Attachment category derived from the file's MIME type."""

    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"


@dataclass
class Blob:
    """Opaque binary content picked from disk or recorded from a device."""

    data: bytes
    mime_type: str = ""
    name: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class Attachment:
    """An attachment sent with a message (image, video, document, audio)."""

    kind: str  # AttachmentKind value, or "audio" for voice messages
    name: str
    size: int
    mime_type: str = ""
    url: str | None = None


@dataclass
class Reaction:
    """An emoji annotation left on a message by a participant."""

    id: str
    emoji: str
    user_id: str
    timestamp: datetime


@dataclass
class Message:
    """A single message in a chat."""

    id: str
    chat_id: str
    text: str
    sender: str  # LOCAL_SENDER or a remote participant id
    timestamp: datetime
    status: MessageStatus | str = MessageStatus.SENT
    is_pinned: bool = False
    reply_to: str | None = None
    reactions: list[Reaction] = field(default_factory=list)
    attachment: Attachment | None = None

    @property
    def is_local(self) -> bool:
        return self.sender == LOCAL_SENDER
