"""Core data models for Connect messaging."""

from .catalog import Catalog, EmojiCategory, QuickReply
from .chats import Chat, ChatFilter, ChatMember, ChatType, PresenceStatus
from .events import BusMessage, Topic
from .messages import (
    LOCAL_SENDER,
    Attachment,
    AttachmentKind,
    Blob,
    Message,
    MessageStatus,
    Reaction,
)
from .tracing import TraceEvent

__all__ = [
    # Messages
    "LOCAL_SENDER",
    "Message",
    "MessageStatus",
    "Reaction",
    "Attachment",
    "AttachmentKind",
    "Blob",
    # Chats
    "Chat",
    "ChatFilter",
    "ChatMember",
    "ChatType",
    "PresenceStatus",
    # Catalog
    "Catalog",
    "EmojiCategory",
    "QuickReply",
    # Events
    "BusMessage",
    "Topic",
    # Tracing
    "TraceEvent",
]
