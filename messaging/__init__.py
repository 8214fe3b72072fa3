"""Connect messaging: chats, composer, message bubbles and their owner."""

from .app import Application, IApplication
from .bubble import MessageBubble, aggregate_reactions, status_indicator
from .chat_list import ChatList, filter_chats, presence_color
from .composer import Composer, VoiceRecorder, classify_attachment
from .conversation import IMessagingService, MessagingService, ReceiptSimulator
from .event_bus import EventBus, IEventBus
from .models import (
    Attachment,
    AttachmentKind,
    Blob,
    BusMessage,
    Catalog,
    Chat,
    ChatFilter,
    ChatMember,
    ChatType,
    EmojiCategory,
    Message,
    MessageStatus,
    PresenceStatus,
    QuickReply,
    Reaction,
    Topic,
    TraceEvent,
)
from .storage import IStorage, Storage
from .tracker import ITracker, Tracker

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "Attachment",
    "AttachmentKind",
    "Blob",
    "BusMessage",
    "Catalog",
    "Chat",
    "ChatFilter",
    "ChatMember",
    "ChatType",
    "EmojiCategory",
    "Message",
    "MessageStatus",
    "PresenceStatus",
    "QuickReply",
    "Reaction",
    "Topic",
    "TraceEvent",
    # Components
    "MessageBubble",
    "aggregate_reactions",
    "status_indicator",
    "ChatList",
    "filter_chats",
    "presence_color",
    "Composer",
    "VoiceRecorder",
    "classify_attachment",
    "IMessagingService",
    "MessagingService",
    "ReceiptSimulator",
    "IEventBus",
    "EventBus",
    "IStorage",
    "Storage",
    "ITracker",
    "Tracker",
]
