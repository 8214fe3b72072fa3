"""Chat-related data models."""

from dataclasses import dataclass, field
from enum import Enum


class ChatType(str, Enum):
    """Kind of conversation."""

    DIRECT = "direct"
    GROUP = "group"


class PresenceStatus(str, Enum):
    """Presence of the remote side of a chat."""

    ONLINE = "online"
    TYPING = "typing"
    OFFLINE = "offline"


class ChatFilter(str, Enum):
    """Filters offered above the chat list."""

    ALL = "all"
    DIRECT = "direct"
    GROUP = "group"
    UNREAD = "unread"


@dataclass
class ChatMember:
    """A participant of a chat, also used as a directory entry."""

    id: str
    name: str
    avatar: str = ""
    role: str = "member"


@dataclass
class Chat:
    """A direct or group conversation."""

    id: str
    name: str
    type: ChatType | str
    avatar: str = ""
    status: PresenceStatus | str = PresenceStatus.OFFLINE
    last_message: str = ""
    last_seen: str = ""
    unread_count: int = 0
    is_muted: bool = False
    is_archived: bool = False
    members: list[ChatMember] = field(default_factory=list)
