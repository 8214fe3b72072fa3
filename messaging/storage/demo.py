"""Demo conversations used to seed a fresh store."""

from datetime import datetime, timedelta, timezone

from ..models import (
    LOCAL_SENDER,
    Chat,
    ChatMember,
    ChatType,
    Message,
    MessageStatus,
    PresenceStatus,
    Reaction,
)


def demo_directory() -> list[ChatMember]:
    """People that can be picked in the new-message and group dialogs."""
    return [
        ChatMember(id="1", name="Alice Johnson", role="user"),
        ChatMember(id="2", name="Bob Smith", role="user"),
        ChatMember(id="3", name="Carol White", role="user"),
        ChatMember(id="4", name="David Brown", role="user"),
    ]


def demo_chats() -> list[Chat]:
    return [
        Chat(
            id="1",
            type=ChatType.DIRECT,
            name="Priya Raman",
            last_message="Hey! Did you submit the lab report?",
            status=PresenceStatus.ONLINE,
            last_seen="now",
        ),
        Chat(
            id="2",
            type=ChatType.DIRECT,
            name="Dr. Marcus Lee",
            last_message="Let's meet tomorrow",
            status=PresenceStatus.OFFLINE,
            last_seen="2 hours ago",
            unread_count=2,
            is_muted=True,
        ),
        Chat(
            id="3",
            type=ChatType.GROUP,
            name="Project Team",
            last_message="Did you see the update?",
            status=PresenceStatus.ONLINE,
            last_seen="now",
            unread_count=5,
            members=[
                ChatMember(id="1", name="Alice Johnson", role="admin"),
                ChatMember(id="2", name="John Doe", role="member"),
            ],
        ),
    ]


def demo_messages(now: datetime | None = None) -> list[Message]:
    """Opening messages of the first demo chat."""
    now = now or datetime.now(timezone.utc)
    return [
        Message(
            id="1",
            chat_id="1",
            text="Hey! How's it going?",
            sender="priya",
            timestamp=now - timedelta(minutes=4),
            status=MessageStatus.READ,
        ),
        Message(
            id="2",
            chat_id="1",
            text="I'm doing great! Just finished the project we discussed.",
            sender=LOCAL_SENDER,
            timestamp=now - timedelta(minutes=3),
            status=MessageStatus.READ,
            reactions=[
                Reaction(id="r1", emoji="👍", user_id="priya", timestamp=now),
            ],
        ),
        Message(
            id="3",
            chat_id="1",
            text="That's awesome! Would you like to discuss the results over coffee?",
            sender="priya",
            timestamp=now,
            status=MessageStatus.READ,
            is_pinned=True,
        ),
    ]
