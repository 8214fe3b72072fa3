"""In-memory storage implementation."""

from collections import deque
from datetime import datetime, timezone
from typing import Protocol

from ..models import BusMessage, Chat, Message, TraceEvent

# Journal entries kept in memory; the oldest are dropped first
JOURNAL_LIMIT = 10_000


def _as_utc(value: datetime) -> datetime:
    """Treat timestamps without an offset as UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


class IStorage(Protocol):
    """Client-side store for chats, messages and observability data."""

    async def init(self) -> None:
        """Prepare the store."""
        ...

    async def close(self) -> None:
        """Release the store."""
        ...

    # Chats
    async def save_chat(self, chat: Chat) -> None:
        """Insert or replace a chat."""
        ...

    async def get_chat(self, chat_id: str) -> Chat | None:
        """Get a chat by ID."""
        ...

    async def list_chats(self) -> list[Chat]:
        """Get all chats in insertion order."""
        ...

    async def delete_chat(self, chat_id: str) -> bool:
        """Delete a chat and its messages. Returns whether it existed."""
        ...

    # Messages
    async def save_message(self, message: Message) -> None:
        """Append a message, or replace it in place if the ID exists."""
        ...

    async def get_message(self, chat_id: str, message_id: str) -> Message | None:
        """Get one message of a chat."""
        ...

    async def get_messages(
        self, chat_id: str, after: datetime | None = None
    ) -> list[Message]:
        """Get messages of a chat in append order, optionally after a timestamp."""
        ...

    # TraceEvents
    async def save_trace_event(self, event: TraceEvent) -> None:
        """Save a trace event."""
        ...

    async def get_trace_events(
        self,
        after: datetime | None = None,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        """Get trace events with optional filters (newest first)."""
        ...

    # BusMessages
    async def save_bus_message(self, message: BusMessage) -> None:
        """Save a bus message."""
        ...

    async def get_bus_messages(self, limit: int = 100) -> list[BusMessage]:
        """Get bus messages (newest first)."""
        ...

    # Lifecycle
    async def clear(self) -> None:
        """Clear all data."""
        ...


class Storage:
    """Dict-backed storage living in the client process."""

    def __init__(self, journal_limit: int = JOURNAL_LIMIT) -> None:
        self._ready = False
        self._chats: dict[str, Chat] = {}
        self._messages: dict[str, list[Message]] = {}
        self._trace_events: deque[TraceEvent] = deque(maxlen=journal_limit)
        self._bus_messages: deque[BusMessage] = deque(maxlen=journal_limit)

    async def init(self) -> None:
        """Prepare the store."""
        self._ready = True

    async def close(self) -> None:
        """Release the store."""
        self._ready = False

    def _check(self) -> None:
        if not self._ready:
            raise RuntimeError("Storage not initialized")

    # Chats
    async def save_chat(self, chat: Chat) -> None:
        """Insert or replace a chat."""
        self._check()
        self._chats[chat.id] = chat
        self._messages.setdefault(chat.id, [])

    async def get_chat(self, chat_id: str) -> Chat | None:
        """Get a chat by ID."""
        self._check()
        return self._chats.get(chat_id)

    async def list_chats(self) -> list[Chat]:
        """Get all chats in insertion order."""
        self._check()
        return list(self._chats.values())

    async def delete_chat(self, chat_id: str) -> bool:
        """Delete a chat and its messages."""
        self._check()
        self._messages.pop(chat_id, None)
        return self._chats.pop(chat_id, None) is not None

    # Messages
    async def save_message(self, message: Message) -> None:
        """Append a message, or replace it in place if the ID exists."""
        self._check()
        messages = self._messages.setdefault(message.chat_id, [])
        for i, existing in enumerate(messages):
            if existing.id == message.id:
                messages[i] = message
                return
        messages.append(message)

    async def get_message(self, chat_id: str, message_id: str) -> Message | None:
        """Get one message of a chat."""
        self._check()
        for message in self._messages.get(chat_id, []):
            if message.id == message_id:
                return message
        return None

    async def get_messages(
        self, chat_id: str, after: datetime | None = None
    ) -> list[Message]:
        """Get messages of a chat in append order, optionally after a timestamp."""
        self._check()
        messages = self._messages.get(chat_id, [])
        if after is None:
            return list(messages)
        after = _as_utc(after)
        return [msg for msg in messages if msg.timestamp > after]

    # TraceEvents
    async def save_trace_event(self, event: TraceEvent) -> None:
        """Save a trace event."""
        self._check()
        self._trace_events.append(event)

    async def get_trace_events(
        self,
        after: datetime | None = None,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        """Get trace events with optional filters (newest first)."""
        self._check()
        if after is not None:
            after = _as_utc(after)
        events = [
            e
            for e in self._trace_events
            if (after is None or e.timestamp > after)
            and (not event_types or e.event_type in event_types)
            and (actor is None or e.actor == actor)
        ]
        events.sort(key=lambda e: e.timestamp, reverse=True)
        return events[:limit]

    # BusMessages
    async def save_bus_message(self, message: BusMessage) -> None:
        """Save a bus message."""
        self._check()
        self._bus_messages.append(message)

    async def get_bus_messages(self, limit: int = 100) -> list[BusMessage]:
        """Get bus messages (newest first)."""
        self._check()
        messages = sorted(self._bus_messages, key=lambda m: m.timestamp, reverse=True)
        return messages[:limit]

    # Lifecycle
    async def clear(self) -> None:
        """Clear all data."""
        self._check()
        self._chats.clear()
        self._messages.clear()
        self._trace_events.clear()
        self._bus_messages.clear()
