"""Chat list filtering, search and presence colors."""

from ..models import Chat, ChatFilter, ChatType, PresenceStatus


def matches_filter(chat: Chat, chat_filter: ChatFilter | str) -> bool:
    """unread -> unread_count > 0, all -> everything, otherwise exact type match."""
    value = chat_filter.value if isinstance(chat_filter, ChatFilter) else chat_filter
    if value == ChatFilter.UNREAD.value:
        return chat.unread_count > 0
    if value == ChatFilter.ALL.value:
        return True
    chat_type = chat.type.value if isinstance(chat.type, ChatType) else chat.type
    return chat_type == value


def matches_search(chat: Chat, query: str) -> bool:
    """Case-insensitive substring match on the chat name or its last message."""
    needle = query.lower()
    return needle in chat.name.lower() or needle in chat.last_message.lower()


def filter_chats(
    chats: list[Chat],
    chat_filter: ChatFilter | str = ChatFilter.ALL,
    query: str = "",
) -> list[Chat]:
    """Apply the type/unread filter, then the search. Input order is kept."""
    return [
        chat
        for chat in chats
        if matches_filter(chat, chat_filter) and matches_search(chat, query)
    ]


def presence_color(status: PresenceStatus | str) -> str:
    """Color of the presence dot: green online, blue typing, gray otherwise."""
    value = status.value if isinstance(status, PresenceStatus) else status
    if value == PresenceStatus.ONLINE.value:
        return "green"
    if value == PresenceStatus.TYPING.value:
        return "blue"
    return "gray"
