"""Conversion of domain objects to JSON-ready dicts."""

from enum import Enum

from fastapi import HTTPException

from ..bubble import aggregate_reactions, format_timestamp, status_indicator
from ..models import Chat, ChatMember, Message


def _value(item):
    return item.value if isinstance(item, Enum) else item


def member_to_dict(member: ChatMember) -> dict:
    return {
        "id": member.id,
        "name": member.name,
        "avatar": member.avatar,
        "role": member.role,
    }


def chat_to_dict(chat: Chat) -> dict:
    return {
        "id": chat.id,
        "name": chat.name,
        "type": _value(chat.type),
        "avatar": chat.avatar,
        "status": _value(chat.status),
        "last_message": chat.last_message,
        "last_seen": chat.last_seen,
        "unread_count": chat.unread_count,
        "is_muted": chat.is_muted,
        "is_archived": chat.is_archived,
        "members": [member_to_dict(m) for m in chat.members],
    }


def message_to_dict(message: Message) -> dict:
    """
    Message fields plus the derived display data a bubble needs.

    Timestamps stay datetimes; the route response models serialize them.
    """
    icon = status_indicator(message.status) if message.is_local else None
    attachment = message.attachment
    return {
        "id": message.id,
        "chat_id": message.chat_id,
        "text": message.text,
        "sender": message.sender,
        "timestamp": message.timestamp,
        "display_time": format_timestamp(message.timestamp),
        "status": _value(message.status),
        "status_icon": (
            {"glyph": icon.glyph, "tone": icon.tone} if icon is not None else None
        ),
        "is_pinned": message.is_pinned,
        "reply_to": message.reply_to,
        "reactions": [
            {
                "id": r.id,
                "emoji": r.emoji,
                "user_id": r.user_id,
                "timestamp": r.timestamp,
            }
            for r in message.reactions
        ],
        "reaction_summary": [
            {"emoji": s.emoji, "count": s.count}
            for s in aggregate_reactions(message.reactions)
        ],
        "attachment": (
            {
                "kind": attachment.kind,
                "name": attachment.name,
                "size": attachment.size,
                "mime_type": attachment.mime_type,
                "url": attachment.url,
            }
            if attachment is not None
            else None
        ),
    }


def to_http_error(e: Exception) -> HTTPException:
    """Map service errors to HTTP status codes."""
    if isinstance(e, HTTPException):
        return e
    if isinstance(e, LookupError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, ValueError):
        return HTTPException(status_code=400, detail=str(e))
    return HTTPException(status_code=500, detail=str(e))
