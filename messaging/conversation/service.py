"""MessagingService: owner of chat and message state."""

import uuid
from datetime import datetime, timezone
from typing import Protocol

from ..bubble import can_transition
from ..chat_list import filter_chats
from ..composer import classify_attachment
from ..errors import ChatNotFoundError, EmptyMessageError, MessageNotFoundError
from ..event_bus import IEventBus
from ..logging_config import get_logger
from ..models import (
    LOCAL_SENDER,
    Attachment,
    AttachmentKind,
    Blob,
    BusMessage,
    Chat,
    ChatFilter,
    ChatMember,
    ChatType,
    Message,
    MessageStatus,
    PresenceStatus,
    Reaction,
    Topic,
)
from ..storage import IStorage
from ..tracker import ITracker
from .receipts import ReceiptSimulator

logger = get_logger(__name__)

LOCAL_USER_ID = "current-user"
VOICE_PREVIEW = "🎤 Voice message"


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


class IMessagingService(Protocol):
    """Owns chats and messages; every UI intent ends up here."""

    async def list_chats(
        self, chat_filter: ChatFilter | str = ChatFilter.ALL, query: str = ""
    ) -> list[Chat]:
        """Chats after the list filter and search."""
        ...

    async def open_chat(self, chat_id: str) -> Chat:
        """Make a chat the active one and reset its unread count."""
        ...

    async def send_message(
        self, chat_id: str, text: str, reply_to: str | None = None
    ) -> Message:
        """Append an outgoing text message."""
        ...

    async def add_reaction(
        self, chat_id: str, message_id: str, emoji: str, user_id: str | None = None
    ) -> Reaction:
        """Add a reaction to a message."""
        ...

    async def toggle_pin(self, chat_id: str, message_id: str) -> Message:
        """Flip the pinned flag of a message."""
        ...


class MessagingService:
    """Manages chats, messages, reactions and receipts."""

    def __init__(
        self,
        storage: IStorage,
        event_bus: IEventBus,
        tracker: ITracker,
        receipts: ReceiptSimulator | None = None,
        directory: list[ChatMember] | None = None,
        local_user_id: str = LOCAL_USER_ID,
    ):
        self._storage = storage
        self._event_bus = event_bus
        self._tracker = tracker
        self._receipts = receipts
        self.directory = directory or []
        self.local_user_id = local_user_id

        self._open_chat_id: str | None = None
        self._running = False

    @property
    def open_chat_id(self) -> str | None:
        return self._open_chat_id

    async def start(self) -> None:
        logger.info("Starting MessagingService")
        self._running = True

    async def stop(self) -> None:
        """Stop accepting intents and cancel pending receipts."""
        logger.info("Stopping MessagingService")
        self._running = False
        if self._receipts:
            await self._receipts.stop()

    def _check_running(self) -> None:
        if not self._running:
            raise RuntimeError("MessagingService not started")

    async def _publish(self, topic: Topic, payload: dict) -> None:
        await self._event_bus.publish(
            BusMessage(
                id=_new_id(),
                topic=topic,
                payload=payload,
                source="messaging_service",
                timestamp=_now(),
            )
        )

    # Chats

    async def get_chat(self, chat_id: str) -> Chat:
        self._check_running()
        chat = await self._storage.get_chat(chat_id)
        if chat is None:
            raise ChatNotFoundError(chat_id)
        return chat

    async def list_chats(
        self, chat_filter: ChatFilter | str = ChatFilter.ALL, query: str = ""
    ) -> list[Chat]:
        self._check_running()
        chats = await self._storage.list_chats()
        return filter_chats(chats, chat_filter, query)

    async def open_chat(self, chat_id: str) -> Chat:
        """Make a chat the active one and reset its unread count."""
        chat = await self.get_chat(chat_id)
        self._open_chat_id = chat_id
        if chat.unread_count:
            chat.unread_count = 0
            await self._storage.save_chat(chat)

        await self._tracker.track(
            event_type="chat_opened",
            actor="messaging_service",
            data={"chat_id": chat_id},
        )
        return chat

    def close_chat(self) -> None:
        self._open_chat_id = None

    async def create_chat(self, users: list[ChatMember]) -> Chat:
        """
        Start a conversation from the new-message dialog.

        One user gives a direct chat named after them; several give a group
        named after the first one. The new chat becomes the open chat.

        Raises:
            ValueError: If no users are given.
        """
        self._check_running()
        if not users:
            raise ValueError("At least one participant is required")

        if len(users) == 1:
            user = users[0]
            chat = Chat(
                id=_new_id(),
                type=ChatType.DIRECT,
                name=user.name,
                avatar=user.avatar,
                last_message="Start a conversation",
                status=PresenceStatus.OFFLINE,
                last_seen="Never",
            )
        else:
            first = users[0]
            chat = Chat(
                id=_new_id(),
                type=ChatType.GROUP,
                name=f"{first.name} and {len(users) - 1} others",
                avatar=first.avatar,
                last_message="Group created",
                status=PresenceStatus.ONLINE,
                last_seen="now",
                members=[
                    ChatMember(id=u.id, name=u.name, avatar=u.avatar, role="member")
                    for u in users
                ],
            )

        await self._storage.save_chat(chat)
        self._open_chat_id = chat.id
        await self._publish(
            Topic.CHAT,
            {"event": "created", "chat_id": chat.id, "type": chat.type.value},
        )
        logger.info("Chat created: %s (%s)", chat.name, chat.type.value)
        return chat

    async def create_group(self, name: str, member_ids: list[str]) -> Chat:
        """
        Create a named group from the group dialog.

        Raises:
            ValueError: If the name is blank or no members are given.
        """
        self._check_running()
        if not name.strip() or not member_ids:
            raise ValueError("A group needs a name and at least one member")

        known = {member.id: member for member in self.directory}
        members = []
        for member_id in member_ids:
            entry = known.get(member_id)
            members.append(
                ChatMember(
                    id=member_id,
                    name=entry.name if entry else "Member",
                    avatar=entry.avatar if entry else "",
                    role="admin" if member_id == self.local_user_id else "member",
                )
            )

        chat = Chat(
            id=_new_id(),
            type=ChatType.GROUP,
            name=name.strip(),
            last_message="Group created",
            status=PresenceStatus.ONLINE,
            last_seen="now",
            members=members,
        )
        await self._storage.save_chat(chat)
        await self._publish(
            Topic.CHAT, {"event": "created", "chat_id": chat.id, "type": "group"}
        )
        logger.info("Group created: %s with %d members", chat.name, len(members))
        return chat

    async def toggle_mute(self, chat_id: str) -> Chat:
        chat = await self.get_chat(chat_id)
        chat.is_muted = not chat.is_muted
        await self._storage.save_chat(chat)
        await self._publish(
            Topic.CHAT, {"event": "muted", "chat_id": chat_id, "value": chat.is_muted}
        )
        return chat

    async def toggle_archive(self, chat_id: str) -> Chat:
        chat = await self.get_chat(chat_id)
        chat.is_archived = not chat.is_archived
        await self._storage.save_chat(chat)
        await self._publish(
            Topic.CHAT,
            {"event": "archived", "chat_id": chat_id, "value": chat.is_archived},
        )
        return chat

    async def delete_chat(self, chat_id: str) -> None:
        await self.get_chat(chat_id)
        await self._storage.delete_chat(chat_id)
        if self._open_chat_id == chat_id:
            self._open_chat_id = None
        await self._publish(Topic.CHAT, {"event": "deleted", "chat_id": chat_id})
        logger.info("Chat deleted: %s", chat_id)

    async def set_typing(self, chat_id: str, is_typing: bool) -> Chat:
        """Typing indicator from the remote side."""
        chat = await self.get_chat(chat_id)
        chat.status = PresenceStatus.TYPING if is_typing else PresenceStatus.ONLINE
        await self._storage.save_chat(chat)
        return chat

    # Messages

    async def get_messages(self, chat_id: str) -> list[Message]:
        """Messages of a chat in append order."""
        await self.get_chat(chat_id)
        return await self._storage.get_messages(chat_id)

    async def get_message(self, chat_id: str, message_id: str) -> Message:
        await self.get_chat(chat_id)
        message = await self._storage.get_message(chat_id, message_id)
        if message is None:
            raise MessageNotFoundError(chat_id, message_id)
        return message

    async def send_message(
        self, chat_id: str, text: str, reply_to: str | None = None
    ) -> Message:
        """
        Append an outgoing text message.

        Raises:
            EmptyMessageError: If the text is blank.
            MessageNotFoundError: If reply_to does not name a message of the chat.
        """
        chat = await self.get_chat(chat_id)
        if not text.strip():
            raise EmptyMessageError("Message text is empty")
        if reply_to is not None:
            await self.get_message(chat_id, reply_to)

        message = Message(
            id=_new_id(),
            chat_id=chat_id,
            text=text,
            sender=LOCAL_SENDER,
            timestamp=_now(),
            status=MessageStatus.SENT,
            reply_to=reply_to,
        )
        await self._append_outgoing(chat, message, preview=text)
        return message

    async def send_attachment(
        self, chat_id: str, blob: Blob, kind: AttachmentKind | str | None = None
    ) -> Message:
        """Append an outgoing file message. The kind defaults to the MIME class."""
        chat = await self.get_chat(chat_id)
        kind = AttachmentKind(kind) if kind else classify_attachment(blob.mime_type)
        name = blob.name or "attachment"
        text = f"📎 {name}" if kind is AttachmentKind.DOCUMENT else ""

        message = Message(
            id=_new_id(),
            chat_id=chat_id,
            text=text,
            sender=LOCAL_SENDER,
            timestamp=_now(),
            status=MessageStatus.SENT,
            attachment=Attachment(
                kind=kind.value,
                name=name,
                size=blob.size,
                mime_type=blob.mime_type,
            ),
        )
        await self._append_outgoing(chat, message, preview=text or f"📎 {kind.value}")
        return message

    async def send_voice_message(self, chat_id: str, blob: Blob) -> Message:
        chat = await self.get_chat(chat_id)
        message = Message(
            id=_new_id(),
            chat_id=chat_id,
            text="",
            sender=LOCAL_SENDER,
            timestamp=_now(),
            status=MessageStatus.SENT,
            attachment=Attachment(
                kind="audio",
                name=blob.name or "voice-message",
                size=blob.size,
                mime_type=blob.mime_type,
            ),
        )
        await self._append_outgoing(chat, message, preview=VOICE_PREVIEW)
        return message

    async def _append_outgoing(
        self, chat: Chat, message: Message, preview: str
    ) -> None:
        await self._storage.save_message(message)
        chat.last_message = preview
        chat.last_seen = "now"
        await self._storage.save_chat(chat)

        await self._publish(
            Topic.MESSAGE,
            {
                "event": "sent",
                "chat_id": chat.id,
                "message_id": message.id,
                "text": message.text,
            },
        )
        await self._tracker.track(
            event_type="message_sent",
            actor="messaging_service",
            data={
                "chat_id": chat.id,
                "message_id": message.id,
                "has_attachment": message.attachment is not None,
            },
        )
        logger.info("Message %s sent to chat %s", message.id, chat.id)

        if self._receipts:
            self._receipts.schedule(self.update_status, chat.id, message.id)

    async def receive_message(
        self,
        chat_id: str,
        sender: str,
        text: str,
        message_id: str | None = None,
    ) -> Message:
        """Append a message from a remote participant."""
        chat = await self.get_chat(chat_id)
        message = Message(
            id=message_id or _new_id(),
            chat_id=chat_id,
            text=text,
            sender=sender,
            timestamp=_now(),
            status=MessageStatus.DELIVERED,
        )
        await self._storage.save_message(message)

        chat.last_message = text
        chat.last_seen = "now"
        if chat.status == PresenceStatus.TYPING:
            chat.status = PresenceStatus.ONLINE
        if chat_id != self._open_chat_id:
            chat.unread_count += 1
        await self._storage.save_chat(chat)

        await self._publish(
            Topic.MESSAGE,
            {
                "event": "received",
                "chat_id": chat_id,
                "message_id": message.id,
                "sender": sender,
            },
        )
        await self._tracker.track(
            event_type="message_received",
            actor="messaging_service",
            data={"chat_id": chat_id, "message_id": message.id, "sender": sender},
        )
        return message

    async def update_status(
        self, chat_id: str, message_id: str, status: MessageStatus | str
    ) -> bool:
        """
        Move a message status forward.

        Stale or backward updates (e.g. delivered after read) are ignored.
        Returns whether the status changed.
        """
        message = await self.get_message(chat_id, message_id)
        if not can_transition(message.status, status):
            logger.debug(
                "Ignoring status %s for message %s (currently %s)",
                status,
                message_id,
                message.status,
            )
            return False

        message.status = MessageStatus(status)
        await self._storage.save_message(message)
        await self._publish(
            Topic.RECEIPT,
            {
                "chat_id": chat_id,
                "message_id": message_id,
                "status": message.status.value,
            },
        )
        return True

    async def mark_read(self, chat_id: str, message_id: str) -> bool:
        return await self.update_status(chat_id, message_id, MessageStatus.READ)

    # Reactions, pins, replies

    async def add_reaction(
        self, chat_id: str, message_id: str, emoji: str, user_id: str | None = None
    ) -> Reaction:
        """Append a reaction. Repeated reactions are kept, not toggled."""
        message = await self.get_message(chat_id, message_id)
        reaction = Reaction(
            id=_new_id(),
            emoji=emoji,
            user_id=user_id or self.local_user_id,
            timestamp=_now(),
        )
        message.reactions.append(reaction)
        await self._storage.save_message(message)

        await self._publish(
            Topic.REACTION,
            {
                "event": "added",
                "chat_id": chat_id,
                "message_id": message_id,
                "emoji": emoji,
            },
        )
        await self._tracker.track(
            event_type="reaction_added",
            actor="messaging_service",
            data={"chat_id": chat_id, "message_id": message_id, "emoji": emoji},
        )
        return reaction

    async def remove_reaction(
        self, chat_id: str, message_id: str, reaction_id: str
    ) -> bool:
        message = await self.get_message(chat_id, message_id)
        remaining = [r for r in message.reactions if r.id != reaction_id]
        if len(remaining) == len(message.reactions):
            return False

        message.reactions = remaining
        await self._storage.save_message(message)
        await self._publish(
            Topic.REACTION,
            {
                "event": "removed",
                "chat_id": chat_id,
                "message_id": message_id,
                "reaction_id": reaction_id,
            },
        )
        return True

    async def toggle_pin(self, chat_id: str, message_id: str) -> Message:
        message = await self.get_message(chat_id, message_id)
        message.is_pinned = not message.is_pinned
        await self._storage.save_message(message)
        await self._tracker.track(
            event_type="message_pinned" if message.is_pinned else "message_unpinned",
            actor="messaging_service",
            data={"chat_id": chat_id, "message_id": message_id},
        )
        return message

    async def pinned_messages(self, chat_id: str) -> list[Message]:
        return [m for m in await self.get_messages(chat_id) if m.is_pinned]

    async def reply_prefix(self, chat_id: str, message_id: str) -> str:
        """Text the composer is pre-filled with when replying to a message."""
        message = await self.get_message(chat_id, message_id)
        return f'Replying to: "{message.text}"\n'
