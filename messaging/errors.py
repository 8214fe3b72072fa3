"""Exceptions raised by the messaging service."""


class MessagingError(Exception):
    """Base class for messaging errors."""


class ChatNotFoundError(MessagingError, LookupError):
    """No chat with the given id."""

    def __init__(self, chat_id: str):
        super().__init__(f"Chat not found: {chat_id}")
        self.chat_id = chat_id


class MessageNotFoundError(MessagingError, LookupError):
    """No message with the given id in the chat."""

    def __init__(self, chat_id: str, message_id: str):
        super().__init__(f"Message not found: {message_id} in chat {chat_id}")
        self.chat_id = chat_id
        self.message_id = message_id


class InvalidStatusTransition(MessagingError, ValueError):
    """A message status may only move forward: sent -> delivered -> read."""

    def __init__(self, current: str, new: str):
        super().__init__(f"Invalid status transition: {current} -> {new}")
        self.current = current
        self.new = new


class EmptyMessageError(MessagingError, ValueError):
    """A text message with nothing but whitespace."""
