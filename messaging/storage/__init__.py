"""Storage module."""

from .demo import demo_chats, demo_directory, demo_messages
from .storage import IStorage, Storage

__all__ = ["IStorage", "Storage", "demo_chats", "demo_directory", "demo_messages"]
