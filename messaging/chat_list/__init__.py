"""ChatList module."""

from .chat_list import ChatList
from .dialogs import CreateGroupDialog, NewMessageDialog, SettingsDialog, Theme
from .filters import filter_chats, matches_filter, matches_search, presence_color

__all__ = [
    "ChatList",
    "CreateGroupDialog",
    "NewMessageDialog",
    "SettingsDialog",
    "Theme",
    "filter_chats",
    "matches_filter",
    "matches_search",
    "presence_color",
]
