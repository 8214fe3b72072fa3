"""Dialogs layered over the chat list."""

from enum import Enum
from typing import Callable

from ..models import ChatMember

StartChatHandler = Callable[[list[ChatMember]], None]
CreateGroupHandler = Callable[[str, list[str]], None]


class Theme(str, Enum):
    """Color theme offered by the settings dialog."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


def _search_directory(directory: list[ChatMember], query: str) -> list[ChatMember]:
    needle = query.lower()
    return [user for user in directory if needle in user.name.lower()]


class NewMessageDialog:
    """Pick one or more people to start a conversation with."""

    def __init__(self, directory: list[ChatMember], on_start_chat: StartChatHandler):
        self._directory = directory
        self._on_start_chat = on_start_chat
        self.search_query = ""
        self.selected: list[ChatMember] = []

    @property
    def available_users(self) -> list[ChatMember]:
        """Directory entries matching the search that are not already selected."""
        selected_ids = {user.id for user in self.selected}
        return [
            user
            for user in _search_directory(self._directory, self.search_query)
            if user.id not in selected_ids
        ]

    def set_search(self, query: str) -> None:
        self.search_query = query

    def toggle_user(self, user: ChatMember) -> None:
        if any(selected.id == user.id for selected in self.selected):
            self.selected = [s for s in self.selected if s.id != user.id]
        else:
            self.selected = [*self.selected, user]

    def start_chat(self) -> bool:
        if not self.selected:
            return False
        self._on_start_chat(list(self.selected))
        return True


class CreateGroupDialog:
    """Name a group and choose its members."""

    def __init__(self, directory: list[ChatMember], on_create: CreateGroupHandler):
        self._directory = directory
        self._on_create = on_create
        self.group_name = ""
        self.search_query = ""
        self.selected_member_ids: list[str] = []

    @property
    def available_users(self) -> list[ChatMember]:
        return _search_directory(self._directory, self.search_query)

    @property
    def can_create(self) -> bool:
        return bool(self.group_name.strip()) and bool(self.selected_member_ids)

    def set_name(self, name: str) -> None:
        self.group_name = name

    def set_search(self, query: str) -> None:
        self.search_query = query

    def toggle_member(self, member_id: str) -> None:
        if member_id in self.selected_member_ids:
            self.selected_member_ids = [
                m for m in self.selected_member_ids if m != member_id
            ]
        else:
            self.selected_member_ids = [*self.selected_member_ids, member_id]

    def submit(self) -> bool:
        if not self.can_create:
            return False
        self._on_create(self.group_name.strip(), list(self.selected_member_ids))
        return True


class SettingsDialog:
    """Theme and notification preferences."""

    def __init__(
        self,
        theme: Theme | str = Theme.LIGHT,
        notifications_enabled: bool = True,
        on_theme_change: Callable[[Theme], None] | None = None,
        on_notification_change: Callable[[bool], None] | None = None,
    ):
        self.theme = Theme(theme)
        self.notifications_enabled = notifications_enabled
        self._on_theme_change = on_theme_change
        self._on_notification_change = on_notification_change

    def set_theme(self, theme: Theme | str) -> None:
        self.theme = Theme(theme)
        if self._on_theme_change is not None:
            self._on_theme_change(self.theme)

    def toggle_notifications(self) -> bool:
        self.notifications_enabled = not self.notifications_enabled
        if self._on_notification_change is not None:
            self._on_notification_change(self.notifications_enabled)
        return self.notifications_enabled
