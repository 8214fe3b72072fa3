"""ChatList view model."""

from typing import Callable

from ..models import Chat, ChatFilter, ChatMember
from .dialogs import NewMessageDialog, SettingsDialog, Theme
from .filters import filter_chats, presence_color

SelectChatHandler = Callable[[str], None]
CreateChatHandler = Callable[[list[ChatMember]], None]
CreateGroupRequestHandler = Callable[[], None]


class ChatList:
    """
    Lists conversations with filter and search, and reports selection.

    Dialogs opened from the list sit on top of it and never touch the
    filter, search or selection state.
    """

    def __init__(
        self,
        chats: list[Chat],
        on_select_chat: SelectChatHandler,
        on_create_chat: CreateChatHandler,
        on_create_group: CreateGroupRequestHandler,
        selected_chat: str | None = None,
        is_mobile_view: bool = False,
        directory: list[ChatMember] | None = None,
        theme: Theme | str = Theme.LIGHT,
        on_theme_change: Callable[[Theme], None] | None = None,
    ):
        self.chats = chats
        self.selected_chat = selected_chat
        self.is_mobile_view = is_mobile_view
        self._on_select_chat = on_select_chat
        self._on_create_chat = on_create_chat
        self._on_create_group = on_create_group
        self._directory = directory or []
        self._on_theme_change = on_theme_change

        self.chat_filter = ChatFilter.ALL
        self.search_query = ""
        self.theme = Theme(theme)
        self.notifications_enabled = True
        self.new_message_dialog: NewMessageDialog | None = None
        self.settings_dialog: SettingsDialog | None = None

    @property
    def visible_chats(self) -> list[Chat]:
        return filter_chats(self.chats, self.chat_filter, self.search_query)

    @property
    def shows_group_button(self) -> bool:
        return self.is_mobile_view

    def set_filter(self, chat_filter: ChatFilter | str) -> None:
        self.chat_filter = ChatFilter(chat_filter)

    def set_search(self, query: str) -> None:
        self.search_query = query

    def clear_search(self) -> None:
        self.search_query = ""

    def select(self, chat_id: str) -> None:
        """Report a row click. Unread counts are the owner's business."""
        self.selected_chat = chat_id
        self._on_select_chat(chat_id)

    def status_color(self, chat: Chat) -> str:
        return presence_color(chat.status)

    def request_group(self) -> None:
        self._on_create_group()

    # New message dialog

    def open_new_message(self) -> NewMessageDialog:
        self.new_message_dialog = NewMessageDialog(
            self._directory, on_start_chat=self._start_chat
        )
        return self.new_message_dialog

    def close_new_message(self) -> None:
        self.new_message_dialog = None

    def _start_chat(self, users: list[ChatMember]) -> None:
        self._on_create_chat(users)
        self.new_message_dialog = None

    # Settings dialog

    def open_settings(self) -> SettingsDialog:
        self.settings_dialog = SettingsDialog(
            theme=self.theme,
            notifications_enabled=self.notifications_enabled,
            on_theme_change=self._set_theme,
            on_notification_change=self._set_notifications,
        )
        return self.settings_dialog

    def close_settings(self) -> None:
        self.settings_dialog = None

    def _set_theme(self, theme: Theme) -> None:
        self.theme = theme
        if self._on_theme_change is not None:
            self._on_theme_change(theme)

    def _set_notifications(self, enabled: bool) -> None:
        self.notifications_enabled = enabled
