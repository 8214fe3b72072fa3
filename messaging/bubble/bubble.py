"""MessageBubble view model."""

from datetime import datetime, tzinfo
from typing import Callable

from ..catalog import QUICK_REACTION_COUNT, default_catalog
from ..models import Catalog, Message
from .reactions import ReactionSummary, aggregate_reactions
from .status import StatusIcon, status_indicator

ReactHandler = Callable[[str, str], None]
MessageHandler = Callable[[str], None]
RemoveReactionHandler = Callable[[str, str], None]

DEFAULT_CATEGORY = "smileys"


def format_timestamp(timestamp: datetime, tz: tzinfo | None = None) -> str:
    """Render a message instant as HH:MM in ``tz`` (the local zone by default)."""
    return timestamp.astimezone(tz).strftime("%H:%M")


class MessageBubble:
    """
    Presents one Message and emits react/pin/reply intents.

    The bubble owns only transient UI state (hover, picker, selected tab).
    Pin and reply indicators come from the message itself, so they survive
    the pointer leaving the bubble.
    """

    def __init__(
        self,
        message: Message,
        on_react: ReactHandler,
        on_pin: MessageHandler,
        on_reply: MessageHandler,
        on_remove_reaction: RemoveReactionHandler | None = None,
        catalog: Catalog | None = None,
        display_tz: tzinfo | None = None,
    ):
        self.message = message
        self._on_react = on_react
        self._on_pin = on_pin
        self._on_reply = on_reply
        self._on_remove_reaction = on_remove_reaction
        self._catalog = catalog or default_catalog()
        self._display_tz = display_tz

        self.actions_visible = False
        self.picker_open = False
        self.selected_category = (
            DEFAULT_CATEGORY
            if DEFAULT_CATEGORY in self._catalog.emoji_categories
            else next(iter(self._catalog.emoji_categories))
        )

    # Rendering

    @property
    def alignment(self) -> str:
        return "right" if self.message.is_local else "left"

    @property
    def status_icon(self) -> StatusIcon | None:
        """Delivery status is only shown on the local participant's messages."""
        if not self.message.is_local:
            return None
        return status_indicator(self.message.status)

    @property
    def display_timestamp(self) -> str:
        return format_timestamp(self.message.timestamp, self._display_tz)

    @property
    def shows_reply_indicator(self) -> bool:
        return self.message.reply_to is not None

    @property
    def shows_pin_indicator(self) -> bool:
        return self.message.is_pinned

    @property
    def reaction_summary(self) -> list[ReactionSummary]:
        return aggregate_reactions(self.message.reactions)

    @property
    def quick_reactions(self) -> list[str]:
        return self._catalog.common_reactions[:QUICK_REACTION_COUNT]

    @property
    def categories(self) -> list[tuple[str, str]]:
        """(key, display name) pairs for the picker tabs."""
        return [
            (key, category.name)
            for key, category in self._catalog.emoji_categories.items()
        ]

    @property
    def visible_emojis(self) -> list[str]:
        return self._catalog.emoji_categories[self.selected_category].emojis

    # Hover

    def pointer_enter(self) -> None:
        self.actions_visible = True

    def pointer_leave(self) -> None:
        """Hide the action bar and the full picker together."""
        self.actions_visible = False
        self.picker_open = False

    # Picker

    def toggle_picker(self) -> None:
        self.picker_open = not self.picker_open

    def close_picker(self) -> None:
        self.picker_open = False

    def select_category(self, key: str) -> None:
        if key not in self._catalog.emoji_categories:
            raise KeyError(key)
        self.selected_category = key

    # Intents

    def react(self, emoji: str) -> None:
        """Quick bar, picker and reaction badges all end up here."""
        self._on_react(self.message.id, emoji)
        self.picker_open = False

    def pin(self) -> None:
        self._on_pin(self.message.id)

    def reply(self) -> None:
        self._on_reply(self.message.id)

    def remove_reaction(self, reaction_id: str) -> None:
        if self._on_remove_reaction is not None:
            self._on_remove_reaction(self.message.id, reaction_id)
