"""Catalog data models (emoji categories, quick replies)."""

from dataclasses import dataclass, field


@dataclass
class EmojiCategory:
    """A named tab of the reaction picker."""

    name: str
    emojis: list[str]


@dataclass
class QuickReply:
    """A canned phrase offered by the composer."""

    text: str
    icon: str | None = None


@dataclass
class Catalog:
    """Static configuration consumed by the bubble and the composer."""

    emoji_categories: dict[str, EmojiCategory]
    common_reactions: list[str]
    quick_replies: list[QuickReply] = field(default_factory=list)
