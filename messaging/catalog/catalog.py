"""Emoji and quick-reply catalog."""

import json
from pathlib import Path

from ..logging_config import get_logger
from ..models import Catalog, EmojiCategory, QuickReply

logger = get_logger(__name__)

QUICK_REACTION_COUNT = 6


def default_catalog() -> Catalog:
    """Build the built-in catalog. Returns a fresh object on every call."""
    return Catalog(
        emoji_categories={
            "smileys": EmojiCategory(
                name="Smileys",
                emojis=["😊", "😂", "🥰", "😍", "😎", "🤔", "😅", "🤗"],
            ),
            "reactions": EmojiCategory(
                name="Reactions",
                emojis=["👍", "👎", "❤️", "🎉", "🔥", "💯", "✨", "🙏"],
            ),
            "objects": EmojiCategory(
                name="Objects",
                emojis=["📚", "💻", "📱", "⭐", "💡", "🎮", "🎨", "🎵"],
            ),
        },
        common_reactions=["👍", "❤️", "😊", "🎉", "🔥", "👏"],
        quick_replies=[
            QuickReply(text="Hey! How are you?", icon="👋"),
            QuickReply(text="Great work!", icon="👏"),
            QuickReply(text="Thanks!", icon="🙏"),
            QuickReply(text="I'll get back to you soon", icon="⏳"),
            QuickReply(text="Let's schedule a meeting", icon="📅"),
        ],
    )


def catalog_from_dict(data: dict) -> Catalog:
    """
    Build a Catalog from its JSON representation.

    Sections missing from ``data`` fall back to the built-in catalog.

    Raises:
        ValueError: If a section has the wrong shape.
    """
    base = default_catalog()

    categories = base.emoji_categories
    if "emoji_categories" in data:
        raw = data["emoji_categories"]
        if not isinstance(raw, dict) or not raw:
            raise ValueError("emoji_categories must be a non-empty object")
        categories = {}
        for key, value in raw.items():
            if not isinstance(value, dict) or not isinstance(value.get("emojis"), list):
                raise ValueError(f"Invalid emoji category: {key}")
            categories[key] = EmojiCategory(
                name=value.get("name", key), emojis=list(value["emojis"])
            )

    common = base.common_reactions
    if "common_reactions" in data:
        if not isinstance(data["common_reactions"], list):
            raise ValueError("common_reactions must be a list")
        common = list(data["common_reactions"])

    replies = base.quick_replies
    if "quick_replies" in data:
        if not isinstance(data["quick_replies"], list):
            raise ValueError("quick_replies must be a list")
        replies = []
        for item in data["quick_replies"]:
            if not isinstance(item, dict) or not isinstance(item.get("text"), str):
                raise ValueError(f"Invalid quick reply: {item!r}")
            replies.append(QuickReply(text=item["text"], icon=item.get("icon")))

    return Catalog(
        emoji_categories=categories,
        common_reactions=common,
        quick_replies=replies,
    )


def load_catalog(path: str | Path | None = None) -> Catalog:
    """Load a catalog from a JSON file, or the built-in one when path is None."""
    if path is None:
        return default_catalog()

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    catalog = catalog_from_dict(data)
    logger.info(
        "Loaded catalog from %s (%d categories)", path, len(catalog.emoji_categories)
    )
    return catalog
