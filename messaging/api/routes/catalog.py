"""Catalog API routes."""

from fastapi import APIRouter
from pydantic import BaseModel

from ...app import Application
from ...catalog import QUICK_REACTION_COUNT


class EmojiCategoryResponse(BaseModel):
    """One tab of the emoji picker."""

    name: str
    emojis: list[str]


class QuickReplyResponse(BaseModel):
    text: str
    icon: str | None = None


class CatalogResponse(BaseModel):
    """Response model for the emoji and quick-reply catalog."""

    emoji_categories: dict[str, EmojiCategoryResponse]
    quick_reactions: list[str]
    quick_replies: list[QuickReplyResponse]


def create_catalog_router(app: Application) -> APIRouter:
    """Create catalog router."""
    router = APIRouter(prefix="/api", tags=["catalog"])

    @router.get("/catalog", response_model=CatalogResponse)
    async def get_catalog() -> CatalogResponse:
        """Emoji categories, quick reactions and quick replies."""
        catalog = app.catalog
        return CatalogResponse(
            emoji_categories={
                key: EmojiCategoryResponse(name=category.name, emojis=category.emojis)
                for key, category in catalog.emoji_categories.items()
            },
            quick_reactions=catalog.common_reactions[:QUICK_REACTION_COUNT],
            quick_replies=[
                QuickReplyResponse(text=reply.text, icon=reply.icon)
                for reply in catalog.quick_replies
            ],
        )

    return router
