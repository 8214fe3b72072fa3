"""API route factories."""

from .catalog import create_catalog_router
from .chats import create_chats_router
from .control import create_control_router
from .messages import create_messages_router
from .observability import create_observability_router

__all__ = [
    "create_catalog_router",
    "create_chats_router",
    "create_control_router",
    "create_messages_router",
    "create_observability_router",
]
