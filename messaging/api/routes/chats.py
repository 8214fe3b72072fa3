"""Chat list API routes."""

from fastapi import APIRouter, Query
from pydantic import BaseModel

from ...app import Application
from ...models import ChatFilter, ChatMember
from ..serializers import chat_to_dict, member_to_dict, to_http_error
from .control import StatusResponse


class MemberPayload(BaseModel):
    """A person picked in the new-message dialog."""

    id: str
    name: str
    avatar: str = ""
    role: str = "member"


class CreateChatRequest(BaseModel):
    """Request model for starting a chat."""

    users: list[MemberPayload]


class CreateGroupRequest(BaseModel):
    """Request model for creating a named group."""

    name: str
    member_ids: list[str]


class TypingRequest(BaseModel):
    """Typing indicator from the remote side."""

    is_typing: bool


class MemberResponse(BaseModel):
    """Chat participant or directory entry."""

    id: str
    name: str
    avatar: str
    role: str


class ChatResponse(BaseModel):
    """Response model for a chat list row."""

    id: str
    name: str
    type: str
    avatar: str
    status: str
    last_message: str
    last_seen: str
    unread_count: int
    is_muted: bool
    is_archived: bool
    members: list[MemberResponse]


def create_chats_router(app: Application) -> APIRouter:
    """Create chats router."""
    router = APIRouter(prefix="/api", tags=["chats"])

    @router.get("/chats", response_model=list[ChatResponse])
    async def list_chats(
        filter: str = Query("all", description="all | direct | group | unread"),
        q: str = Query("", description="Search in names and last messages"),
    ) -> list[dict]:
        """List chats after filter and search."""
        try:
            chats = await app.service.list_chats(ChatFilter(filter), q)
            return [chat_to_dict(chat) for chat in chats]
        except Exception as e:
            raise to_http_error(e)

    @router.get("/chats/{chat_id}", response_model=ChatResponse)
    async def get_chat(chat_id: str) -> dict:
        try:
            return chat_to_dict(await app.service.get_chat(chat_id))
        except Exception as e:
            raise to_http_error(e)

    @router.post("/chats", response_model=ChatResponse)
    async def create_chat(request: CreateChatRequest) -> dict:
        """Start a direct chat (one user) or an ad-hoc group (several)."""
        try:
            users = [ChatMember(**user.model_dump()) for user in request.users]
            return chat_to_dict(await app.service.create_chat(users))
        except Exception as e:
            raise to_http_error(e)

    @router.post("/groups", response_model=ChatResponse)
    async def create_group(request: CreateGroupRequest) -> dict:
        try:
            chat = await app.service.create_group(request.name, request.member_ids)
            return chat_to_dict(chat)
        except Exception as e:
            raise to_http_error(e)

    @router.post("/chats/{chat_id}/open", response_model=ChatResponse)
    async def open_chat(chat_id: str) -> dict:
        """Open a chat; resets its unread count."""
        try:
            return chat_to_dict(await app.service.open_chat(chat_id))
        except Exception as e:
            raise to_http_error(e)

    @router.post("/chats/{chat_id}/mute", response_model=ChatResponse)
    async def toggle_mute(chat_id: str) -> dict:
        try:
            return chat_to_dict(await app.service.toggle_mute(chat_id))
        except Exception as e:
            raise to_http_error(e)

    @router.post("/chats/{chat_id}/archive", response_model=ChatResponse)
    async def toggle_archive(chat_id: str) -> dict:
        try:
            return chat_to_dict(await app.service.toggle_archive(chat_id))
        except Exception as e:
            raise to_http_error(e)

    @router.delete("/chats/{chat_id}", response_model=StatusResponse)
    async def delete_chat(chat_id: str) -> dict:
        try:
            await app.service.delete_chat(chat_id)
            return {"status": "ok"}
        except Exception as e:
            raise to_http_error(e)

    @router.post("/chats/{chat_id}/typing", response_model=ChatResponse)
    async def set_typing(chat_id: str, request: TypingRequest) -> dict:
        try:
            chat = await app.service.set_typing(chat_id, request.is_typing)
            return chat_to_dict(chat)
        except Exception as e:
            raise to_http_error(e)

    @router.get("/directory", response_model=list[MemberResponse])
    async def get_directory() -> list[dict]:
        """People available in the new-message and group dialogs."""
        return [member_to_dict(m) for m in app.service.directory]

    return router
