"""Message API routes."""

import base64
from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel

from ...app import Application
from ...models import Blob
from ..serializers import message_to_dict, to_http_error


class SendMessageRequest(BaseModel):
    """Request model for sending a text message."""

    text: str
    reply_to: str | None = None


class AttachmentRequest(BaseModel):
    """A file picked in the composer, base64-encoded."""

    name: str
    mime_type: str = ""
    data: str
    kind: str | None = None


class VoiceRequest(BaseModel):
    """A recorded voice message, base64-encoded."""

    data: str
    mime_type: str = "audio/webm"


class IncomingMessageRequest(BaseModel):
    """A message arriving from a remote participant."""

    sender: str
    text: str


class StatusRequest(BaseModel):
    """Delivery receipt."""

    status: str


class ReactionRequest(BaseModel):
    """Request model for adding a reaction."""

    emoji: str
    user_id: str | None = None


class StatusIconResponse(BaseModel):
    glyph: str
    tone: str


class ReactionResponse(BaseModel):
    id: str
    emoji: str
    user_id: str
    timestamp: datetime


class ReactionSummaryResponse(BaseModel):
    """Count badge for one distinct emoji."""

    emoji: str
    count: int


class AttachmentResponse(BaseModel):
    kind: str
    name: str
    size: int
    mime_type: str
    url: str | None = None


class MessageResponse(BaseModel):
    """Response model for message, with the display data of its bubble."""

    id: str
    chat_id: str
    text: str
    sender: str
    timestamp: datetime
    display_time: str
    status: str
    status_icon: StatusIconResponse | None = None
    is_pinned: bool
    reply_to: str | None = None
    reactions: list[ReactionResponse]
    reaction_summary: list[ReactionSummaryResponse]
    attachment: AttachmentResponse | None = None


class StatusUpdateResponse(BaseModel):
    """Whether a receipt moved the status, and the resulting message."""

    applied: bool
    message: MessageResponse


class RemoveReactionResponse(BaseModel):
    removed: bool


class ReplyPrefixResponse(BaseModel):
    text: str


def _decode(data: str) -> bytes:
    return base64.b64decode(data, validate=True)


def create_messages_router(app: Application) -> APIRouter:
    """Create messages router."""
    router = APIRouter(prefix="/api/chats/{chat_id}", tags=["messages"])

    @router.get("/messages", response_model=list[MessageResponse])
    async def list_messages(chat_id: str) -> list[dict]:
        try:
            messages = await app.service.get_messages(chat_id)
            return [message_to_dict(m) for m in messages]
        except Exception as e:
            raise to_http_error(e)

    @router.get("/pinned", response_model=list[MessageResponse])
    async def list_pinned(chat_id: str) -> list[dict]:
        try:
            messages = await app.service.pinned_messages(chat_id)
            return [message_to_dict(m) for m in messages]
        except Exception as e:
            raise to_http_error(e)

    @router.post("/messages", response_model=MessageResponse)
    async def send_message(chat_id: str, request: SendMessageRequest) -> dict:
        """Send a text message. The client clears its composer afterwards."""
        try:
            message = await app.service.send_message(
                chat_id, request.text, reply_to=request.reply_to
            )
            return message_to_dict(message)
        except Exception as e:
            raise to_http_error(e)

    @router.post("/attachments", response_model=MessageResponse)
    async def send_attachment(chat_id: str, request: AttachmentRequest) -> dict:
        try:
            blob = Blob(
                data=_decode(request.data),
                mime_type=request.mime_type,
                name=request.name,
            )
            message = await app.service.send_attachment(chat_id, blob, request.kind)
            return message_to_dict(message)
        except Exception as e:
            raise to_http_error(e)

    @router.post("/voice", response_model=MessageResponse)
    async def send_voice(chat_id: str, request: VoiceRequest) -> dict:
        try:
            blob = Blob(data=_decode(request.data), mime_type=request.mime_type)
            message = await app.service.send_voice_message(chat_id, blob)
            return message_to_dict(message)
        except Exception as e:
            raise to_http_error(e)

    @router.post("/incoming", response_model=MessageResponse)
    async def receive_message(chat_id: str, request: IncomingMessageRequest) -> dict:
        try:
            message = await app.service.receive_message(
                chat_id, request.sender, request.text
            )
            return message_to_dict(message)
        except Exception as e:
            raise to_http_error(e)

    @router.post(
        "/messages/{message_id}/status", response_model=StatusUpdateResponse
    )
    async def update_status(
        chat_id: str, message_id: str, request: StatusRequest
    ) -> dict:
        """Apply a receipt. Stale receipts are accepted but change nothing."""
        try:
            applied = await app.service.update_status(
                chat_id, message_id, request.status
            )
            message = await app.service.get_message(chat_id, message_id)
            return {"applied": applied, "message": message_to_dict(message)}
        except Exception as e:
            raise to_http_error(e)

    @router.post("/messages/{message_id}/reactions", response_model=MessageResponse)
    async def add_reaction(
        chat_id: str, message_id: str, request: ReactionRequest
    ) -> dict:
        try:
            await app.service.add_reaction(
                chat_id, message_id, request.emoji, request.user_id
            )
            message = await app.service.get_message(chat_id, message_id)
            return message_to_dict(message)
        except Exception as e:
            raise to_http_error(e)

    @router.delete(
        "/messages/{message_id}/reactions/{reaction_id}",
        response_model=RemoveReactionResponse,
    )
    async def remove_reaction(chat_id: str, message_id: str, reaction_id: str) -> dict:
        try:
            removed = await app.service.remove_reaction(
                chat_id, message_id, reaction_id
            )
            return {"removed": removed}
        except Exception as e:
            raise to_http_error(e)

    @router.post("/messages/{message_id}/pin", response_model=MessageResponse)
    async def toggle_pin(chat_id: str, message_id: str) -> dict:
        try:
            return message_to_dict(await app.service.toggle_pin(chat_id, message_id))
        except Exception as e:
            raise to_http_error(e)

    @router.get(
        "/messages/{message_id}/reply-prefix", response_model=ReplyPrefixResponse
    )
    async def reply_prefix(chat_id: str, message_id: str) -> dict:
        try:
            return {"text": await app.service.reply_prefix(chat_id, message_id)}
        except Exception as e:
            raise to_http_error(e)

    return router
