"""Observability API routes."""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from ...app import Application


class TraceEventResponse(BaseModel):
    """One recorded chat event (message sent, reaction added, bus traffic)."""

    id: str
    event_type: str
    actor: str
    data: dict[str, Any]
    timestamp: datetime


def parse_after(value: str | None) -> datetime | None:
    """
    Parse the ``after`` query parameter.

    Timestamps without an offset are taken as UTC, the zone every stored
    event is recorded in.

    Raises:
        HTTPException: 400 if the value is not an ISO timestamp.
    """
    if not value:
        return None
    try:
        after = datetime.fromisoformat(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid after timestamp format")
    if after.tzinfo is None:
        after = after.replace(tzinfo=timezone.utc)
    return after


def create_observability_router(app: Application) -> APIRouter:
    """Create observability router."""
    router = APIRouter(prefix="/api", tags=["observability"])

    @router.get("/trace-events", response_model=list[TraceEventResponse])
    async def get_trace_events(
        after: str | None = Query(None, description="ISO timestamp filter"),
        limit: int = Query(100, ge=1, le=1000),
        event_type: str | None = Query(
            None, description="e.g. message_sent, reaction_added, chat_opened"
        ),
        actor: str | None = Query(None, description="messaging_service, sim, ..."),
    ) -> list[TraceEventResponse]:
        """Chat activity, newest first."""
        after_dt = parse_after(after)
        try:
            events = await app.storage.get_trace_events(
                after=after_dt,
                event_types=[event_type] if event_type else None,
                actor=actor,
                limit=limit,
            )
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        return [
            TraceEventResponse(
                id=e.id,
                event_type=e.event_type,
                actor=e.actor,
                data=e.data,
                timestamp=e.timestamp,
            )
            for e in events
        ]

    return router
