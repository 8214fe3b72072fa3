"""MessageBubble module."""

from .bubble import MessageBubble, format_timestamp
from .reactions import ReactionSummary, aggregate_reactions
from .status import (
    ALLOWED_TRANSITIONS,
    StatusIcon,
    can_transition,
    parse_status,
    status_indicator,
    transition,
)

__all__ = [
    "MessageBubble",
    "format_timestamp",
    "ReactionSummary",
    "aggregate_reactions",
    "ALLOWED_TRANSITIONS",
    "StatusIcon",
    "can_transition",
    "parse_status",
    "status_indicator",
    "transition",
]
