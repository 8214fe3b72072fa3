"""Message status icons and the status state machine."""

from dataclasses import dataclass

from ..errors import InvalidStatusTransition
from ..models import MessageStatus

ALLOWED_TRANSITIONS: dict[MessageStatus, frozenset[MessageStatus]] = {
    MessageStatus.SENT: frozenset({MessageStatus.DELIVERED, MessageStatus.READ}),
    MessageStatus.DELIVERED: frozenset({MessageStatus.READ}),
    MessageStatus.READ: frozenset(),
}


@dataclass(frozen=True)
class StatusIcon:
    """What to draw next to a local message."""

    glyph: str  # "check" | "double_check"
    tone: str  # "muted" | "accent"


_STATUS_ICONS = {
    MessageStatus.SENT: StatusIcon(glyph="check", tone="muted"),
    MessageStatus.DELIVERED: StatusIcon(glyph="double_check", tone="muted"),
    MessageStatus.READ: StatusIcon(glyph="double_check", tone="accent"),
}


def parse_status(status: MessageStatus | str) -> MessageStatus | None:
    """Return the MessageStatus for a value, or None if it is unknown."""
    try:
        return MessageStatus(status)
    except ValueError:
        return None


def status_indicator(status: MessageStatus | str) -> StatusIcon | None:
    """Map a status to its icon. Unknown statuses have no icon."""
    known = parse_status(status)
    if known is None:
        return None
    return _STATUS_ICONS[known]


def can_transition(current: MessageStatus | str, new: MessageStatus | str) -> bool:
    """Check whether ``current -> new`` moves the status forward."""
    current_status = parse_status(current)
    new_status = parse_status(new)
    if current_status is None or new_status is None:
        return False
    return new_status in ALLOWED_TRANSITIONS[current_status]


def transition(current: MessageStatus | str, new: MessageStatus | str) -> MessageStatus:
    """
    Validate a status change and return the new status.

    Raises:
        InvalidStatusTransition: If the change is not a forward move.
    """
    if not can_transition(current, new):
        raise InvalidStatusTransition(_label(current), _label(new))
    return MessageStatus(new)


def _label(status: MessageStatus | str) -> str:
    return status.value if isinstance(status, MessageStatus) else str(status)
