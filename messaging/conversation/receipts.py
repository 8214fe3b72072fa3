"""Simulated delivery and read receipts for outgoing messages."""

import asyncio
from typing import Awaitable, Callable

from ..config import DEFAULT_DELIVERY_DELAY, DEFAULT_READ_DELAY
from ..logging_config import get_logger
from ..models import MessageStatus

logger = get_logger(__name__)

StatusUpdater = Callable[[str, str, MessageStatus], Awaitable[bool]]


class ReceiptSimulator:
    """Moves a sent message to delivered, then read, after fixed delays."""

    def __init__(
        self,
        delivery_delay: float = DEFAULT_DELIVERY_DELAY,
        read_delay: float = DEFAULT_READ_DELAY,
    ):
        self._delivery_delay = delivery_delay
        self._read_delay = read_delay
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def schedule(
        self, update_status: StatusUpdater, chat_id: str, message_id: str
    ) -> asyncio.Task:
        """Start the receipt timeline for one message."""
        task = asyncio.create_task(self._run(update_status, chat_id, message_id))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(
        self, update_status: StatusUpdater, chat_id: str, message_id: str
    ) -> None:
        try:
            await asyncio.sleep(self._delivery_delay)
            await update_status(chat_id, message_id, MessageStatus.DELIVERED)
            await asyncio.sleep(max(self._read_delay - self._delivery_delay, 0))
            await update_status(chat_id, message_id, MessageStatus.READ)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            # The chat or message may have been deleted in the meantime
            logger.warning(
                "Receipt for %s in chat %s dropped: %s", message_id, chat_id, e
            )

    async def stop(self) -> None:
        """Cancel all pending receipts."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()
