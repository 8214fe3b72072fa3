"""SIM implementation - remote participants writing into demo chats."""

import asyncio
import random
from typing import Protocol

import httpx

from messaging.logging_config import get_logger
from messaging.tracker import ITracker

logger = get_logger(__name__)

# chat_id -> (sender, lines)
DEFAULT_SCENARIO: dict[str, tuple[str, list[str]]] = {
    "1": ("priya", ["Are you free after class?", "Let's review the slides"]),
    "2": ("marcus.lee", ["Please send me the draft", "Office hours moved to 3pm"]),
    "3": ("alice", ["Pushed the new dataset", "Standup in 10?"]),
}


class ISim(Protocol):
    """Generate remote traffic against the HTTP API."""

    async def start(self) -> None:
        """Start the scenario."""
        ...

    async def stop(self) -> None:
        """Stop the scenario."""
        ...


class Sim:
    """Plays a fixed scenario: typing indicator, then an incoming message."""

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        tracker: ITracker | None = None,
        scenario: dict[str, tuple[str, list[str]]] | None = None,
        min_delay: float = 1.0,
        max_delay: float = 3.0,
    ):
        self._api_url = api_url
        self._tracker = tracker
        self._scenario = scenario or DEFAULT_SCENARIO
        self._min_delay = min_delay
        self._max_delay = max_delay
        self._running = False
        self._task: asyncio.Task | None = None
        self._client: httpx.AsyncClient | None = None

    def set_tracker(self, tracker: ITracker) -> None:
        """Inject tracker for SIM trace events."""
        self._tracker = tracker

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the scenario in the background."""
        if self._running:
            return

        self._running = True
        self._client = httpx.AsyncClient(base_url=self._api_url)
        self._task = asyncio.create_task(self._run_scenario())

    async def stop(self) -> None:
        """Stop the scenario."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        if self._client:
            await self._client.aclose()
            self._client = None

    async def _run_scenario(self) -> None:
        message_count = sum(len(lines) for _, lines in self._scenario.values())
        try:
            if self._tracker:
                await self._tracker.track(
                    "sim_started",
                    "sim",
                    {"chat_count": len(self._scenario), "message_count": message_count},
                )

            rounds = max(len(lines) for _, lines in self._scenario.values())
            for i in range(rounds):
                for chat_id, (sender, lines) in self._scenario.items():
                    if not self._running:
                        return
                    if i >= len(lines):
                        continue

                    await self._post(
                        f"/api/chats/{chat_id}/typing", {"is_typing": True}
                    )
                    await asyncio.sleep(
                        random.uniform(self._min_delay, self._max_delay)
                    )
                    await self._post(
                        f"/api/chats/{chat_id}/incoming",
                        {"sender": sender, "text": lines[i]},
                    )

        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error("SIM scenario error: %s", e)
        finally:
            if self._tracker:
                await self._tracker.track(
                    "sim_completed",
                    "sim",
                    {"chat_count": len(self._scenario), "message_count": message_count},
                )

    async def _post(self, path: str, payload: dict) -> None:
        """POST to the API; failures are logged and the scenario goes on."""
        if not self._client:
            return

        try:
            response = await self._client.post(path, json=payload, timeout=10.0)
            if response.status_code == 200:
                logger.info("SIM: %s <- %s", path, payload)
            else:
                logger.error("SIM: %s returned %s", path, response.status_code)
        except httpx.HTTPError as e:
            logger.error("SIM: request to %s failed: %s", path, e)
