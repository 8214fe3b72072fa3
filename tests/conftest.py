"""Pytest configuration and fixtures."""

import asyncio
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class FakeStream:
    """Capture stream that counts how often it was released."""

    def __init__(self):
        self.stop_calls = 0

    def stop(self) -> None:
        self.stop_calls += 1


class FakeCaptureDevice:
    """Microphone double. Optionally fails or waits on a gate before opening."""

    def __init__(self, error: Exception | None = None, gated: bool = False):
        self.error = error
        self.gate = asyncio.Event() if gated else None
        self.acquire_calls = 0
        self.streams: list[FakeStream] = []

    async def acquire(self) -> FakeStream:
        self.acquire_calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        stream = FakeStream()
        self.streams.append(stream)
        return stream

    @property
    def open_streams(self) -> list[FakeStream]:
        return [s for s in self.streams if s.stop_calls == 0]


@pytest.fixture
def capture_device():
    """Microphone that opens immediately."""
    return FakeCaptureDevice()


@pytest.fixture
def gated_capture_device():
    """Microphone that opens only once its gate is set."""
    return FakeCaptureDevice(gated=True)


@pytest.fixture
def denied_capture_device():
    """Microphone whose permission prompt is refused."""
    return FakeCaptureDevice(error=PermissionError("Permission denied"))


@pytest.fixture
def now():
    return datetime(2026, 10, 19, 9, 41, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def storage():
    """Create in-memory storage for testing."""
    from messaging.storage import Storage

    st = Storage()
    await st.init()
    yield st
    await st.close()


@pytest.fixture
def event_bus(storage):
    """Create EventBus with storage."""
    from messaging.event_bus import EventBus

    return EventBus(storage)


@pytest.fixture
def tracker(storage, event_bus):
    """Create Tracker with storage and event bus."""
    from messaging.tracker import Tracker

    return Tracker(event_bus=event_bus, storage=storage)


@pytest_asyncio.fixture
async def service(storage, event_bus, tracker):
    """Create a started MessagingService seeded with the demo chats."""
    from messaging.conversation import MessagingService
    from messaging.storage import demo_chats, demo_directory, demo_messages

    for chat in demo_chats():
        await storage.save_chat(chat)
    for message in demo_messages():
        await storage.save_message(message)

    svc = MessagingService(
        storage=storage,
        event_bus=event_bus,
        tracker=tracker,
        directory=demo_directory(),
    )
    await svc.start()
    yield svc
    await svc.stop()
