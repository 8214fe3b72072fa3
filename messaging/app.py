"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .catalog import load_catalog
from .config import Settings, load_settings
from .conversation import MessagingService, ReceiptSimulator
from .event_bus import EventBus
from .logging_config import get_logger
from .models import Catalog
from .storage import IStorage, Storage, demo_chats, demo_directory, demo_messages
from .tracker import ITracker, Tracker

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Drop all chats and messages, then reseed."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or load_settings()

        # Components (will be initialized in start())
        self._storage: IStorage | None = None
        self._event_bus: EventBus | None = None
        self._tracker: ITracker | None = None
        self._receipts: ReceiptSimulator | None = None
        self._service: MessagingService | None = None
        self._catalog: Catalog | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. Catalog (static configuration)
        self._catalog = load_catalog(self._settings.catalog_path)

        # 2. Storage (no dependencies)
        self._storage = Storage()
        await self._storage.init()
        logger.info("Storage initialized")

        # 3. EventBus (journals into Storage)
        self._event_bus = EventBus(self._storage)

        # 4. Tracker (depends on EventBus + Storage)
        self._tracker = Tracker(self._event_bus, self._storage)
        await self._tracker.start()

        # 5. MessagingService (depends on all of the above)
        self._receipts = ReceiptSimulator(
            delivery_delay=self._settings.delivery_delay,
            read_delay=self._settings.read_delay,
        )
        self._service = MessagingService(
            storage=self._storage,
            event_bus=self._event_bus,
            tracker=self._tracker,
            receipts=self._receipts,
            directory=demo_directory(),
        )
        await self._service.start()

        if self._settings.seed_demo:
            await self._seed()

        logger.info("All components initialized successfully")

    async def _seed(self) -> None:
        for chat in demo_chats():
            await self.storage.save_chat(chat)
        for message in demo_messages():
            await self.storage.save_message(message)
        logger.info("Demo chats seeded")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._service:
            await self._service.stop()
        if self._tracker:
            await self._tracker.stop()
        if self._storage:
            await self._storage.close()
            logger.info("Storage closed")

    async def reset(self) -> None:
        """Drop all chats and messages, then reseed."""
        if self._service:
            await self._service.stop()

        if self._storage:
            await self._storage.clear()
            logger.info("Storage cleared")
            if self._settings.seed_demo:
                await self._seed()

        if self._service:
            self._service.close_chat()
            await self._service.start()
            logger.info("Reset complete")

    @property
    def storage(self) -> IStorage:
        if not self._storage:
            raise RuntimeError("Application not started")
        return self._storage

    @property
    def service(self) -> MessagingService:
        if not self._service:
            raise RuntimeError("Application not started")
        return self._service

    @property
    def catalog(self) -> Catalog:
        if not self._catalog:
            raise RuntimeError("Application not started")
        return self._catalog

    @property
    def tracker(self) -> ITracker:
        if not self._tracker:
            raise RuntimeError("Application not started")
        return self._tracker
