"""Tests for Application bootstrap."""

import pytest

from messaging.app import Application
from messaging.config import Settings


@pytest.fixture
def settings():
    return Settings(delivery_delay=0.01, read_delay=0.02)


class TestApplication:
    """Tests for start/stop/reset."""

    async def test_properties_before_start_raise(self, settings):
        """Test that components are unavailable before start."""
        app = Application(settings)
        with pytest.raises(RuntimeError, match="not started"):
            app.service

    async def test_start_seeds_demo_chats(self, settings):
        """Test that start seeds the demo chats and catalog."""
        app = Application(settings)
        await app.start()

        chats = await app.service.list_chats()
        assert [c.name for c in chats] == [
            "Priya Raman",
            "Dr. Marcus Lee",
            "Project Team",
        ]
        assert len(await app.service.get_messages("1")) == 3
        assert "smileys" in app.catalog.emoji_categories

        await app.stop()

    async def test_start_without_seed(self):
        """Test starting with demo seeding disabled."""
        app = Application(Settings(seed_demo=False))
        await app.start()

        assert await app.service.list_chats() == []
        await app.stop()

    async def test_reset_restores_demo_state(self, settings):
        """Test that reset drops changes and reseeds."""
        app = Application(settings)
        await app.start()
        await app.service.open_chat("3")
        await app.service.delete_chat("2")
        await app.service.send_message("1", "hello")

        await app.reset()

        assert len(await app.service.list_chats()) == 3
        assert len(await app.service.get_messages("1")) == 3
        assert app.service.open_chat_id is None
        assert (await app.service.get_chat("3")).unread_count == 5
        await app.stop()

    async def test_custom_catalog(self, tmp_path):
        """Test loading the catalog from a JSON file."""
        path = tmp_path / "catalog.json"
        path.write_text('{"common_reactions": ["✅"]}', encoding="utf-8")
        app = Application(Settings(catalog_path=path, seed_demo=False))

        await app.start()

        assert app.catalog.common_reactions == ["✅"]
        await app.stop()
