"""Tests for settings loading."""

from messaging.config import (
    DEFAULT_DELIVERY_DELAY,
    PROJECT_ROOT,
    Settings,
    load_settings,
    resolve_catalog_path,
)

ENV_VARS = [
    "API_HOST",
    "API_PORT",
    "LOG_LEVEL",
    "MESSAGING_CATALOG",
    "MESSAGING_DELIVERY_DELAY",
    "MESSAGING_READ_DELAY",
    "MESSAGING_SEED_DEMO",
]


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults(self, monkeypatch):
        """Test defaults."""
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)

        settings = load_settings()

        assert settings == Settings()
        assert settings.delivery_delay == DEFAULT_DELIVERY_DELAY
        assert settings.api_url == "http://localhost:8000"

    def test_reads_environment(self, monkeypatch):
        """Test reading settings from the environment."""
        monkeypatch.setenv("API_HOST", "0.0.0.0")
        monkeypatch.setenv("API_PORT", "9001")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("MESSAGING_DELIVERY_DELAY", "0.5")
        monkeypatch.setenv("MESSAGING_READ_DELAY", "1.5")
        monkeypatch.setenv("MESSAGING_SEED_DEMO", "no")
        monkeypatch.setenv("MESSAGING_CATALOG", "data/catalog.json")

        settings = load_settings()

        assert settings.api_url == "http://0.0.0.0:9001"
        assert settings.log_level == "debug"
        assert settings.delivery_delay == 0.5
        assert settings.read_delay == 1.5
        assert settings.seed_demo is False
        assert settings.catalog_path == PROJECT_ROOT / "data" / "catalog.json"


class TestResolveCatalogPath:
    """Tests for resolve_catalog_path()."""

    def test_empty_means_builtin(self):
        """Test that an empty value means the built-in catalog."""
        assert resolve_catalog_path(None) is None
        assert resolve_catalog_path("") is None

    def test_absolute_path_kept(self, tmp_path):
        """Test that an absolute path is kept."""
        assert resolve_catalog_path(tmp_path / "c.json") == tmp_path / "c.json"
