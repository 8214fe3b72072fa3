"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parent.parent
LOGS_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

LOGS_DIR.mkdir(parents=True, exist_ok=True)

# Receipt timings, in seconds after sending (sent -> delivered -> read)
DEFAULT_DELIVERY_DELAY = 1.0
DEFAULT_READ_DELAY = 2.0


PathLike = Union[str, Path]


def resolve_catalog_path(env_value: PathLike | None = None) -> Path | None:
    """Resolve MESSAGING_CATALOG to an absolute path, or None for the built-in catalog."""
    if not env_value:
        return None

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Runtime settings read from the environment."""

    api_host: str = "localhost"
    api_port: int = 8000
    log_level: str = "INFO"
    catalog_path: Path | None = None
    delivery_delay: float = DEFAULT_DELIVERY_DELAY
    read_delay: float = DEFAULT_READ_DELAY
    seed_demo: bool = True

    @property
    def api_url(self) -> str:
        return f"http://{self.api_host}:{self.api_port}"


def load_settings() -> Settings:
    """Build Settings from environment variables."""
    return Settings(
        api_host=os.getenv("API_HOST", "localhost"),
        api_port=int(os.getenv("API_PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        catalog_path=resolve_catalog_path(os.getenv("MESSAGING_CATALOG")),
        delivery_delay=float(
            os.getenv("MESSAGING_DELIVERY_DELAY", str(DEFAULT_DELIVERY_DELAY))
        ),
        read_delay=float(os.getenv("MESSAGING_READ_DELAY", str(DEFAULT_READ_DELAY))),
        seed_demo=_env_flag("MESSAGING_SEED_DEMO", True),
    )
