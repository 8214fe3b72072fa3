"""Main entry point for the Connect messaging service."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from messaging.api import create_fastapi_app
from messaging.app import Application
from messaging.config import load_settings
from messaging.logging_config import setup_logging
from sim import Sim


def main():
    """Run the application."""
    project_root = Path(__file__).resolve().parent
    load_dotenv(project_root / ".env")

    settings = load_settings()
    setup_logging(settings.log_level)

    # Create SIM instance
    sim = Sim(api_url=settings.api_url)

    # Set SIM instance for control router
    from messaging.api.routes import control
    control.set_sim_instance(sim)

    # Create FastAPI app
    app = create_fastapi_app(Application(settings))

    # Run with uvicorn
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
