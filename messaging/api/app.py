"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..app import Application
from .routes import (
    control,
    create_catalog_router,
    create_chats_router,
    create_control_router,
    create_messages_router,
    create_observability_router,
)


# Global application instance
_app: Application | None = None


def get_app() -> Application:
    """Get the global application instance."""
    global _app
    if not _app:
        _app = Application()
    return _app


def create_fastapi_app(application: Application | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    application = application or get_app()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        await application.start()
        sim_instance = control.get_sim_instance()
        if sim_instance and hasattr(sim_instance, "set_tracker"):
            sim_instance.set_tracker(application.tracker)
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Connect Messaging API",
        description="Chats, messages, reactions and receipts for Connect",
        version="0.1.0",
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173", "http://localhost:5174"],  # Vite default
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(create_chats_router(application))
    fastapi_app.include_router(create_messages_router(application))
    fastapi_app.include_router(create_catalog_router(application))
    fastapi_app.include_router(create_observability_router(application))
    fastapi_app.include_router(create_control_router(application))

    return fastapi_app
