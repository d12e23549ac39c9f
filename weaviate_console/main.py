#!/usr/bin/env python3
"""
Weaviate Console - FastAPI Application

JSON API behind the browser console: collection listing, paged record
browsing, deletions, demo seeding and switching between Weaviate endpoints.
This module wires configuration, logging and the data-access layer into the
app and registers the domain routers.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from weaviate_console.api.collection_routes import router as collection_router
from weaviate_console.api.collections_routes import router as collections_router
from weaviate_console.api.connection_routes import router as connection_router
from weaviate_console.core.config import Settings, settings as default_settings
from weaviate_console.core.exception_handler import register_validation_exception_handler
from weaviate_console.db.core.connection import ConnectionContext
from weaviate_console.db.core.manager import ClientManager
from weaviate_console.db.service import ConsoleService
from weaviate_console.utils.log import setup_logging
from weaviate_console.version import __version__

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application startup and shutdown lifecycle management."""
        log_file_path = setup_logging(settings)
        logger.info(f"Logging configured. Writing to file: {log_file_path}")
        logger.info("Starting Weaviate Console...")

        try:
            context = ConnectionContext.from_settings(settings)
            clients = ClientManager.from_settings(context, settings)
            app.state.console_service = ConsoleService.from_settings(clients, settings)
            logger.info(f"Console ready, default endpoint {context.url}")
        except Exception as e:
            logger.error(f"Failed to initialize console: {e}", exc_info=True)
            raise

        yield

        logger.info("Shutting down Weaviate Console...")
        try:
            await clients.close()
            logger.info("Shutdown completed successfully")
        except Exception as e:
            logger.error(f"Error during shutdown: {e}", exc_info=True)

    app = FastAPI(
        title="Weaviate Console",
        description="Inspect and administer the collections of a Weaviate instance",
        version=__version__,
        lifespan=lifespan
    )

    register_validation_exception_handler(app)

    app.include_router(collections_router, prefix="/api", tags=["Collections"])
    app.include_router(collection_router, prefix="/api", tags=["Collection Data"])
    app.include_router(connection_router, prefix="/api", tags=["Connection"])

    @app.get("/health")
    async def health_check():
        """Simple health check for load balancers and monitoring."""
        return {"status": "healthy", "service": "weaviate-console"}

    return app


app = create_app()


def main():
    import uvicorn

    uvicorn.run(
        "weaviate_console.main:app",
        host="0.0.0.0",
        port=7860,
        log_level="info"
    )


if __name__ == "__main__":
    main()
