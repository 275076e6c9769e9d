"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from medsearch import __version__
from medsearch.api.deps import get_engine, set_engine
from medsearch.api.v1.router import router as v1_router
from medsearch.config.settings import Settings
from medsearch.core.engine import SearchEngine
from medsearch.observability.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, engine: SearchEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads the YAML file named by
            ``MEDSEARCH_CONFIG`` (default ``medsearch-config.yaml``) when it
            exists, otherwise the environment.
        engine: Prebuilt engine. If None, one is built from ``settings`` at startup.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        yaml_path = Path(os.environ.get("MEDSEARCH_CONFIG", "medsearch-config.yaml"))
        if yaml_path.exists():
            logger.info("Loading configuration from %s", yaml_path)
            settings = Settings.from_yaml(yaml_path)
        else:
            settings = Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        setup_logging(settings.observability)
        logger.info("Starting MedSearch v%s", __version__)

        app.state.settings = settings
        app.state.engine = engine or SearchEngine.from_settings(settings)
        set_engine(app.state.engine)

        logger.info("MedSearch is ready: %s", app.state.engine.registry.counts())
        yield

        set_engine(None)
        logger.info("MedSearch shutdown complete")

    app = FastAPI(
        title="MedSearch",
        description="Federated search and ranking over clinical cases, articles, courses and archive entries.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/v1")

    if engine is not None:
        # Usable without running the lifespan (e.g. TestClient outside a with-block)
        app.dependency_overrides[get_engine] = lambda: engine

    return app
