"""FastAPI application for the knowledge graph explorer.

Serves the 3D explorer page and the JSON endpoints behind it. The triple
dataset is loaded once at startup and held read-only for the process.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kgexplorer import __version__
from kgexplorer.api.graph import router as graph_router
from kgexplorer.api.routes import router
from kgexplorer.config import Settings, settings as default_settings
from kgexplorer.storage import DatasetLoader

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifespan - load the dataset on startup."""
    app_settings: Settings = app.state.settings

    # Startup
    logger.info("Starting kgexplorer API...")

    if getattr(app.state, "dataset", None) is None:
        loader = DatasetLoader(
            path=app_settings.dataset_path,
            url=app_settings.dataset_url,
            timeout=app_settings.dataset_timeout,
        )
        app.state.dataset = await loader.load_state()

    if app.state.dataset.loaded:
        logger.info(f"Dataset ready: {len(app.state.dataset.triples)} triples")
    else:
        logger.error(f"Serving without data: {app.state.dataset.error}")

    yield

    # Shutdown
    logger.info("Shutting down kgexplorer API...")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="kgexplorer",
        description="Explorer for subject-predicate-object triples from research publications",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings or default_settings
    app.state.dataset = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routes
    app.include_router(router)
    app.include_router(graph_router)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=default_settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "kgexplorer.api.main:app",
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_debug,
    )
