"""FastAPI application factory for the Medicina Digital API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..assist import TextAssist, set_text_assist
from ..remote import RemoteTextModel
from ..store import init_entity_store
from .config import APIConfig, get_config
from .routers import (
    dashboard_router,
    documents_router,
    doctors_router,
    health_router,
    hospitals_router,
    patients_router,
    settings_router,
)

logger = logging.getLogger(__name__)

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    config: APIConfig = app.state.config

    init_entity_store()

    model: RemoteTextModel | None = None
    if config.assist_enabled:
        logger.info("Text assist enabled with model %s", config.assist_model)
        model = RemoteTextModel(
            endpoint=config.assist_endpoint,
            api_key=config.assist_api_key,
            model=config.assist_model,
            timeout=config.assist_timeout,
        )
    else:
        logger.info("Text assist disabled (no MEDICINA_ASSIST_API_KEY)")
    set_text_assist(TextAssist(model, retries=config.assist_retries))

    yield

    if model is not None:
        logger.info("Shutting down...")
        await model.close()


def create_app(config: APIConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Optional configuration. If None, loads from environment.

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = get_config()

    app = FastAPI(
        title="Medicina Digital API",
        description="Clinic records, medical certificates and prescriptions",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=config.cors_allow_credentials,
        allow_methods=config.cors_allow_methods,
        allow_headers=config.cors_allow_headers,
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(patients_router, prefix="/api")
    app.include_router(doctors_router, prefix="/api")
    app.include_router(hospitals_router, prefix="/api")
    app.include_router(settings_router, prefix="/api")
    app.include_router(dashboard_router, prefix="/api")
    app.include_router(documents_router, prefix="/api")

    return app


# Default app instance for uvicorn
app = create_app()


def main():
    """Entry point for the medicina-serve command."""
    import uvicorn

    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "medicina.api.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )


if __name__ == "__main__":
    main()
