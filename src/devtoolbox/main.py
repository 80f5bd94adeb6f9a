"""FastAPI application entry point for DevToolbox."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devtoolbox import __version__
from devtoolbox.api.routes import get_shell, router
from devtoolbox.builtin import builtin_providers
from devtoolbox.config import get_settings

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"Starting DevToolbox v{__version__}")
    settings = get_settings()
    logger.info(f"Debug mode: {settings.debug}")

    shell = get_shell()
    providers = builtin_providers(disabled=set(settings.disabled_tools))
    if settings.disabled_tools:
        logger.info(f"Disabled tools: {settings.disabled_tools}")

    findings = await shell.startup(providers, validate=settings.validate_on_startup)
    if findings:
        logger.warning(f"Tool registry has {len(findings)} validation findings")

    yield

    # Shutdown
    await shell.shutdown()
    logger.info("Shutting down DevToolbox")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="DevToolbox",
        description="Developer utility toolbox",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # CORS middleware for the desktop/web client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    """Run the server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "devtoolbox.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
