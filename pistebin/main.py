"""
Pistebin - Main FastAPI application.
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from pistebin import __version__
from pistebin.config import Settings, settings as default_settings
from pistebin.database import PasteDatabase
from pistebin.routes import health, history, pastes

# Configure logging
logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store on startup and close it on shutdown."""
    logger.info("Pistebin application starting...")
    db = PasteDatabase(app.state.settings.DATABASE_PATH)
    db.open()
    app.state.db = db
    logger.info(f"DATABASE: SQLite at {db.path}")
    try:
        yield
    finally:
        logger.info("Pistebin application shutting down...")
        db.close()


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """The only request body is the paste; a malformed one counts as empty content."""
    logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return pastes.error_response(400, pastes.EMPTY_CONTENT_MESSAGE)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build an application bound to one settings object."""
    settings = settings or default_settings

    app = FastAPI(
        title="Pistebin",
        description="A minimal pastebin for sharing text",
        version=__version__,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Add CORS middleware (optional, for cross-origin requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include route modules
    app.include_router(health.router)
    app.include_router(pastes.router)
    app.include_router(history.router)

    # Client assets at the root; mounted last so the routes above win
    if os.path.isdir(settings.STATIC_DIR):
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
    else:
        logger.warning(f"Static directory {settings.STATIC_DIR} not found, not serving assets")

    return app


app = create_app()


def run():
    """Console entry point."""
    import uvicorn
    uvicorn.run(
        "pistebin.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
    )


if __name__ == "__main__":
    run()
