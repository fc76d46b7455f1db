"""player-auth FastAPI application."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from player_auth.config import settings
from player_auth.database import engine, init_db
from player_auth.errors import StorageError
from player_auth.routers import api

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from settings.log_level."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    init_db(engine)
    logger.info("Auth code table ready at %s", engine.url.render_as_string())
    yield


app = FastAPI(
    title="player-auth",
    description="Single-use authentication codes linking game players to chat accounts",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(api.router)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    """Answer 503 without exposing database details."""
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"error": "Storage unavailable"})


@app.get("/health")
def health():
    """Liveness probe."""
    return {"status": "ok"}


def main():
    """Run the application."""
    configure_logging()
    uvicorn.run(
        "player_auth.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
