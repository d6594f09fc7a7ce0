# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager

from fastapi import FastAPI

from author_service.logging import logger
from author_service.middlewares.correlation_id import CorrelationIDMiddleware
from author_service.middlewares.logging_context import (
    LoggingContextMiddleware,
)
from author_service.routing import collect_subrouters
from author_service.storage.db import engine, wait_and_init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Start-up and shutdown hooks of the service.

    Startup waits for the database and creates missing tables; shutdown
    disposes the engine's connection pool.
    """
    logger.info("Author service starting")

    await wait_and_init_db()

    yield  # Application runs here

    await engine.dispose()
    logger.info("Author service stopped, connection pool closed")


def application() -> FastAPI:
    """
    Build the author service app.

    Includes the routers collected by ``collect_subrouters()`` and adds the
    following middleware:
    - `LoggingContextMiddleware`: endpoint/method/status in the log context.
    - `CorrelationIDMiddleware`: request correlation IDs.
    """
    app = FastAPI(
        title="Author service",
        description="CRUD API for authors",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(collect_subrouters())

    # Middlewares (execute in REVERSE order of registration)
    # Execution flow: CorrelationIDMiddleware → LoggingContextMiddleware
    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    return app


app = application()  # Need for fastapi cli
