import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.api import router as api_router
from app.api.core.config import settings
from app.api.core.domain_exceptions import MarketplaceError
from app.api.core.exceptions import (
    general_exception_handler,
    http_exception_handler,
    marketplace_exception_handler,
    validation_exception_handler,
)
from app.api.core.logger import setup_logging
from app.api.db.database import Base, engine
from app.api.events.factory import build_event_publisher
from app.api.events.publisher import LoggingEventPublisher
from app.api.utils.response_payloads import success_response

setup_logging()
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize resources on startup and release them on shutdown.

    Creates missing tables and builds the inquiry event publisher. If Redis
    is enabled but unreachable, events fall back to the log.

    Args:
        app (FastAPI): FastAPI application instance supplied by the framework.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        app.state.event_publisher = await asyncio.wait_for(
            build_event_publisher(settings), timeout=10.0
        )
    except asyncio.TimeoutError:
        logger.error("Timeout initializing event publisher (Redis may be unreachable)")
        app.state.event_publisher = LoggingEventPublisher()
    except Exception as exc:
        logger.error(f"Failed to initialize event publisher: {exc}", exc_info=True)
        app.state.event_publisher = LoggingEventPublisher()

    try:
        yield
    finally:
        await app.state.event_publisher.close()
        await engine.dispose()


app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description=f"{settings.APP_NAME} API connecting companies with ISO consultants",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

APP_URL = settings.APP_URL
DEV_URL = settings.DEV_URL

app.add_middleware(
    CORSMiddleware,
    allow_origins=[APP_URL, DEV_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(MarketplaceError, marketplace_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(api_router)


@app.get("/")
def read_root():
    return success_response(
        status_code=200,
        message=f"{settings.APP_NAME} API is running...",
        data={
            "version": settings.APP_VERSION,
            "environment": "Production" if not settings.DEBUG else "Development",
        },
    )


@app.get("/health")
def health_check():
    return success_response(status_code=200, message="API is healthy")


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.APP_PORT, reload=False)
