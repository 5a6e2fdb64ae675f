"""Main application module."""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tindev.api.routes import router as api_router
from tindev.core.config import settings
from tindev.core.exceptions import handle_error
from tindev.core.logging import get_logger, setup_logging
from tindev.database import close_db, init_db
from tindev.services.matching import ScopeLocks
from tindev.services.media import PublitioClient

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager."""
    setup_logging(
        log_level=settings.LOG_LEVEL,
        json_logs=settings.LOG_JSON,
        log_file=settings.get_log_file(),
    )
    media_client = PublitioClient.from_settings()
    try:
        logger.debug("Starting application initialization")

        await init_db()

        await media_client.init()
        app.state.media_client = media_client
        app.state.scope_locks = ScopeLocks()

        logger.info("Application startup complete", version=settings.VERSION,
                    environment=settings.ENVIRONMENT)
        yield

    except Exception:
        logger.error("Error during startup", exc_info=True)
        raise
    finally:
        logger.info("Starting application shutdown")
        if media_client.initialized:
            await media_client.close()
        await close_db()
        logger.info("Application shutdown complete")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", path=request.url.path, method=request.method, exc_info=exc)
    return JSONResponse(status_code=500, content=handle_error(exc))


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Swipe-to-match recruiting API for developers and companies",
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app = create_app()
