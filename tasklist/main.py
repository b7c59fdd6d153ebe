import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from redis.exceptions import ConnectionError, TimeoutError

from tasklist.common.exceptions import (
    ResourceNotFoundException,
    resource_not_found_handler,
    unexpected_exception_handler,
    redis_connection_exception_handler,
    validation_exception_handler,
    service_unavailable_response,
    internal_error_response,
    validation_error_response,
)
from tasklist.common.opentelemetry import setup_opentelemetry
from tasklist.common.redis import check_redis_connection, create_redis_client
from tasklist.config import get_settings
from tasklist.tasks.router import router as tasks_router
from tasklist.healthcheck.router import router as health_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.redis_client = create_redis_client(settings.REDIS_URL)
    check_redis_connection(app.state.redis_client)
    yield
    app.state.redis_client.close()


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={
        **service_unavailable_response,
        **internal_error_response,
        **validation_error_response,
    },
    version=settings.TASKLIST_VERSION,
)

if settings.OTEL_ENABLED:
    setup_opentelemetry(settings, app)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(ConnectionError)(redis_connection_exception_handler)
app.exception_handler(TimeoutError)(redis_connection_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(tasks_router)

# Mounted last so the client never shadows the API routes.
if settings.STATIC_ENABLED:
    if os.path.isdir(settings.STATIC_DIR):
        app.mount(
            "/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static"
        )
    else:
        logger.warning(
            f"Static directory '{settings.STATIC_DIR}' not found, client UI disabled"
        )
