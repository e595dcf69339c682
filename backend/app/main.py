import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.db.memory import MemoryStorage
from app.db.repository import Storage
from app.db.sql import SqlStorage
from app.services.webhook import WebhookRelay

# Import API routers
from app.api.api import api_router
from app.api.routes import webhook

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

logger = logging.getLogger("app")


def build_storage() -> Storage:
    """Pick the storage backend named by STORAGE_BACKEND."""
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "sql":
        return SqlStorage()
    if backend == "memory":
        return MemoryStorage(seed=settings.SEED_DEMO_DATA)
    raise ValueError(f"Unknown STORAGE_BACKEND '{settings.STORAGE_BACKEND}' (expected 'memory' or 'sql')")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables (and demo data) on startup when running on SQL."""
    storage = app.state.storage
    if isinstance(storage, SqlStorage):
        storage.create_tables()
        if settings.SEED_DEMO_DATA:
            storage.seed()
    logger.info(f"{settings.APP_NAME} started with {type(storage).__name__}")
    yield


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report invalid request bodies as 400 with the list of problems."""
    logger.warning(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} validation error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(
    storage: Optional[Storage] = None,
    webhook_relay: Optional[WebhookRelay] = None,
) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description="Recruiting pipeline API: jobs, candidates, scheduling and n8n webhook relay",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.storage = storage if storage is not None else build_storage()
    app.state.webhook_relay = webhook_relay if webhook_relay is not None else WebhookRelay.from_settings()

    # CORS Middleware - allowlist from env (comma-separated)
    allowed_origins = [
        origin.strip()
        for origin in settings.BACKEND_CORS_ORIGINS.split(",")
        if origin.strip()
    ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        return {"message": f"Welcome to {settings.APP_NAME} API"}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    # Resource API under /api, n8n relay under /webhook
    app.include_router(api_router, prefix="/api")
    app.include_router(webhook.router, prefix="/webhook", tags=["Webhook"])

    return app


app = create_app()
