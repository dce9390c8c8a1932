# =============================================
# jobtracker/main.py
# =============================================
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging
import time
import uvicorn

from jobtracker.api.v1.router import api_router
from jobtracker.config.database import DocumentStore, get_store
from jobtracker.config.settings import Settings, configure_logging, get_settings
from jobtracker.core.exception_handlers import register_exception_handlers

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """Build the API around an explicitly constructed document store"""
    settings = settings or get_settings()
    store = store or DocumentStore.from_settings(settings)

    # =============================================
    # LIFESPAN CONTEXT MANAGER
    # =============================================
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan events"""
        logger.info(f"Starting {settings.APP_NAME} v{settings.VERSION}...")
        await store.create_tables()
        logger.info(f"{settings.APP_NAME} started successfully")

        yield

        logger.info(f"Shutting down {settings.APP_NAME}...")
        await store.dispose()

    # =============================================
    # FASTAPI APPLICATION
    # =============================================
    app = FastAPI(
        title=settings.APP_NAME,
        description="Track job applications and professional contacts.",
        version=settings.VERSION,
        openapi_tags=[
            {"name": "Applications", "description": "Tracked job applications"},
            {"name": "Contacts", "description": "Professional contacts"},
            {"name": "Health", "description": "Health checks and status"},
        ],
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )
    app.state.settings = settings
    app.state.store = store

    # =============================================
    # MIDDLEWARE CONFIGURATION
    # =============================================

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every request and add its processing time to the response"""
        start_time = time.time()
        logger.info(f"Request: {request.method} {request.url.path}")

        response = await call_next(request)

        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        logger.info(
            f"Response: {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Time: {process_time:.4f}s"
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_HOSTS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Process-Time"],
    )

    # ==========================================
    # EXCEPTION HANDLERS
    # ==========================================
    register_exception_handlers(app)

    # ==========================================
    # ROUTERS
    # ==========================================
    app.include_router(api_router, prefix="/api")

    # ==========================================
    # BASIC ROUTES
    # ==========================================
    @app.get("/", tags=["Health"])
    async def root():
        return {
            "message": settings.APP_NAME,
            "version": settings.VERSION,
            "health": "/health"
        }

    @app.get("/health", tags=["Health"])
    async def health(request: Request):
        database_ok = await get_store(request).check_health()
        return {
            "status": "healthy" if database_ok else "degraded",
            "database": "connected" if database_ok else "disconnected",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT
        }

    return app


# =============================================
# DEFAULT APPLICATION
# =============================================
configure_logging(get_settings())
app = create_app()

# =============================================
# DEVELOPMENT SERVER
# =============================================
if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "jobtracker.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info" if settings.DEBUG else "warning",
        access_log=settings.DEBUG
    )
