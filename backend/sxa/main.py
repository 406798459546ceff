"""
FastAPI entry point for the SXA (Sport eXperience Analyzer) API
"""

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from sxa.config.base import Settings, settings as default_settings
from sxa.errors import SXAError
from sxa.models.analysis import HealthResponse
from sxa.routers.api import router as api_router
from sxa.services.analysis_service import AnalysisService
from sxa.services.database import Database
from sxa.services.profile_store import ProfileStore, UnavailableProfileStore
from sxa.services.session_store import SessionStore, UnavailableSessionStore
from sxa.services.upload_service import LocalUploadStorage, UnavailableUploadStorage
from sxa.utils.logger import get_logger

logger = get_logger(__name__)


def init_database(settings: Settings) -> Optional[Database]:
    """Persistence is optional; a backend that cannot start leaves the API running without it"""
    if not settings.PERSISTENCE_ENABLED:
        logger.warning("⚠️ Persistence disabled, running without a database")
        return None
    try:
        return Database(settings.DATABASE_URL, echo=settings.DEBUG)
    except Exception as e:
        logger.warning(f"⚠️ Database failed to initialize, running without persistence: {e}")
        return None


def init_upload_storage(settings: Settings):
    if not settings.UPLOADS_ENABLED:
        logger.warning("⚠️ Uploads disabled")
        return UnavailableUploadStorage()
    try:
        return LocalUploadStorage(settings.UPLOAD_DIR, settings.ALLOWED_EXTENSIONS, settings.MAX_FILE_SIZE)
    except OSError as e:
        logger.warning(f"⚠️ Upload storage failed to initialize: {e}")
        return UnavailableUploadStorage()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(f"🚀 Starting {settings.APP_NAME} {settings.VERSION}")

    database = init_database(settings)
    app.state.database = database
    if database is not None:
        app.state.session_store = SessionStore(database)
        app.state.profile_store = ProfileStore(database)
    else:
        app.state.session_store = UnavailableSessionStore()
        app.state.profile_store = UnavailableProfileStore()

    app.state.upload_storage = init_upload_storage(settings)
    app.state.analysis_service = AnalysisService(
        app.state.session_store,
        scoring_mode=settings.SCORING_MODE,
        placeholder_seed=settings.PLACEHOLDER_SEED,
    )
    logger.info(f"✅ Scoring mode: {settings.SCORING_MODE}")

    try:
        yield
    finally:
        if database is not None:
            database.dispose()
        logger.info("🛑 Application shutting down...")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request"""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {duration_ms:.1f}ms")
        return response


def register_exception_handlers(app: FastAPI):

    @app.exception_handler(SXAError)
    async def sxa_error_handler(request: Request, exc: SXAError):
        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
        else:
            message = "Invalid request."
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and exc.detail == "Not Found":
            message = f"Route {request.method} {request.url.path} not found."
        else:
            message = str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error."})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title=settings.APP_NAME,
        description="Scores athletic movement, generates coaching insights and stores sessions",
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.DEBUG else settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    app.include_router(api_router, tags=["SXA"])

    # Serve stored uploads
    if settings.UPLOADS_ENABLED:
        app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")

    @app.get("/")
    async def root():
        return {"message": settings.APP_NAME, "version": settings.VERSION}

    @app.get("/health", response_model=HealthResponse)
    def health_check(request: Request):
        database = request.app.state.database
        return HealthResponse(
            status="ok",
            service=settings.APP_NAME,
            version=settings.VERSION,
            timestamp=datetime.now(timezone.utc).isoformat(),
            db="connected" if database is not None and database.ping() else "not connected",
            uploads="available" if request.app.state.upload_storage.available else "unavailable",
            scoring_mode=settings.SCORING_MODE,
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.API_HOST, port=default_settings.API_PORT)
