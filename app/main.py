import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.config import settings
from app.database import SessionLocal, check_db_connection, create_tables
from app.utils.exceptions import AppException
from app.middleware.error_handler import (
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    integrity_error_handler,
    database_error_handler,
    generic_exception_handler,
)
from app.services.region_service import region_service

from app.api import cars
from app.api import comments
from app.api import bookings
from app.api import regions
from app.api import income

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def bootstrap() -> None:
    """Create tables and seed default regions. Idempotent; runs on every startup."""
    create_tables()
    db = SessionLocal()
    try:
        added = region_service.seed_defaults(db)
    finally:
        db.close()
    logger.info(f"✅ Regions initialized ({added} added)")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        description="Car rental API: cars, comments, bookings, regions and daily income",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # ─── CORS ─────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ─── Exception Handlers ───────────────────────────────────────────────────
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # ─── Routers ──────────────────────────────────────────────────────────────
    PREFIX = "/api"
    app.include_router(cars.router,     prefix=PREFIX, tags=["Cars"])
    app.include_router(comments.router, prefix=PREFIX, tags=["Comments"])
    app.include_router(bookings.router, prefix=PREFIX, tags=["Bookings"])
    app.include_router(regions.router,  prefix=PREFIX, tags=["Regions"])
    app.include_router(income.router,   prefix=PREFIX, tags=["Income"])

    # ─── Startup ──────────────────────────────────────────────────────────────
    @app.on_event("startup")
    def on_startup():
        ok = check_db_connection()
        logger.info("✅ DB connected" if ok else "❌ DB connection FAILED")
        if ok:
            bootstrap()
        logger.info(f"🚗 {settings.APP_NAME} running on http://{settings.APP_HOST}:{settings.PORT}")

    # ─── Health ───────────────────────────────────────────────────────────────
    @app.get("/health", tags=["Health"])
    def health():
        return {
            "status": "ok",
            "app": settings.APP_NAME,
            "version": "1.0.0",
            "database": check_db_connection(),
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.PORT,
                reload=settings.is_development)
