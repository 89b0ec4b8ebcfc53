"""Main FastAPI application entry point for Taskflow."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import Settings
from config.database import Database
from config.logging_utils import setup_logging
from api.routers.auth import router as auth_router
from api.routers.tasks import router as tasks_router
from services.auth_service import AccountService
from services.errors import ServiceError
from services.stores import TaskStore, UserStore
from services.task_service import TaskService
from services.token_service import TokenService

logger = logging.getLogger(f"taskflow.{__name__}")


def _message(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Map errors to `{"message": ...}` responses. 500s never expose the cause."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
            return _message(500, "Server error")
        return _message(exc.status_code, exc.message, exc.headers)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return _message(404, "Route not found")
        return _message(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _message(400, "Invalid request body")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return _message(500, "Server error")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    Settings are resolved once here and handed to every component. Raises
    a validation error when required configuration such as JWT_SECRET is
    missing, so the process refuses to start.
    """
    settings = settings or Settings()
    database = database or Database(settings)
    setup_logging(settings.DEBUG)

    user_store = UserStore(database)
    task_store = TaskStore(database)
    token_service = TokenService(settings.JWT_SECRET, settings.JWT_ALGORITHM)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle startup and shutdown events."""
        if not database.is_connected:
            await database.connect()
        logger.info(f"Connected to MongoDB: {settings.DATABASE_NAME}")
        await user_store.create_indexes()
        await task_store.create_indexes()
        logger.info("Database indexes created")
        yield
        await database.disconnect()
        logger.info("Disconnected from MongoDB")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Multi-user task tracking API",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.database = database
    app.state.token_service = token_service
    app.state.account_service = AccountService(user_store, token_service, settings.BCRYPT_ROUNDS)
    app.state.task_service = TaskService(task_store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(tasks_router)
    register_exception_handlers(app)

    @app.get("/")
    async def root():
        """API status endpoint."""
        return {"status": "OK", "message": "API Running"}

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        db_healthy = await database.health_check()
        return {
            "status": "healthy" if db_healthy else "unhealthy",
            "database": "connected" if db_healthy else "disconnected"
        }

    return app


if __name__ == "__main__":
    import uvicorn
    settings = Settings()
    uvicorn.run(
        "app:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
