from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from api.routers import tracks
from config import settings
from infra.database.connection import Database
from utils.logger import get_logger

logger = get_logger(__name__)

def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message

def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the API around a storage handle.
    Tests pass their own Database; otherwise one is built from settings.
    """
    if database is None:
        database = Database.from_settings(settings)

    # Lifespan event to handle startup/shutdown
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # refuse to serve if storage is unreachable
        database.authenticate()
        logger.info("API connected to database")
        if settings.CREATE_SCHEMA_ON_STARTUP:
            database.create_schema()
        yield
        database.close()

    app = FastAPI(title="Track Library API", lifespan=lifespan)
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # every error leaves the API as {"error": "..."}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _describe_validation_error(exc)})

    # Root endpoint for health check
    @app.get("/")
    async def root():
        return {"message": "Track Library API is running"}

    app.include_router(tracks.router)

    return app
