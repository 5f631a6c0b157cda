import logging
import os
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.exceptions import VidShareError
from .core.logging_config import setup_logging
from .core.media_storage import MediaStore
from .schemas.common import HealthResponse

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Every failure leaves the API as {"error": message}. Unexpected exceptions
    are logged in full and reported with a generic message only.
    """

    @app.exception_handler(VidShareError)
    async def domain_error_handler(request: Request, exc: VidShareError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        location = ".".join(str(part) for part in errors[0].get("loc", ())) if errors else ""
        message = f"Invalid request: {location}" if location else "Invalid request"
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Server error"},
        )


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Builds the application with its own database handle and media store.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.LOG_LEVEL)

    app = FastAPI(
        title="VidShare",
        description="Video sharing backend: accounts, uploads, feed, likes and comments.",
        version="0.1.0"
    )

    database = Database(app_settings.DATABASE_URL)
    media_store = MediaStore(
        root_dir=app_settings.UPLOAD_DIR,
        max_file_size=app_settings.MAX_UPLOAD_SIZE_BYTES,
        chunk_size=app_settings.UPLOAD_CHUNK_SIZE,
    )
    app.state.settings = app_settings
    app.state.database = database
    app.state.media_store = media_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.on_event("startup")
    def on_startup():
        """
        Actions to perform on application startup.
        """
        logger.info("Application is starting up...")
        database.open()
        database.create_tables()
        media_store.ensure_dirs()
        os.makedirs(app_settings.FRONTEND_DIR, exist_ok=True)
        logger.info("Startup actions finished.")

    @app.on_event("shutdown")
    def on_shutdown():
        database.close()

    @app.get("/", tags=["Root"], include_in_schema=False)
    def read_root():
        """
        Serves the frontend entry document when one is deployed.
        """
        index_path = os.path.join(app_settings.FRONTEND_DIR, "index.html")
        if os.path.isfile(index_path):
            return FileResponse(index_path)
        return {"status": "ok", "message": "Welcome to VidShare!"}

    @app.get("/api/health", response_model=HealthResponse, tags=["Root"])
    def health():
        return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc).isoformat())

    from .routers import auth, videos, interactions, users

    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(videos.router, prefix="/api/videos", tags=["Videos"])
    app.include_router(interactions.router, prefix="/api/videos", tags=["Likes & Comments"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])

    # Both directories are created on startup, hence check_dir=False here.
    app.mount("/uploads", StaticFiles(directory=app_settings.UPLOAD_DIR, check_dir=False), name="uploads")
    # Mounted last so every API route and /uploads match first; the frontend
    # gets its own directory so the database file and .env stay private.
    app.mount(
        "/",
        StaticFiles(directory=app_settings.FRONTEND_DIR, html=True, check_dir=False),
        name="frontend",
    )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
