"""FastAPI application entry point"""
import os
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from usermanager import __version__
from usermanager.core.config import settings
from usermanager.core.exceptions import UserManagerException, ValidationException
from usermanager.core.logging_config import setup_logging
from usermanager.api.v1 import users
from usermanager.database import init_db, close_db
import uvicorn

# Set up logging
logger = setup_logging("usermanager.main", log_file="app.log")


async def user_manager_exception_handler(request: Request, exc: UserManagerException):
    """Handle custom user manager exceptions"""
    logger.warning(f"Request failed ({exc.status_code}): {exc.detail} - Path: {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed or out-of-domain input as 400 instead of 422"""
    return await user_manager_exception_handler(
        request, ValidationException(jsonable_encoder(exc.errors()))
    )


async def startup_event():
    """Initialize database on startup"""
    logger.info(f"Starting {settings.PROJECT_NAME} API...")
    try:
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise


async def shutdown_event():
    """Close database connections on shutdown"""
    logger.info(f"Shutting down {settings.PROJECT_NAME} API...")
    await close_db()


async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


def mount_static(app: FastAPI, directory: str) -> bool:
    """
    Serve a pre-built client bundle at "/"

    Must be called after all API routes are registered so they take
    precedence over the mount. Returns False when the directory is missing.
    """
    if not os.path.isdir(directory):
        logger.info(f"Static directory {directory} not found; serving API only")
        return False
    app.mount("/", StaticFiles(directory=directory, html=True), name="static")
    logger.info(f"Serving static files from {directory}")
    return True


def create_app(
    api_prefix: Optional[str] = None,
    static_dir: Optional[str] = None
) -> FastAPI:
    """Build the application; arguments default to the loaded settings"""
    if api_prefix is None:
        api_prefix = settings.API_PREFIX
    if static_dir is None:
        static_dir = settings.STATIC_DIR

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="User management API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, specify actual origins
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users.router, prefix=api_prefix)
    app.add_api_route("/health", health_check, methods=["GET"])

    app.add_exception_handler(UserManagerException, user_manager_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.on_event("startup")(startup_event)
    app.on_event("shutdown")(shutdown_event)

    mount_static(app, static_dir)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "usermanager.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
