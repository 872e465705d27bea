from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config.settings import Settings, settings as default_settings
from app.database.session import create_store
from app.endpoints.router import build_api_router
from app.exceptions import (
    BaseAPIException,
    base_api_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API application.
    Each call gets its own store, so tests can create isolated apps.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION
    )

    app.state.settings = settings
    app.state.store = create_store(settings)

    app.add_exception_handler(BaseAPIException, base_api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API Router
    app.include_router(build_api_router(settings.API_PREFIX))

    @app.get("/")
    def root():
        """
        Root endpoint for health check.
        """
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    logger.info(f"{settings.PROJECT_NAME} {settings.PROJECT_VERSION} ready, API under {settings.API_PREFIX}")
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=default_settings.PORT, reload=True)
