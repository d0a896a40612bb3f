"""
FastAPI Application Entry Point.

Путь: blogify/main.py
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blogify import __version__
from blogify.api.routes import articles
from blogify.api.routes import dashboard
from blogify.infrastructure.config.logging_config import setup_logging
from blogify.infrastructure.config.settings import get_settings
from blogify.shared.exceptions.domain_exceptions import (
    BusinessRuleViolation,
    DomainValidationError,
    NotAuthenticatedError,
    SaveInProgressError,
)
from blogify.shared.exceptions.infrastructure_exceptions import BackendError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Доменные и инфраструктурные ошибки → HTTP ответы."""

    @app.exception_handler(DomainValidationError)
    async def validation_error(request: Request, exc: DomainValidationError):
        return _error(422, str(exc))

    @app.exception_handler(BusinessRuleViolation)
    async def rule_violation(request: Request, exc: BusinessRuleViolation):
        return _error(422, str(exc))

    @app.exception_handler(NotAuthenticatedError)
    async def not_authenticated(request: Request, exc: NotAuthenticatedError):
        return _error(401, str(exc))

    @app.exception_handler(SaveInProgressError)
    async def save_in_progress(request: Request, exc: SaveInProgressError):
        return _error(409, str(exc))

    @app.exception_handler(BackendError)
    async def backend_error(request: Request, exc: BackendError):
        logger.warning(f"{request.method} {request.url.path}: backend error {exc.code}: {exc.message}")
        return _error(502, exc.message)


def create_app() -> FastAPI:
    """Создать и настроить приложение."""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Ленты статей, редактор и кабинет автора",
        version=__version__,
        debug=settings.debug,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routes
    app.include_router(articles.router, prefix="/api/v1")
    app.include_router(dashboard.router, prefix="/api/v1")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
        }

    return app


app = create_app()
