from __future__ import annotations

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from academy.config.logging import get_logger, setup_logging
from academy.config.settings import settings
from academy.core.exceptions import AcademyException
from academy.core.responses import create_error_response
from academy.db.init_db import init_db
from academy.web.pages import render_not_found_page
from academy.web.routes import router as pages_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # For production, manage the schema with migrations
    if not settings.is_production():
        init_db()
    yield


def register_exception_handlers(app: FastAPI) -> None:
    """
    Unknown paths render the HTML not-found page; other HTTP errors and
    application exceptions use the JSON error envelope.
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            logger.info(f"Page not found: {request.url.path}")
            return HTMLResponse(render_not_found_page(), status_code=404)
        return create_error_response(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(AcademyException)
    async def academy_exception_handler(request: Request, exc: AcademyException):
        logger.warning(
            f"Application exception: {exc.error_code.value} - {exc.message}",
            extra={"path": request.url.path, "method": request.method},
        )
        return create_error_response(
            exc.message,
            status_code=exc.status_code,
            details=exc.details,
            code=exc.error_code.value,
        )


def create_app(run_migrations: bool = True) -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures logging, title, version and debug mode from Settings.
    - Registers the not-found page and error envelopes.
    - Includes the public page routes.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        lifespan=lifespan if run_migrations else None,
    )

    register_exception_handlers(app)
    app.include_router(pages_router)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn (development entry point)."""
    uvicorn.run("academy.main:app", host="0.0.0.0", port=8000, reload=settings.is_development())


if __name__ == "__main__":
    run()
