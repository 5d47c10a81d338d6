"""PromptVault — FastAPI Application Entry Point."""

import asyncio
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from promptvault import __version__
from promptvault.config import settings
from promptvault.database import engine, init_db
from promptvault.errors import MarketplaceError
from promptvault.routers import prompts, users
from promptvault.schemas.envelope import ApiResponse

logger = logging.getLogger(__name__)


def _envelope_error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse.fail(message).model_dump(),
    )


async def marketplace_error_handler(request: Request, exc: MarketplaceError) -> JSONResponse:
    logger.info("%s %s rejected: %s (%s)", request.method, request.url.path, exc.kind, exc.message)
    return _envelope_error(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg', 'Invalid request')}" if location else "Invalid request"
    logger.info("%s %s rejected: InvalidInput (%s)", request.method, request.url.path, message)
    return _envelope_error(422, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _envelope_error(exc.status_code, str(exc.detail))


def create_app() -> FastAPI:
    """Build the application and make sure the record store tables exist."""
    logging.basicConfig(level=settings.LOG_LEVEL)
    init_db(engine)

    # ── CORS origins from env ───────────────────────────────────────────────
    cors_origins = [o.strip() for o in settings.ALLOWED_ORIGINS.split(",") if o.strip()]

    app = FastAPI(
        title="PromptVault",
        description="Marketplace for publishing, buying and rating prompts.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_exception_handler(MarketplaceError, marketplace_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users.router)
    app.include_router(prompts.router)

    @app.on_event("startup")
    async def on_startup():
        """Create the lock that makes calls run one at a time on this loop."""
        app.state.call_lock = asyncio.Lock()

    @app.get("/")
    def root():
        return {
            "name": "PromptVault API",
            "version": __version__,
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.info("PromptVault initialized")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("promptvault.main:app", host="0.0.0.0", port=8000)
