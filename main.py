"""
userstore — FastAPI Application Entry Point

Builds the app around an explicit router and repository, and serves it.
"""

import logging
import contextlib
import traceback

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userstore.adapters.memory_adapter import InMemoryUserAdapter
from userstore.config import settings
from userstore.ports.user_port import UserPort
from userstore.routers import users

# ── Logging ───────────────────────────────────────────────────
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
)
logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"🚀 {settings.app_name} is starting up")
    yield
    # Shutdown
    logger.info(f"🛑 {settings.app_name} is shutting down")


# ── Error rendering ───────────────────────────────────────────
# Error responses carry the bare message as text/plain, not a JSON envelope


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: "
        f"{type(exc).__name__}: {exc}\n{traceback.format_exc()}"
    )
    return PlainTextResponse(
        f"Internal server error: {type(exc).__name__}",
        status_code=500,
    )


# ── App factory ───────────────────────────────────────────────
def create_app(repository: UserPort | None = None) -> FastAPI:
    """
    Build a fresh application. Each app owns its repository, so two apps
    never share state unless the caller hands them the same instance.
    """
    app = FastAPI(
        title=settings.app_name,
        description="In-memory user CRUD service driven by query parameters.",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    if repository is None:
        repository = InMemoryUserAdapter()
    app.state.user_repository = repository

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # ── Routers ───────────────────────────────────────────────
    app.include_router(users.router)

    # ── Health Check ──────────────────────────────────────────
    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "ok", "service": settings.app_name}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
