from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from poster_service.config import settings
from poster_service.db.session import shutdown
from poster_service.dependencies import DB
from poster_service.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    UnexpectedError,
    ValidationError,
)
from poster_service.logging import get_logger
from poster_service.middleware import RequestIDMiddleware
from poster_service.routers import admin, banner, feedback, images, template
from poster_service.schemas.error import ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager: code before yield runs on startup, after yield on shutdown.

    Shutdown: close database connections gracefully.
    """
    logger.info("startup", api_prefix=settings.api_prefix, docs_url=settings.docs_url)
    yield
    await shutdown()


app = FastAPI(title=settings.app_title, docs_url=settings.docs_url, lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (images, admin, banner, feedback, template):
    app.include_router(module.router, prefix=settings.api_prefix)


def _error_json(message: str, error: str) -> dict[str, object]:
    """Build the standard error envelope as a dict for JSONResponse."""
    return ErrorResponse(message=message, error=error).model_dump()


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Return 404 naming the identity or owner tag that matched nothing."""
    return JSONResponse(status_code=404, content=_error_json(exc.message, exc.error))


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    """Return 400 for a unique-field collision, whether caught by the pre-check or the store."""
    logger.warning("conflict", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=400, content=_error_json(exc.message, exc.error))


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("validation_error", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=400, content=_error_json(exc.message, exc.error))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies (wrong JSON types, unparsable JSON) as 400, not 422."""
    detail = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.warning("validation_error", error=detail, path=request.url.path)
    return JSONResponse(status_code=400, content=_error_json("Invalid request body.", detail))


@app.exception_handler(UnexpectedError)
async def unexpected_error_handler(request: Request, exc: UnexpectedError) -> JSONResponse:
    """Store failures: already logged with traceback where they were translated."""
    return JSONResponse(status_code=500, content=_error_json(exc.message, exc.error))


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Return 400 for any other domain-level violation."""
    logger.warning("domain_error", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=400, content=_error_json(exc.message, exc.error))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a generic 500.

    - Logs full exception with traceback (includes request_id from context)
    - Returns only the exception type to the client (no stack traces leaked)
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=500,
        content=_error_json("Server Error", type(exc).__name__),
    )


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """Health check endpoint: verifies database connectivity.

    Returns 200 OK only if the database responds to a ping query.
    """
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}
