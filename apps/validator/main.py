"""FastAPI application entry point.

Format validator API server with endpoints for:
- Liveness check (/health)
- Syntax validation of JSON, XML, YAML, CSV and Emmet text (/validate)
- Supported format listing (/formats)
"""

import logging
import os
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.validator.constants import DEFAULT_API_PORT, SERVICE_VERSION
from apps.validator.observability import configure_logging
from apps.validator.routers import health, validate
from apps.validator.validation import clean_message

configure_logging(
    level=os.getenv("LOG_LEVEL", "INFO"),
    json_output=os.getenv("LOG_FORMAT", "text").lower() == "json",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("=" * 60)
    logger.info("Format Validator - API Server Starting")
    logger.info("=" * 60)

    logger.info(f"Environment: {os.getenv('ENVIRONMENT', 'development')}")
    logger.info(f"Log Level: {os.getenv('LOG_LEVEL', 'INFO')}")
    logger.info(f"CORS Origins: {os.getenv('CORS_ORIGINS', '*')}")

    # Build the shared dispatcher up front so the first request does not pay for it
    validate.get_dispatcher()

    yield

    logger.info("API Server shutting down...")


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="Format Validator API",
    description="Syntax validation for JSON, XML, YAML, CSV and Emmet abbreviations",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

cors_origins = os.getenv("CORS_ORIGINS", "*").split(",")
cors_origins = [origin.strip() for origin in cors_origins if origin.strip()]
if not cors_origins:
    cors_origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)

app.include_router(health.router)
app.include_router(validate.router)


# =============================================================================
# Error Handlers
# =============================================================================


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer unexpected failures in the validate response shape.

    The exception text is only exposed when ENVIRONMENT=development.
    """
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
    logger.error(
        f"Internal error on {request.method} {request.url.path} [request_id={request_id}]",
        exc_info=exc,
    )

    message = f"internal validator error (request_id={request_id})"
    if os.getenv("ENVIRONMENT", "development") == "development":
        message = f"{message}: {type(exc).__name__}: {clean_message(str(exc))}"

    return JSONResponse(
        status_code=500,
        content={"ok": False, "errors": [message], "request_id": request_id},
    )


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.validator.main:app",
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", str(DEFAULT_API_PORT))),
        reload=os.getenv("ENVIRONMENT", "development") == "development",
    )
