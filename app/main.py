from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import cast

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ExceptionHandler

from app.api.router import router as api_router
from app.api.seo_api import router as seo_router
from app.core.config import InvalidSettingsError
from app.core.errors import (
    content_unavailable_exception_handler,
    http_exception_handler,
    invalid_input_exception_handler,
    rate_limit_exception_handler,
    request_validation_exception_handler,
    unhandled_exception_handler,
)
from app.core.exceptions import ContentSourceUnavailableError, InvalidInputError
from app.core.lifespan import lifespan
from app.core.logging import configure_logging
from app.core.rate_limit import limiter
from app.services.providers import build_services

# Import settings - this may raise InvalidSettingsError
try:
    from app.core.config import settings
except InvalidSettingsError as e:
    print("ERROR: Invalid environment variable values:", file=sys.stderr)
    for field, message in e.invalid_fields:
        print(f"  - {field}: {message}", file=sys.stderr)
    print(
        "\nPlease update these in your environment or .env file",
        file=sys.stderr,
    )
    sys.exit(1)


def create_app() -> FastAPI:
    configure_logging()

    try:
        api_version = version("tourwise-content-engine")
    except PackageNotFoundError:
        api_version = "0.1.0"  # Fallback if package not installed
        logging.warning("tourwise-content-engine package not found, using fallback version 0.1.0")

    is_debug_mode = settings.environment == "local"
    app = FastAPI(
        title=settings.app_name,
        version=api_version,
        debug=is_debug_mode,
        lifespan=lifespan,
    )
    app.add_exception_handler(
        StarletteHTTPException, cast(ExceptionHandler, http_exception_handler)
    )
    app.add_exception_handler(
        RequestValidationError, cast(ExceptionHandler, request_validation_exception_handler)
    )
    app.add_exception_handler(
        RateLimitExceeded, cast(ExceptionHandler, rate_limit_exception_handler)
    )
    app.add_exception_handler(
        InvalidInputError, cast(ExceptionHandler, invalid_input_exception_handler)
    )
    app.add_exception_handler(
        ContentSourceUnavailableError,
        cast(ExceptionHandler, content_unavailable_exception_handler),
    )
    app.add_exception_handler(Exception, cast(ExceptionHandler, unhandled_exception_handler))
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.include_router(api_router, prefix="/api")
    app.include_router(seo_router, tags=["seo"])

    app.state.services = build_services(settings)

    return app


app = create_app()
