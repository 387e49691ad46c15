"""
Marketplace - Application Entry Point
=======================================
FastAPI app initialization, middleware, and router registration.
"""

import logging
import time as _time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from config.database import Base, engine
from common.response import envelope

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
http_logger = logging.getLogger("marketplace.http")

# ==========================================
# Import ALL models so Base can see them
# ==========================================
from modules.catalog.models import Category, Product  # noqa: F401
from modules.cart.models import Cart, CartLine  # noqa: F401

# ==========================================
# Import routers
# ==========================================
from modules.catalog.routes import router as catalog_router
from modules.cart.routes import router as cart_router


@asynccontextmanager
async def lifespan(app):
    # Auto-create any missing tables (safe for existing tables)
    Base.metadata.create_all(bind=engine)
    http_logger.info(f"{settings.APP_TITLE} {settings.APP_VERSION} started")
    yield


# ==========================================
# Create App
# ==========================================
app = FastAPI(
    title=settings.APP_TITLE,
    description="The Marketplace API description",
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url=None,
    lifespan=lifespan,
)


# ==========================================
# Exception handlers: everything leaves as the envelope
# ==========================================

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return envelope(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Body/query validation failures are a 400 with the first problem as message."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        if first.get("type") == "json_invalid":
            return envelope(400, "Invalid JSON body")
        # int parts are list indexes or JSON char offsets, not field names
        field = ".".join(
            p for p in first.get("loc", ())
            if isinstance(p, str) and p not in ("body", "query")
        )
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", message)
    return envelope(400, message)


app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)


# ==========================================
# Middleware: Request Log
# ==========================================
_SKIP_PATHS = ("/health", "/docs", "/openapi.json", "/favicon.ico")


@app.middleware("http")
async def request_logger(request: Request, call_next):
    """Log method, path, status and elapsed time of every request."""
    path = request.url.path
    if any(path.startswith(p) for p in _SKIP_PATHS):
        return await call_next(request)

    start = _time.time()
    response = await call_next(request)
    elapsed_ms = int((_time.time() - start) * 1000)
    http_logger.info(f"{request.method} {path} -> {response.status_code} ({elapsed_ms} ms)")
    return response


# ==========================================
# Register Routers
# ==========================================
app.include_router(catalog_router)
app.include_router(cart_router)


# ==========================================
# Health check
# ==========================================
@app.get("/health")
async def health():
    return {"status": "ok", "version": settings.APP_VERSION}
