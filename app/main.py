# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the AuraVibe settings API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    ConfigStoreException,
    config_store_exception_handler,
    validation_exception_handler,
)
from app.routers import (
    fortune_pricing,
    gift_settings,
    health,
    premium_settings,
    token_settings,
    wallet_settings,
)
from app.routers import settings as settings_routes
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is created lazily on first use, so startup only
    reports the configuration.
    """
    logger.info(f"Starting settings API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down settings API")


# Create FastAPI application
app = FastAPI(
    title="AuraVibe Settings API",
    description="""
## Settings & Pricing Configuration

Admin-managed configuration for the AuraVibe app.

### Settings kinds

| Kind | Examples | Reads | Writes |
|------|----------|-------|--------|
| **Keyed** | `verification_price` | public | admin |
| **Fortune pricing** | per-fortune prices, daily free fortunes | admin panel + public display | admin |
| **Wallet** | minimum withdrawal, level threshold | public | admin |
| **Gifts** | platform / creator split | public | admin |
| **Premium** | monthly price | public | admin |
| **Tokens** | token packages, token value | public | admin |

Unset settings are served with their defaults. Writes patch only the
fields you send.

### Quick Start

```bash
# Read wallet settings
curl http://localhost:8000/api/v1/wallet-settings

# Change the daily free coffee fortunes (admin token required)
curl -X PATCH http://localhost:8000/api/v1/fortune-pricing \\
  -H "Authorization: Bearer $TOKEN" \\
  -H "Content-Type: application/json" \\
  -d '{"dailyFreeCoffee": 2}'
```
""",
    version=health.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Inspect how the service sees the caller",
        },
        {
            "name": "Settings",
            "description": "Keyed settings (key -> string value)",
        },
        {
            "name": "Fortune Pricing",
            "description": "Per-fortune prices and daily free allowances",
        },
        {
            "name": "Wallet Settings",
            "description": "Withdrawal limits and gift levels",
        },
        {
            "name": "Gift Settings",
            "description": "Gift revenue split",
        },
        {
            "name": "Premium Settings",
            "description": "Premium subscription configuration",
        },
        {
            "name": "Token Settings",
            "description": "Token shop packages and token value",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(ConfigStoreException)
async def handle_config_store_exception(request: Request, exc: ConfigStoreException):
    """Handle settings API exceptions."""
    return await config_store_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies and parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    auth_routes.router,
    prefix="/api/v1/auth",
    tags=["Auth"]
)

app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

app.include_router(
    settings_routes.router,
    prefix="/api/v1/settings",
    tags=["Settings"]
)

app.include_router(
    fortune_pricing.router,
    prefix="/api/v1/fortune-pricing",
    tags=["Fortune Pricing"]
)

app.include_router(
    wallet_settings.router,
    prefix="/api/v1/wallet-settings",
    tags=["Wallet Settings"]
)

app.include_router(
    gift_settings.router,
    prefix="/api/v1/gift-settings",
    tags=["Gift Settings"]
)

app.include_router(
    premium_settings.router,
    prefix="/api/v1/premium-settings",
    tags=["Premium Settings"]
)

app.include_router(
    token_settings.router,
    prefix="/api/v1/token-settings",
    tags=["Token Settings"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "AuraVibe Settings API",
        "version": health.VERSION,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
