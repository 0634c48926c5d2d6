"""FastAPI application entry point for the user directory API."""

import logging
import sys

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings as default_settings
from errors import register_error_handlers
from services.cache import TTLCache
from services.repository import UserRepository
from services.store import UserStore
from services.users import UserService

# Structured logging: JSON for production, human-readable for local
if default_settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    missing = settings.validate()
    if missing:
        raise ValueError("Invalid configuration: " + "; ".join(missing))

    app = FastAPI(title="User Directory API", version="1.0.0")

    # Store -> cache -> repository -> service, wired explicitly per app
    cache = TTLCache(ttl_seconds=settings.cache_ttl_seconds)
    repository = UserRepository(UserStore(), cache)
    app.state.settings = settings
    app.state.cache = cache
    app.state.user_service = UserService(repository)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.users import router as users_router

    app.include_router(health_router)
    app.include_router(users_router)

    logger.info("User directory ready (cache TTL %gs)", settings.cache_ttl_seconds)
    return app


app = create_app()
