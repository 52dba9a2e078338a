"""FastAPI application entry point for the Express Entry draws API."""

import logging
import sys
import time

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings
from errors import register_error_handlers
from services.cache import TTLCache
from services.loader import DatasetLoader
from services.perf import PerformanceStats
from services.store import JsonDrawStore

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(config: Settings | None = None) -> FastAPI:
    config = config or settings
    app = FastAPI(title="Express Entry Draws API", version="2.1.0")

    # Process-local components, shared by every request in this instance
    app.state.settings = config
    app.state.cache = TTLCache(max_size=config.cache_max_size, default_ttl=config.cache_default_ttl)
    app.state.loader = DatasetLoader(
        app.state.cache,
        JsonDrawStore(config.data_dir),
        ttl_seconds=config.dataset_ttl,
    )
    app.state.perf = PerformanceStats()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request logging, timing and security headers
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.error("%s %s - ERROR (%.0fms)", request.method, request.url.path, duration_ms)
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        cache_hit = response.headers.get("X-Cache-Hit") == "true"
        app.state.perf.record_request(duration_ms, cache_hit=cache_hit)
        logger.info("%s %s - %d (%.0fms)", request.method, request.url.path, response.status_code, duration_ms)

        response.headers["X-Response-Time"] = f"{duration_ms:.0f}ms"
        response.headers.setdefault("X-Cache-Hit", "false")
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if config.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.categories import router as categories_router
    from routes.draws import router as draws_router
    from routes.health import router as health_router
    from routes.info import router as info_router

    app.include_router(info_router)
    app.include_router(health_router)
    app.include_router(draws_router)
    app.include_router(categories_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        problems = config.validate()
        if problems:
            logger.warning("Configuration problems (requests may fail): %s", "; ".join(problems))

    return app


app = create_app()
