import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.responses import JSONResponse

from emulator.api.v1 import cpns, emulate, orders
from emulator.core.config import Settings, settings as default_settings
from emulator.core.errors import CatalogError
from emulator.middleware.metrics import PrometheusMiddleware, metrics_endpoint
from emulator.services.catalog_service import load_catalog
from emulator.services.delay_service import DelayEmulator

logger = logging.getLogger(__name__)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Report catalog failures as explicit server errors, never as fake data."""
    request_id = request.headers.get("x-request-id")
    logger.error(f"Request {request_id} failed: {exc}")
    return JSONResponse(
        status_code=500,
        content={"status": "error", "messages": [str(exc)], "data": None},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the emulator application.

    Args:
        settings: Configuration, the environment-derived settings when None
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup and shutdown events."""
        logger.info("Starting emulator...")

        # Invalid bounds or catalog abort startup
        app.state.delay_emulator = DelayEmulator.from_settings(settings)
        logger.info(
            f"Response delay {settings.DELAY_MIN_MS} - {settings.DELAY_MAX_MS} ms"
        )
        app.state.catalog = load_catalog(settings.CPN_CATALOG_PATH)

        yield

        logger.info("Stopping emulator")

    app = FastAPI(
        title="CPN Order Emulator",
        version="1.0.0",
        description="Synthetic coupon order responses with emulated latency",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    # Prometheus Metrics Middleware (must be first to capture all requests)
    app.add_middleware(PrometheusMiddleware)

    app.add_exception_handler(CatalogError, catalog_error_handler)

    app.include_router(orders.router, prefix=settings.API_PREFIX, tags=["orders"])
    app.include_router(cpns.router, prefix=settings.API_PREFIX, tags=["cpns"])
    app.include_router(emulate.router, prefix=settings.API_PREFIX, tags=["emulate"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    # Prometheus metrics endpoint
    app.add_route("/metrics", metrics_endpoint)

    return app


logging.basicConfig(
    level=default_settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = create_app()
