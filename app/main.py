from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from app.api import routes as weather_routes
from app.config import get_settings
from app.middleware.request_tracker import RequestTrackerMiddleware
from app.utils.dependencies import build_weather_client
from app.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Weather Proxy API...")

    try:
        app.state.weather_client = build_weather_client(settings)
    except Exception as e:
        logger.error("Failed to initialize services", extra={"error": str(e)})
        raise

    yield

    logger.info("Shutting down Weather Proxy API...")

    await app.state.weather_client.close()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.add_middleware(RequestTrackerMiddleware)

Instrumentator().instrument(app).expose(app, endpoint="/prometheus-metrics")

app.include_router(weather_routes.router)


def run():
    """Console entry point: serve the app on the configured host and port."""
    logger.info(
        "Server listening",
        extra={"event": "startup", "host": settings.host, "port": settings.port},
    )
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
