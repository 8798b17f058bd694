import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_fastapi_instrumentator import Instrumentator

from app.api import routes as screen_routes
from app.api.v1 import routes as v1_routes
from app.config import get_settings
from app.middleware.request_tracker import RequestTrackerMiddleware
from app.services.external_api import WeatherAPIClient
from app.services.weather_service import WeatherService
from app.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()

# httpx logs full request URLs, which carry the API key.
logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting weather screen...")

    api_client = WeatherAPIClient()
    app.state.weather_service = WeatherService(api_client)

    yield

    logger.info("Shutting down weather screen...")

    await api_client.close()


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

app.include_router(v1_routes.router)
app.include_router(screen_routes.router)

app.mount("/static", StaticFiles(directory=str(screen_routes.STATIC_DIR)), name="static")

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower()
    )
