"""FastAPI application: weather proxy routes and error mapping."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from weatherproxy.config.schema import ServerConfig
from weatherproxy.ingest.cwa_client import CwaClient
from weatherproxy.ingest.region_resolver import pick_location_key
from weatherproxy.models.common import utc_now_iso
from weatherproxy.models.errors import WeatherProxyError
from weatherproxy.pipeline.aggregator import WeatherAggregator

logger = logging.getLogger(__name__)

APP_NAME = "CWA Weather Forecast API"


def create_app(config: ServerConfig, client: CwaClient | None = None) -> FastAPI:
    app = FastAPI(title=APP_NAME, version="0.1.0")
    app.state.config = config
    app.state.aggregator = WeatherAggregator(config, client)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        error = "Path not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": error})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Server error", "message": str(exc)},
        )

    # ── Routes ──────────────────────────────────────────────────

    @app.get("/")
    def index():
        return {
            "message": f"Welcome to the {APP_NAME}",
            "endpoints": {
                "weather": "/api/weather/{location}",
                "health": "/api/health",
            },
        }

    @app.get("/api/health")
    def health():
        return {"status": "OK", "timestamp": utc_now_iso()}

    @app.get("/api/weather")
    async def weather_by_query(request: Request):
        return await _combined_weather(request, None)

    @app.get("/api/weather/{location}")
    async def weather_by_path(request: Request, location: str):
        return await _combined_weather(request, location)

    return app


async def _combined_weather(request: Request, location: str | None) -> JSONResponse:
    config: ServerConfig = request.app.state.config
    aggregator: WeatherAggregator = request.app.state.aggregator
    key = pick_location_key(
        location, request.query_params.get("location"), config.default_location
    )
    try:
        result = await aggregator.combine(key)
    except WeatherProxyError as e:
        logger.error("Weather request for %r failed: %s", key, e.message)
        return JSONResponse(status_code=e.status_code, content=e.to_dict())
    except Exception:
        logger.exception("Failed to fetch weather data for %r", key)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Server error",
                "message": "Unable to fetch weather data, please try again later",
            },
        )
    return JSONResponse(content={"success": True, "data": result.to_dict()})
