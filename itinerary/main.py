"""
FastAPI application entry point.

Assembles the FastAPI app and constructs the process-wide services
(geocoding cache and resolver, plan store, map focus channel) once at
startup.
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from itinerary.geocoding.cache import GeocodeCache
from itinerary.geocoding.resolver import GeocodingResolver
from itinerary.generation.generation_api import router as generation_router
from itinerary.presentation.focus import LocationFocusChannel
from itinerary.presentation.map_view import MapView
from itinerary.shared.logging.config import setup_logging
from itinerary.store.plan_store import PlanStore
from itinerary.store.store_api import router as plans_router


# ============================================================================
# Logging configuration (single source of truth for the service)
# ============================================================================
LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)-40s | %(message)s"
)

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[logging.StreamHandler(sys.stdout)],
    force=True,  # Override any prior basicConfig calls
)

# Quiet noisy third-party loggers
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)

# Generation events as JSON lines
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    cache = GeocodeCache()
    resolver = GeocodingResolver(cache)
    focus_channel = LocationFocusChannel()

    app.state.geocoder = resolver
    app.state.text_generator = None  # default OpenAI client
    app.state.parser_config = None
    app.state.plan_store = PlanStore()
    app.state.focus_channel = focus_channel
    app.state.map_view = MapView(focus_channel)

    yield

    app.state.map_view.close()
    await resolver.aclose()


# Create FastAPI app
app = FastAPI(
    title="Itinerary Planner",
    description="AI travel itineraries parsed into structured, geocoded schedules",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(generation_router)
app.include_router(plans_router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Itinerary Planner",
        "version": "0.1.0",
        "endpoints": {
            "generation": "/api/generation",
            "plans": "/api/plans",
        },
    }


@app.get("/health")
async def health():
    """Global health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
