"""
SmartDrive Routing API - FastAPI Main Application

A RESTful API that ranks driving routes by speed, safety or scenery.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from api.routes.routing import router as routing_router
from api.schemas.routing import ErrorResponse
from api.services.planning_service import planning_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle - startup and shutdown events.
    """
    logger.info("Starting SmartDrive Routing API...")
    logger.info(f"✓ Directions provider: {planning_service.config.osrm_base_url}")

    yield

    logger.info(f"Shutting down SmartDrive Routing API (cache {planning_service.lighting_cache.get_cache_stats()})")


# Create FastAPI application
app = FastAPI(
    title="SmartDrive Routing API",
    description="""
    **Rank driving routes by speed, safety or scenery**

    Route alternatives come from OSRM and are enriched with street lighting
    estimated from OpenStreetMap road tags, a road activity baseline and the
    weather at the start, the end and the towns along the way.

    ## Profiles

    - **fast**: shortest ETA first
    - **safe**: activity and lighting at night, activity alone by day
    - **scenic**: longest drive first

    ## Quick Start

    1. List profiles: `GET /api/routes/profiles`
    2. Plan routes: `POST /api/routes/plan`
    3. Re-rank without new lookups: `POST /api/routes/rank`
    """,
    version="1.0.0",
    license_info={
        "name": "MIT License",
        "url": "https://opensource.org/licenses/MIT",
    },
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle request validation errors with detailed information.
    """
    logger.warning(f"Validation error for {request.url}: {exc}")
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            error="validation_error",
            message="Request validation failed",
            details={"errors": [
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()
            ]}
        ).model_dump()
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle unexpected errors gracefully.
    """
    logger.error(f"Unexpected error for {request.url}: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="internal_server_error",
            message="An unexpected error occurred"
        ).model_dump()
    )


app.include_router(routing_router)


@app.get("/", tags=["general"])
async def root():
    """
    API root endpoint with basic information.
    """
    return {
        "api": "SmartDrive Routing API",
        "version": "1.0.0",
        "status": "operational",
        "documentation": "/docs",
        "health_check": "/api/routes/health"
    }


@app.get("/health", tags=["general"])
async def api_health():
    """
    Simple health check endpoint.
    """
    try:
        service_health = planning_service.get_health_status()
        return {
            "api_status": "healthy",
            "service_status": service_health.status,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={
                "api_status": "unhealthy",
                "error": str(e),
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        )

