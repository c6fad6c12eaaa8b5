"""
FastAPI routes for route planning endpoints.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status
import logging

from api.schemas.routing import (
    HealthResponse,
    PlanRequest,
    PlanResponse,
    ProfileSchema,
    RerankRequest
)
from api.services.planning_service import planning_service
from smartdrive_routing.exceptions import DirectionsUnavailableError

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/routes", tags=["routes"])


@router.get("/health", response_model=HealthResponse, summary="Health Check")
async def health_check():
    """
    Check the health status of the planning service.

    Returns:
        HealthResponse: Service health information
    """
    try:
        return planning_service.get_health_status()
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Health check failed"
        )


@router.get("/profiles", response_model=List[ProfileSchema], summary="Driving Profiles")
async def get_profiles():
    """List the driving profiles routes can be ranked for."""
    return planning_service.get_profiles()


@router.post("/plan", response_model=PlanResponse, summary="Plan and Rank Routes")
async def plan_routes(request: PlanRequest):
    """
    Fetch route alternatives, enrich them and rank them for a driving profile.

    Each route carries an ETA, distance, activity and lighting scores, a road
    type, weather along the way and its geometry as GeoJSON.

    Example:
        ```json
        {
            "origin": {"latitude": 43.6532, "longitude": -79.3832, "label": "Toronto"},
            "destination": {"query": "Hamilton, Ontario"},
            "profile": "safe",
            "travel_date": "2026-10-20",
            "travel_time": "21:30"
        }
        ```
    """
    try:
        logger.info(f"Route planning request: profile {request.profile}, time {request.travel_time}")

        response = await planning_service.plan_routes(request)

        if response.success:
            logger.info(f"Route planning completed: {len(response.routes)} routes")
        else:
            logger.warning(f"Route planning returned no routes: {response.message}")
        return response

    except DirectionsUnavailableError as e:
        logger.error(f"Directions unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Directions provider unavailable: {e}"
        )
    except ValueError as e:
        logger.warning(f"Invalid route request: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Unexpected error in route planning: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred during route planning"
        )


@router.post("/rank", response_model=PlanResponse, summary="Re-rank Routes")
async def rank_routes(request: RerankRequest):
    """
    Rank routes returned by /plan again for another profile or travel time.

    No external service is contacted.
    """
    try:
        return planning_service.rerank_routes(request)
    except ValueError as e:
        logger.warning(f"Invalid rerank request: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.get("/", summary="Routing Info")
async def routing_info():
    """Basic information about the route planning endpoints."""
    return {
        "service": "SmartDrive Route Planning",
        "version": planning_service.get_health_status().version,
        "profiles": [p.id for p in planning_service.get_profiles()],
        "endpoints": {
            "health": "/api/routes/health",
            "profiles": "/api/routes/profiles",
            "plan": "/api/routes/plan",
            "rank": "/api/routes/rank"
        }
    }
