"""
Health Check Router - HealthOps Tender Scoring
healthops/routers/health.py

The engine has no external dependencies; health reports liveness, version
and whether the configured scoring parameters are consistent.
"""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Any, Dict
from datetime import datetime, timezone

from healthops.config import get_settings
from healthops.core.dependencies import get_scoring_parameters
from healthops.core.exceptions import InvalidParametersException

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str
    parameters: Dict[str, Any]


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        200: {"description": "Service healthy"},
        503: {"description": "Scoring parameters invalid"},
    },
    summary="Health check",
)
async def health_check():
    """Report liveness and the active scoring parameters."""
    settings = get_settings()
    try:
        parameters = get_scoring_parameters().as_dict()
        state = "healthy"
    except InvalidParametersException as e:
        parameters = {"error": e.message}
        state = "unhealthy"

    response = HealthResponse(
        status=state,
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        parameters=parameters,
    )

    if state == "healthy":
        return response
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=response.model_dump(mode="json"),
    )
