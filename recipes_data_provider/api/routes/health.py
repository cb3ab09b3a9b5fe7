"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ returns 200 whenever the process serves requests (liveness)
    - GET /health/ready returns 503 with reason database_unavailable until the pool answers
    - Both readiness bodies carry the same checks map

Design Decisions:
    - db_manager read at call time: it is assigned during lifespan startup, after import
    - Service name and version come from the FastAPI app, not duplicated here
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from recipes_data_provider.infrastructure import database

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness(request: Request):
    return {
        "status": "healthy",
        "service": request.app.title,
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness():
    """Ready once the recipes database accepts a round trip."""
    manager = database.db_manager
    reachable = manager is not None and await manager.health_check()
    checks = {"database": "healthy" if reachable else "unavailable"}
    if not reachable:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
                "checks": checks,
            },
        )
    return {"status": "ready", "checks": checks}
