from fastapi import APIRouter, Request

from maintenance_app import schemas
from maintenance_app.core.config import settings
from maintenance_app.core.limiter import limiter
from maintenance_app.core.maintenance_state import maintenance_run

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.get("/status", response_model=schemas.MaintenanceStatusResponse)
def get_maintenance_status():
    """Current progress derived from time elapsed since the run started (public endpoint)"""
    return maintenance_run.get_status().to_response()


@router.post("/reset", response_model=schemas.ResetResponse)
@limiter.limit(settings.RESET_RATE_LIMIT)
def reset_maintenance(request: Request):
    """Restart the maintenance run from zero"""
    status = maintenance_run.reset()
    return {"message": "Maintenance state reset", "state": status.to_state()}
