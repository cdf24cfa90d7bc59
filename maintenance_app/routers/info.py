import time

from fastapi import APIRouter

from maintenance_app import schemas
from maintenance_app.core.maintenance_state import maintenance_run, to_epoch_millis

router = APIRouter(tags=["info"])

_process_started = time.monotonic()


def get_uptime() -> float:
    return time.monotonic() - _process_started


@router.get("/info", response_model=schemas.InfoResponse)
def get_info():
    return {
        "message": "Maintenance Server Running",
        "uptime": get_uptime(),
        "start_time": to_epoch_millis(maintenance_run.start_time),
    }
