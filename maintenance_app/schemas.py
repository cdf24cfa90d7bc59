from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List


# ============= CORE MODELS =============

class Phase(BaseModel):
    """One time-boxed segment of the maintenance window."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    progress: float = Field(..., description="Cumulative completion percentage at the end of this phase")
    duration: float = Field(..., description="Length of the phase in seconds")


class StatusSnapshot(BaseModel):
    """Progress derived from elapsed time; recomputed on every read."""
    model_config = ConfigDict(frozen=True)

    progress: float = Field(..., ge=0, le=100)
    phase_index: int = Field(..., ge=0)
    is_complete: bool
    remaining_seconds: float = Field(..., ge=0)


# ============= API SCHEMAS =============

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MaintenanceStatusResponse(CamelModel):
    progress: float
    phase_index: int
    current_phase: Phase
    is_complete: bool
    remaining_time_seconds: float
    start_time: int = Field(..., description="Epoch milliseconds")
    phases: List[Phase]


class MaintenanceStateOut(CamelModel):
    start_time: int
    current_progress: float
    current_phase_index: int
    is_complete: bool
    last_updated: int


class ResetResponse(BaseModel):
    message: str
    state: MaintenanceStateOut


class InfoResponse(CamelModel):
    message: str
    uptime: float
    start_time: int


class HealthResponse(BaseModel):
    status: str
    project_name: str
    version: str


class ErrorResponse(BaseModel):
    error: str
