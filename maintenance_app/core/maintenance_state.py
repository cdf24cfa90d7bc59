"""Maintenance run state manager"""
import logging
from datetime import datetime, timezone
from typing import Optional, Sequence, Tuple

from maintenance_app.core import progress
from maintenance_app.core.phases import DEFAULT_PHASES, validate_phases
from maintenance_app.schemas import Phase, StatusSnapshot

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


class MaintenanceStatus:
    """A snapshot plus the run it was computed for"""

    def __init__(self, snapshot: StatusSnapshot, start_time: datetime, phases: Tuple[Phase, ...], computed_at: datetime):
        self.snapshot = snapshot
        self.start_time = start_time
        self.phases = phases
        self.computed_at = computed_at

    @property
    def current_phase(self) -> Phase:
        return self.phases[self.snapshot.phase_index]

    def to_response(self) -> dict:
        return {
            "progress": self.snapshot.progress,
            "phase_index": self.snapshot.phase_index,
            "current_phase": self.current_phase,
            "is_complete": self.snapshot.is_complete,
            "remaining_time_seconds": self.snapshot.remaining_seconds,
            "start_time": to_epoch_millis(self.start_time),
            "phases": list(self.phases),
        }

    def to_state(self) -> dict:
        return {
            "start_time": to_epoch_millis(self.start_time),
            "current_progress": self.snapshot.progress,
            "current_phase_index": self.snapshot.phase_index,
            "is_complete": self.snapshot.is_complete,
            "last_updated": to_epoch_millis(self.computed_at),
        }


class MaintenanceRun:
    """
    Process-lifetime maintenance run

    only the start time changes (on reset). reads and resets are not
    locked, a read racing a reset sees either start time.
    """

    def __init__(self, phases: Sequence[Phase] = DEFAULT_PHASES, start_time: Optional[datetime] = None):
        self._phases = validate_phases(phases)
        self._start_time = start_time or utcnow()

    @property
    def phases(self) -> Tuple[Phase, ...]:
        return self._phases

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @property
    def estimated_completion(self) -> datetime:
        return progress.estimated_completion(self._start_time, self._phases)

    def get_status(self, now: Optional[datetime] = None) -> MaintenanceStatus:
        """Compute the current status"""
        now = now or utcnow()
        start_time = self._start_time
        snapshot = progress.compute(start_time, now, self._phases)
        return MaintenanceStatus(snapshot, start_time, self._phases, now)

    def reset(self, now: Optional[datetime] = None) -> MaintenanceStatus:
        """Restart the elapsed-time clock"""
        self._start_time = now or utcnow()
        logger.info(f"Maintenance run reset, started at {self._start_time.isoformat()}")
        return self.get_status(self._start_time)


#global instance
maintenance_run = MaintenanceRun()
