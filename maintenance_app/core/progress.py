"""Elapsed time to progress/phase mapping"""
from datetime import datetime, timedelta
from typing import Sequence

from maintenance_app.schemas import Phase, StatusSnapshot


def total_duration(phases: Sequence[Phase]) -> float:
    return sum(phase.duration for phase in phases)


def estimated_completion(start: datetime, phases: Sequence[Phase]) -> datetime:
    return start + timedelta(seconds=total_duration(phases))


def compute(start: datetime, now: datetime, phases: Sequence[Phase]) -> StatusSnapshot:
    """
    derive the maintenance status at `now` for a run started at `start`

    pure function: identical inputs give identical snapshots. a `now`
    earlier than `start` counts as zero elapsed time.
    """
    elapsed = max(0.0, (now - start).total_seconds())
    total = total_duration(phases)
    last_index = len(phases) - 1

    if elapsed >= total:
        return StatusSnapshot(progress=100, phase_index=last_index, is_complete=True, remaining_seconds=0)

    accumulated = 0.0
    for index, phase in enumerate(phases):
        phase_end = accumulated + phase.duration
        if elapsed <= phase_end:
            floor = phases[index - 1].progress if index > 0 else 0.0
            fraction = (elapsed - accumulated) / phase.duration
            progress = floor + fraction * (phase.progress - floor)
            return StatusSnapshot(
                progress=min(progress, phase.progress),
                phase_index=index,
                is_complete=False,
                remaining_seconds=max(0.0, total - elapsed),
            )
        accumulated = phase_end

    # float accumulation can leave elapsed a hair past the last phase end
    return StatusSnapshot(progress=100, phase_index=last_index, is_complete=True, remaining_seconds=0)
