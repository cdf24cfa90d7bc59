"""Compiled-in maintenance phase table and its validation"""
from typing import Sequence, Tuple

from maintenance_app.schemas import Phase


class PhaseConfigurationError(ValueError):
    """Raised when the phase table cannot describe a maintenance window"""


DEFAULT_PHASES: Tuple[Phase, ...] = (
    Phase(name="Initializing maintenance", progress=10, duration=3),
    Phase(name="Backing up database", progress=25, duration=1800),  # 30 minutes
    Phase(name="Updating server components", progress=45, duration=600),
    Phase(name="Applying security patches", progress=65, duration=600),
    Phase(name="Optimizing performance", progress=80, duration=600),
    Phase(name="Running final tests", progress=95, duration=600),
    Phase(name="Maintenance complete", progress=100, duration=600),
)


def validate_phases(phases: Sequence[Phase]) -> Tuple[Phase, ...]:
    """
    check a phase table and return it as an immutable tuple

    cumulative progress must be strictly increasing within (0, 100]
    and every duration must be positive
    """
    phases = tuple(phases)
    if not phases:
        raise PhaseConfigurationError("At least one maintenance phase is required")

    previous = 0.0
    for index, phase in enumerate(phases):
        if phase.duration <= 0:
            raise PhaseConfigurationError(
                f"Phase {index} ({phase.name!r}) must have a positive duration, got {phase.duration}"
            )
        if not 0 < phase.progress <= 100:
            raise PhaseConfigurationError(
                f"Phase {index} ({phase.name!r}) progress must be within (0, 100], got {phase.progress}"
            )
        if phase.progress <= previous:
            raise PhaseConfigurationError(
                f"Phase {index} ({phase.name!r}) progress {phase.progress} does not increase past {previous}"
            )
        previous = phase.progress

    return phases
