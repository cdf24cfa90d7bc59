"""tests for phase table validation"""
import pytest

from maintenance_app.core.phases import DEFAULT_PHASES, PhaseConfigurationError, validate_phases
from maintenance_app.core.progress import total_duration
from maintenance_app.schemas import Phase


def test_default_phases_are_valid():
    """test the compiled-in table passes validation and ends at 100"""
    phases = validate_phases(DEFAULT_PHASES)
    assert len(phases) == 7
    assert phases[0].name == "Initializing maintenance"
    assert phases[-1].progress == 100
    assert total_duration(phases) == 3 + 1800 + 5 * 600


def test_validate_returns_tuple(scenario_phases):
    """test validation freezes the table"""
    assert isinstance(validate_phases(scenario_phases), tuple)


def test_empty_phase_list_rejected():
    """test an empty table is a configuration error"""
    with pytest.raises(PhaseConfigurationError):
        validate_phases([])


@pytest.mark.parametrize("duration", [0, -5])
def test_non_positive_duration_rejected(duration):
    """test durations must be positive"""
    with pytest.raises(PhaseConfigurationError, match="positive duration"):
        validate_phases([Phase(name="a", progress=50, duration=duration)])


@pytest.mark.parametrize("progress", [0, -1, 100.5])
def test_progress_out_of_range_rejected(progress):
    """test cumulative progress must be within (0, 100]"""
    with pytest.raises(PhaseConfigurationError, match="within"):
        validate_phases([Phase(name="a", progress=progress, duration=1)])


def test_non_increasing_progress_rejected():
    """test cumulative progress must strictly increase"""
    phases = [
        Phase(name="a", progress=30, duration=1),
        Phase(name="b", progress=30, duration=1),
    ]
    with pytest.raises(PhaseConfigurationError, match="does not increase"):
        validate_phases(phases)


def test_configuration_error_is_value_error():
    """test callers catching ValueError also see configuration errors"""
    assert issubclass(PhaseConfigurationError, ValueError)
