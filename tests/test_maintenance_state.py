"""tests for the maintenance run owned by the status service"""
import pytest

from maintenance_app.core.maintenance_state import MaintenanceRun, to_epoch_millis
from maintenance_app.core.phases import PhaseConfigurationError
from conftest import START, at


def test_run_rejects_empty_phase_table():
    """test a run cannot be created without phases"""
    with pytest.raises(PhaseConfigurationError):
        MaintenanceRun(phases=[])


def test_get_status_is_a_pure_read(scenario_phases):
    """test reading status does not move the start time"""
    run = MaintenanceRun(phases=scenario_phases, start_time=START)
    first = run.get_status(at(5))
    second = run.get_status(at(5))
    assert run.start_time == START
    assert first.snapshot == second.snapshot


def test_status_exposes_phase_table(scenario_phases):
    """test the snapshot carries everything a client needs to render"""
    run = MaintenanceRun(phases=scenario_phases, start_time=START)
    response = run.get_status(at(7)).to_response()
    assert response["phase_index"] == 1
    assert response["current_phase"].name == "Backing up"
    assert response["phases"] == list(scenario_phases)
    assert response["start_time"] == to_epoch_millis(START)
    assert response["remaining_time_seconds"] == pytest.approx(16)


def test_reset_restarts_progress(scenario_phases):
    """test reset => next read starts from zero regardless of prior elapsed time"""
    run = MaintenanceRun(phases=scenario_phases, start_time=START)
    assert run.get_status(at(50)).snapshot.is_complete is True

    run.reset(at(50))
    status = run.get_status(at(50))
    assert status.snapshot.progress == 0
    assert status.snapshot.is_complete is False
    assert run.start_time == at(50)


def test_reset_state_payload(scenario_phases):
    """test the reset payload describes the fresh run"""
    run = MaintenanceRun(phases=scenario_phases, start_time=START)
    state = run.reset(at(10)).to_state()
    assert state == {
        "start_time": to_epoch_millis(at(10)),
        "current_progress": 0,
        "current_phase_index": 0,
        "is_complete": False,
        "last_updated": to_epoch_millis(at(10)),
    }


def test_estimated_completion(scenario_phases):
    """test completion estimate follows the start time"""
    run = MaintenanceRun(phases=scenario_phases, start_time=START)
    assert run.estimated_completion == at(23)
    run.reset(at(100))
    assert run.estimated_completion == at(123)
