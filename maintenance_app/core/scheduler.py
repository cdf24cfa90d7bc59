from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_EXECUTED
import logging

from maintenance_app.core.config import settings

logger = logging.getLogger(__name__)

# Global scheduler instance
scheduler = BackgroundScheduler(
    timezone="UTC",
    job_defaults={
        'coalesce': True,
        'max_instances': 1,
        'misfire_grace_time': 30
    }
)


class ProgressReporter:
    """Logs maintenance progress, calling out phase changes and completion"""

    def __init__(self):
        self._last_phase_index = None
        self._completion_logged = False
        self._start_time = None

    def report(self, status):
        snapshot = status.snapshot

        # a reset starts a new curve
        if status.start_time != self._start_time:
            self._start_time = status.start_time
            self._last_phase_index = None
            self._completion_logged = False

        if snapshot.is_complete:
            if not self._completion_logged:
                logger.info("Maintenance complete")
                self._completion_logged = True
            return

        if snapshot.phase_index != self._last_phase_index:
            logger.info(f"Entered phase {snapshot.phase_index}: {status.current_phase.name}")
            self._last_phase_index = snapshot.phase_index

        logger.info(
            f"Maintenance progress {snapshot.progress:.1f}%, "
            f"{snapshot.remaining_seconds:.0f}s remaining"
        )


progress_reporter = ProgressReporter()


def job_listener(event):
    if event.exception:
        logger.error(f"Job {event.job_id} failed with exception: {event.exception}")
    else:
        logger.debug(f"Job {event.job_id} executed successfully")


def run_progress_log_job():
    from maintenance_app.core.maintenance_state import maintenance_run

    progress_reporter.report(maintenance_run.get_status())


def init_scheduler():
    scheduler.add_listener(job_listener, EVENT_JOB_ERROR | EVENT_JOB_EXECUTED)

    scheduler.add_job(
        run_progress_log_job,
        trigger=IntervalTrigger(seconds=settings.PROGRESS_LOG_INTERVAL_SECONDS),
        id='progress_log',
        name='Maintenance Progress Log',
        replace_existing=True
    )

    logger.info("Scheduler initialized with progress log job")
    logger.info(f"  - Progress log: every {settings.PROGRESS_LOG_INTERVAL_SECONDS}s")


def start_scheduler():
    if not scheduler.running:
        scheduler.start()
        logger.info("Background scheduler started")


def shutdown_scheduler():
    if scheduler.running:
        scheduler.shutdown(wait=True)
        logger.info("Background scheduler stopped")
