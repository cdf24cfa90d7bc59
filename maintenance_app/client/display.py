"""Polling display client for the maintenance status endpoint"""
import enum
import logging
from typing import Callable, Optional

import requests
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from pydantic import ValidationError

from maintenance_app.client.formatting import format_remaining_time
from maintenance_app.core.config import settings
from maintenance_app.schemas import MaintenanceStatusResponse

logger = logging.getLogger(__name__)

STATUS_PATH = "/api/maintenance/status"
BAR_WIDTH = 40


class ViewState(str, enum.Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class ClientView:
    """What the client currently shows; replaced wholesale on every poll"""

    def __init__(self, state: ViewState, status: Optional[MaintenanceStatusResponse] = None, error: Optional[str] = None):
        self.state = state
        self.status = status
        self.error = error


class DisplayClient:
    def __init__(
        self,
        base_url: str = settings.MAINTENANCE_API_URL,
        interval: float = settings.CLIENT_POLL_INTERVAL_SECONDS,
        session: Optional[requests.Session] = None,
        on_update: Optional[Callable[["DisplayClient"], None]] = None,
        timeout: float = 5.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.interval = interval
        self.timeout = timeout
        self.on_update = on_update
        self._session = session or requests.Session()
        self._scheduler: Optional[BackgroundScheduler] = None
        self.view = ClientView(ViewState.LOADING)

    @property
    def status_url(self) -> str:
        return f"{self.base_url}{STATUS_PATH}"

    def refresh(self) -> ClientView:
        """Fetch one snapshot and replace the current view with the result"""
        try:
            response = self._session.get(self.status_url, timeout=self.timeout)
            response.raise_for_status()
            status = MaintenanceStatusResponse.model_validate(response.json())
            view = ClientView(ViewState.READY, status=status)
        except (requests.RequestException, ValueError, ValidationError) as e:
            logger.warning(f"Failed to fetch maintenance status from {self.status_url}: {e}")
            view = ClientView(ViewState.ERROR, error=str(e))

        self.view = view
        if self.on_update:
            self.on_update(self)
        return view

    def retry(self) -> ClientView:
        return self.refresh()

    def start(self):
        """Fetch now, then keep polling every `interval` seconds"""
        if self._scheduler is not None:
            return
        self.refresh()
        self._scheduler = BackgroundScheduler(job_defaults={'coalesce': True, 'max_instances': 1})
        self._scheduler.add_job(
            self.refresh,
            trigger=IntervalTrigger(seconds=self.interval),
            id='status_poll',
            name='Maintenance Status Poll',
        )
        self._scheduler.start()
        logger.info(f"Polling {self.status_url} every {self.interval}s")

    def stop(self):
        if self._scheduler is None:
            return
        self._scheduler.shutdown(wait=False)
        self._scheduler = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None

    def render(self) -> str:
        view = self.view
        if view.state is ViewState.LOADING:
            return "Loading maintenance status..."
        if view.state is ViewState.ERROR:
            return "\n".join([
                "Unable to load maintenance status.",
                f"  {view.error}",
                "Press Enter to retry.",
            ])
        return render_status(view.status)


def render_progress_bar(progress: float, width: int = BAR_WIDTH) -> str:
    filled = int(round(width * min(max(progress, 0), 100) / 100))
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def render_timeline(status: MaintenanceStatusResponse) -> str:
    """Phase markers for every phase but the last; reached ones in brackets"""
    markers = []
    for index, phase in enumerate(status.phases[:-1]):
        label = f"{phase.progress:g}%"
        markers.append(f"[{label}]" if index <= status.phase_index else label)
    return " ".join(markers)


def render_status(status: MaintenanceStatusResponse) -> str:
    if status.is_complete:
        lines = [
            "Maintenance Complete!",
            "All systems are now operational. Thank you for your patience!",
            "* System Online",
        ]
    else:
        lines = [
            "We're Under Maintenance",
            "We're working hard to improve your experience. Our site will be back online shortly.",
            f"Estimated time remaining: {format_remaining_time(status.remaining_time_seconds)}",
            f"* {status.current_phase.name}",
        ]

    lines += [
        "",
        f"Progress {round(status.progress)}%",
        render_progress_bar(status.progress),
        render_timeline(status),
    ]
    return "\n".join(lines)
