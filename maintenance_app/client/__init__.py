from .display import (
    ClientView,
    DisplayClient,
    ViewState,
    render_status
)
from .formatting import format_remaining_time

__all__ = [
    'ClientView',
    'DisplayClient',
    'ViewState',
    'render_status',
    'format_remaining_time'
]
