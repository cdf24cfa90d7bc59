import logging
import sys
import threading
from typing import Optional

from maintenance_app.client.display import DisplayClient, ViewState
from maintenance_app.core.config import settings

CLEAR_SCREEN = "\033[2J\033[H"


def show(client: DisplayClient):
    sys.stdout.write(CLEAR_SCREEN + client.render() + "\n")
    sys.stdout.flush()


def watch_for_retry(client: DisplayClient, stream):
    """Enter re-issues the read while the error state is shown; returns at EOF"""
    for _ in stream:
        if client.view.state is ViewState.ERROR:
            client.retry()


def main(stop: Optional[threading.Event] = None):
    logging.basicConfig(level=settings.LOG_LEVEL)

    stop = stop or threading.Event()
    client = DisplayClient(base_url=settings.MAINTENANCE_API_URL, on_update=show)
    client.start()

    #polling keeps going when stdin is closed or redirected
    threading.Thread(target=watch_for_retry, args=(client, sys.stdin), daemon=True).start()
    try:
        stop.wait()
    except KeyboardInterrupt:
        pass
    finally:
        client.stop()


if __name__ == "__main__":
    main()
