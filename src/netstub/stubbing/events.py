"""
netstub Driver Events

Forwards stubbing events to the test driver connected to the proxy.
"""

import logging
from typing import Any, Dict

logger = logging.getLogger("netstub.stubbing.events")

DRIVER_EVENT = 'net:event'


def emit(socket: Any, event_name: str, data: Dict[str, Any]) -> None:
    """
    Send a named event to the driver.

    Fire-and-forget: nothing is awaited and no acknowledgement is expected.

    Args:
        socket: Driver connection exposing ``to_driver(channel, event, data)``
        event_name: Event name, e.g. 'before:request'
        data: JSON-serializable payload
    """
    logger.debug(f"Sending event to driver: {event_name} {data!r}")
    socket.to_driver(DRIVER_EVENT, event_name, data)
