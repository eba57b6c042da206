"""
Repository change notifications.

Operations emit events after they succeed so views can refresh. Listeners
run synchronously on the emitting thread, in subscription order.
"""

import logging
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)


class RepoEvent(Enum):
    WORKING_STATE_CHANGED = "working_state_changed"
    BRANCH_CHANGED = "branch_changed"


Listener = Callable[[RepoEvent], None]


class EventBus:
    """Observer registry keyed by RepoEvent."""

    def __init__(self):
        self._listeners: dict[RepoEvent, list[Listener]] = {event: [] for event in RepoEvent}

    def subscribe(self, event: RepoEvent, listener: Listener) -> None:
        self._listeners[event].append(listener)

    def unsubscribe(self, event: RepoEvent, listener: Listener) -> None:
        try:
            self._listeners[event].remove(listener)
        except ValueError:
            logger.debug(f"Listener not subscribed to {event.value}")

    def emit(self, event: RepoEvent) -> None:
        listeners = list(self._listeners[event])
        logger.debug(f"Emitting {event.value} to {len(listeners)} listener(s)")
        for listener in listeners:
            listener(event)
