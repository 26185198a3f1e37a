"""Synchronous, in-process implementation of EventDispatcher."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Any

import structlog

from ims.domain.events import EventDispatcher

logger = structlog.get_logger(__name__)

Listener = Callable[[Any], None]


class InProcessEventDispatcher(EventDispatcher):
    """Calls listeners in subscription order, on the caller's stack.

    A failing listener propagates its exception to whoever dispatched
    the event, unless ``isolate_failures`` is set, in which case the
    failure is logged and the remaining listeners still run.
    """

    def __init__(self, isolate_failures: bool = False) -> None:
        self._listeners: dict[type, list[Listener]] = defaultdict(list)
        self._isolate_failures = isolate_failures

    def subscribe(self, event_type: type, listener: Listener) -> None:
        self._listeners[event_type].append(listener)

    def dispatch(self, event: object) -> None:
        for listener in list(self._listeners.get(type(event), [])):
            if not self._isolate_failures:
                listener(event)
                continue
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Event listener failed",
                    event_type=type(event).__name__,
                    listener=getattr(listener, "__qualname__", repr(listener)),
                )
