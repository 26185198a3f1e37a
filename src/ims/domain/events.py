"""Port for publishing domain events to decoupled listeners."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EventDispatcher(ABC):

    @abstractmethod
    def dispatch(self, event: object) -> None:
        """Deliver *event* to every listener registered for its type."""
