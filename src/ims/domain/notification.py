"""Port for outbound email notifications."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EmailSender(ABC):

    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> None:
        """Send a plain-text email.

        Raises InvalidArgumentError for a malformed recipient, subject or
        body, and EmailDeliveryError when the provider fails.
        """
