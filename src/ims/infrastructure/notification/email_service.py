"""Email sending pipeline shared by every provider.

``EmailService`` owns the steps common to all providers: validation,
logging and error wrapping. The provider-specific step, actually handing
the message over, is a ``Mailer`` strategy:

    validate -> log attempt -> mailer.deliver() -> log outcome

Validation runs before the mailer is touched, so a malformed request
never reaches a provider.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import structlog

from ims.domain.exceptions import EmailDeliveryError, InvalidArgumentError
from ims.domain.model.value_objects import EmailAddress
from ims.domain.notification import EmailSender

MAX_SUBJECT_LENGTH = 255
DEFAULT_FROM_EMAIL = "no-reply@example.com"


@dataclass(frozen=True)
class EmailMessage:
    """A validated, ready-to-deliver plain-text message."""

    sender: str
    to: str
    subject: str
    body: str


class Mailer(ABC):
    """Provider-specific delivery step.

    Implementations raise their provider's native exception on failure;
    EmailService wraps it.
    """

    name: str

    @abstractmethod
    def deliver(self, message: EmailMessage) -> None:
        """Hand *message* over to the provider."""


class EmailService(EmailSender):

    def __init__(
        self,
        mailer: Mailer,
        from_email: str = DEFAULT_FROM_EMAIL,
        logger: Any | None = None,
    ) -> None:
        self.mailer = mailer
        self.from_email = from_email
        self.logger = logger if logger is not None else structlog.get_logger(__name__)

    @property
    def provider(self) -> str:
        return self.mailer.name

    def send(self, to: str, subject: str, body: str) -> None:
        EmailAddress(to)
        self._validate_subject(subject)
        self._validate_body(body)

        context = {"to": to, "subject": subject, "provider": self.provider}
        self.logger.info("Attempting to send email", **context)

        message = EmailMessage(sender=self.from_email, to=to, subject=subject, body=body)
        try:
            self.mailer.deliver(message)
        except Exception as exc:
            self.logger.error(
                "Failed to send email", success=False, error=str(exc), **context
            )
            raise EmailDeliveryError(self.provider, str(exc)) from exc

        self.logger.info("Email sent successfully", success=True, **context)

    @staticmethod
    def _validate_subject(subject: str) -> None:
        if not isinstance(subject, str) or not subject.strip():
            raise InvalidArgumentError("Subject cannot be empty")
        if len(subject) > MAX_SUBJECT_LENGTH:
            raise InvalidArgumentError(
                f"Subject too long (max {MAX_SUBJECT_LENGTH} characters)"
            )

    @staticmethod
    def _validate_body(body: str) -> None:
        if not isinstance(body, str) or not body.strip():
            raise InvalidArgumentError("Email body cannot be empty")
