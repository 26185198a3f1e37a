"""Resolves an email backend name to a ready-to-use EmailService."""

from __future__ import annotations

from typing import Any

from ims.domain.exceptions import InvalidArgumentError
from ims.infrastructure.notification.email_service import (
    DEFAULT_FROM_EMAIL,
    EmailService,
    Mailer,
)


class EmailServiceFactory:
    SMTP = "smtp"
    SES = "ses"
    SENDGRID = "sendgrid"
    MAILGUN = "mailgun"
    LOG = "log"

    DESCRIPTIONS = {
        SMTP: "Delivery over SMTP",
        SES: "Amazon Simple Email Service (SES)",
        SENDGRID: "SendGrid Email Service",
        MAILGUN: "Mailgun Email Service",
        LOG: "Only writes to the log (development/testing)",
    }

    def __init__(
        self,
        smtp: Mailer,
        log: Mailer,
        ses: Mailer | None = None,
        sendgrid: Mailer | None = None,
        mailgun: Mailer | None = None,
        from_email: str = DEFAULT_FROM_EMAIL,
        logger: Any | None = None,
    ) -> None:
        self._mailers: dict[str, Mailer | None] = {
            self.SMTP: smtp,
            self.SES: ses,
            self.SENDGRID: sendgrid,
            self.MAILGUN: mailgun,
            self.LOG: log,
        }
        self._from_email = from_email
        self._logger = logger

    def create(self, service: str) -> EmailService:
        if service not in self._mailers:
            raise InvalidArgumentError(f"Unknown email service: {service}")

        mailer = self._mailers[service]
        if mailer is None:
            label = {self.SES: "SES", self.SENDGRID: "SendGrid", self.MAILGUN: "Mailgun"}[service]
            raise InvalidArgumentError(f"{label} service not configured")

        return EmailService(mailer, from_email=self._from_email, logger=self._logger)

    def available_services(self) -> list[str]:
        """Backends that can be created, SMTP and log first."""
        order = (self.SMTP, self.LOG, self.SES, self.SENDGRID, self.MAILGUN)
        return [name for name in order if self._mailers[name] is not None]
