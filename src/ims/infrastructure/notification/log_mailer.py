"""Development backend: records emails in the log instead of sending them."""

from __future__ import annotations

from typing import IO, Any

import click
import structlog

from ims.infrastructure.notification.email_service import EmailMessage, Mailer


class LogMailer(Mailer):
    name = "log"

    def __init__(
        self,
        logger: Any | None = None,
        echo: bool = False,
        stream: IO[str] | None = None,
    ) -> None:
        self._logger = logger if logger is not None else structlog.get_logger(__name__)
        self._echo = echo
        self._stream = stream

    def deliver(self, message: EmailMessage) -> None:
        self._logger.info(
            "Email would be sent",
            to=message.to,
            subject=message.subject,
            body=message.body,
            provider="log",
        )
        if self._echo:
            click.echo("EMAIL (DEV MODE):", file=self._stream)
            click.echo(f"To: {message.to}", file=self._stream)
            click.echo(f"Subject: {message.subject}", file=self._stream)
            click.echo(f"Body: {message.body}", file=self._stream)
            click.echo("---", file=self._stream)
