"""SMTP delivery through the standard library's smtplib."""

from __future__ import annotations

import smtplib
from collections.abc import Callable
from email.message import EmailMessage as MimeMessage

from ims.infrastructure.notification.email_service import EmailMessage, Mailer


class SmtpMailer(Mailer):
    name = "smtp"

    def __init__(
        self,
        host: str = "localhost",
        port: int = 25,
        username: str | None = None,
        password: str | None = None,
        use_starttls: bool = False,
        timeout: float = 10.0,
        connection_factory: Callable[..., smtplib.SMTP] = smtplib.SMTP,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._use_starttls = use_starttls
        self._timeout = timeout
        self._connection_factory = connection_factory

    def deliver(self, message: EmailMessage) -> None:
        mime = MimeMessage()
        mime["From"] = message.sender
        mime["To"] = message.to
        mime["Subject"] = message.subject
        mime.set_content(message.body)

        with self._connection_factory(self._host, self._port, timeout=self._timeout) as server:
            if self._use_starttls:
                server.starttls()
            if self._username and self._password:
                server.login(self._username, self._password)
            server.send_message(mime)
