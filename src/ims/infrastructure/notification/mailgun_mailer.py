"""Mailgun delivery through the messages API."""

from __future__ import annotations

import httpx

from ims.infrastructure.notification.email_service import EmailMessage, Mailer

MAILGUN_API_BASE = "https://api.mailgun.net"


class MailgunMailer(Mailer):
    name = "mailgun"

    def __init__(
        self,
        api_key: str,
        domain: str,
        client: httpx.Client | None = None,
        base_url: str = MAILGUN_API_BASE,
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._domain = domain
        self._client = client if client is not None else httpx.Client(timeout=timeout)
        self._url = f"{base_url.rstrip('/')}/v3/{domain}/messages"

    def deliver(self, message: EmailMessage) -> None:
        response = self._client.post(
            self._url,
            auth=("api", self._api_key),
            data={
                "from": message.sender,
                "to": message.to,
                "subject": message.subject,
                "text": message.body,
            },
        )
        response.raise_for_status()

        # A 2xx without a message id means Mailgun did not queue the message.
        if not response.json().get("id"):
            raise RuntimeError("Mailgun error: No message ID returned")
