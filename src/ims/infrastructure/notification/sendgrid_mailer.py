"""SendGrid delivery through the v3 Web API."""

from __future__ import annotations

import httpx

from ims.infrastructure.notification.email_service import EmailMessage, Mailer

SENDGRID_API_BASE = "https://api.sendgrid.com"


class SendGridMailer(Mailer):
    name = "sendgrid"

    def __init__(
        self,
        api_key: str,
        client: httpx.Client | None = None,
        base_url: str = SENDGRID_API_BASE,
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._client = client if client is not None else httpx.Client(timeout=timeout)
        self._url = f"{base_url.rstrip('/')}/v3/mail/send"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def deliver(self, message: EmailMessage) -> None:
        payload = {
            "personalizations": [{"to": [{"email": message.to}]}],
            "from": {"email": message.sender},
            "subject": message.subject,
            "content": [{"type": "text/plain", "value": message.body}],
        }
        response = self._client.post(self._url, json=payload, headers=self._headers())
        response.raise_for_status()
