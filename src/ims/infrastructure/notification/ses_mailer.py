"""Amazon SES delivery through a boto3 ``ses`` client."""

from __future__ import annotations

from typing import Any

from ims.infrastructure.notification.email_service import EmailMessage, Mailer


class SesMailer(Mailer):
    name = "ses"

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def from_credentials(
        cls,
        region: str,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
    ) -> SesMailer:
        """Build a mailer around a real SES client (needs the ``ses`` extra).

        Without explicit keys boto3 falls back to its usual credential
        chain (environment, shared config, instance role).
        """
        import boto3

        client = boto3.client(
            "ses",
            region_name=region,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )
        return cls(client)

    def deliver(self, message: EmailMessage) -> None:
        self._client.send_email(
            Source=message.sender,
            Destination={"ToAddresses": [message.to]},
            Message={
                "Subject": {"Data": message.subject, "Charset": "UTF-8"},
                "Body": {"Text": {"Data": message.body, "Charset": "UTF-8"}},
            },
        )
