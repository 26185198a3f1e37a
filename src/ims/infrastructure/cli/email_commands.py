"""CLI commands for exercising the email backends."""

from __future__ import annotations

import click

from ims.domain.exceptions import DomainException, EmailDeliveryError
from ims.infrastructure.bootstrap import email_service_factory
from ims.infrastructure.config import get_settings
from ims.infrastructure.notification.factory import EmailServiceFactory


def _list_services(factory: EmailServiceFactory) -> None:
    click.echo("Email services")
    click.echo("-" * 60)
    for name, description in EmailServiceFactory.DESCRIPTIONS.items():
        click.echo(f"{name:<10} {description}")
    click.echo("")
    click.echo(f"Configured: {', '.join(factory.available_services())}")


@click.command("test-services")
@click.option(
    "--service", "-s", default="log", show_default=True,
    help="Backend to use (smtp, ses, sendgrid, mailgun, log).",
)
@click.option("--to", "-t", default="test@example.com", show_default=True, help="Recipient.")
@click.option("--subject", default="Email service test", show_default=True, help="Subject.")
@click.option(
    "--body", "-b",
    default="This is a test email sent by the inventory system.",
    help="Plain-text body.",
)
@click.option("--list", "-l", "list_only", is_flag=True, help="List the backends and exit.")
def email_test_services(
    service: str, to: str, subject: str, body: str, list_only: bool
) -> None:
    """Send a test email through one backend."""
    factory = email_service_factory()

    if list_only:
        _list_services(factory)
        return

    try:
        sender = factory.create(service)
        click.echo(f"Sending email using the '{service}' service")
        click.echo(f"Recipient: {to}")
        click.echo(f"Subject: {subject}")
        sender.send(to, subject, body)
    except (DomainException, EmailDeliveryError) as exc:
        raise click.ClickException(f"Error sending email: {exc}")

    click.echo(f"Email sent successfully using {service}")


@click.command("send-test")
@click.option("--to", default=None, help="Recipient (defaults to the notification recipient).")
def email_send_test(to: str | None) -> None:
    """Send a fixed test email through the configured backend."""
    settings = get_settings()
    recipient = to or settings.notification_recipient

    try:
        sender = email_service_factory(settings).create(settings.email_backend)
        sender.send(recipient, "Test email", "This is a test.")
    except (DomainException, EmailDeliveryError) as exc:
        raise click.ClickException(str(exc))

    click.echo("Email sent.")
