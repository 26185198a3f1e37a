"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.application.create_product import CreateProductHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.get_products import GetAllProductsHandler, GetProductByIdHandler
from ims.application.product_created_listener import ProductCreatedListener
from ims.application.update_product import UpdateProductHandler
from ims.application.update_variant import UpdateVariantHandler
from ims.domain.model.events import ProductCreatedDomainEvent
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.config import Settings, get_settings
from ims.infrastructure.events import InProcessEventDispatcher
from ims.infrastructure.notification.factory import EmailServiceFactory
from ims.infrastructure.notification.log_mailer import LogMailer
from ims.infrastructure.notification.mailgun_mailer import MailgunMailer
from ims.infrastructure.notification.sendgrid_mailer import SendGridMailer
from ims.infrastructure.notification.ses_mailer import SesMailer
from ims.infrastructure.notification.smtp_mailer import SmtpMailer
from ims.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    settings = settings or get_settings()
    return JsonProductRepository(settings.data_dir / "products.json")


def email_service_factory(settings: Settings | None = None) -> EmailServiceFactory:
    """Build the factory; optional backends exist only when configured."""
    settings = settings or get_settings()

    smtp = SmtpMailer(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.smtp_username,
        password=settings.smtp_password,
        use_starttls=settings.smtp_use_starttls,
        timeout=settings.smtp_timeout,
    )
    log = LogMailer(echo=settings.log_mailer_echo)

    ses = None
    if settings.ses_configured:
        ses = SesMailer.from_credentials(
            region=settings.ses_region,
            access_key_id=settings.ses_access_key_id,
            secret_access_key=settings.ses_secret_access_key,
        )

    sendgrid = None
    if settings.sendgrid_configured:
        sendgrid = SendGridMailer(settings.sendgrid_api_key, timeout=settings.http_timeout)

    mailgun = None
    if settings.mailgun_configured:
        mailgun = MailgunMailer(
            settings.mailgun_api_key,
            settings.mailgun_domain,
            base_url=settings.mailgun_base_url,
            timeout=settings.http_timeout,
        )

    return EmailServiceFactory(
        smtp=smtp,
        log=log,
        ses=ses,
        sendgrid=sendgrid,
        mailgun=mailgun,
        from_email=settings.mail_from,
    )


@dataclass
class Container:
    """Every handler, wired to the same repository and dispatcher."""

    repository: ProductRepository
    dispatcher: InProcessEventDispatcher
    create_product: CreateProductHandler
    update_product: UpdateProductHandler
    delete_product: DeleteProductHandler
    update_variant: UpdateVariantHandler
    get_all_products: GetAllProductsHandler
    get_product_by_id: GetProductByIdHandler


def build_container(
    settings: Settings | None = None,
    repository: ProductRepository | None = None,
    email_factory: EmailServiceFactory | None = None,
) -> Container:
    settings = settings or get_settings()
    repository = repository or product_repository(settings)
    email_factory = email_factory or email_service_factory(settings)

    dispatcher = InProcessEventDispatcher()
    dispatcher.subscribe(
        ProductCreatedDomainEvent,
        ProductCreatedListener(
            email_sender=email_factory.create(settings.email_backend),
            recipient=settings.notification_recipient,
        ),
    )

    return Container(
        repository=repository,
        dispatcher=dispatcher,
        create_product=CreateProductHandler(repository, dispatcher),
        update_product=UpdateProductHandler(repository),
        delete_product=DeleteProductHandler(repository),
        update_variant=UpdateVariantHandler(repository),
        get_all_products=GetAllProductsHandler(repository),
        get_product_by_id=GetProductByIdHandler(repository),
    )
