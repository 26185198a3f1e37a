"""Event listener: email a notification whenever a product is created."""

from __future__ import annotations

from ims.domain.model.events import ProductCreatedDomainEvent
from ims.domain.notification import EmailSender

SUBJECT = "New product created"


class ProductCreatedListener:

    def __init__(self, email_sender: EmailSender, recipient: str) -> None:
        self._email_sender = email_sender
        self._recipient = recipient

    def __call__(self, event: ProductCreatedDomainEvent) -> None:
        self._email_sender.send(self._recipient, SUBJECT, self.render_body(event))

    @staticmethod
    def render_body(event: ProductCreatedDomainEvent) -> str:
        return (
            "A new product has been created:\n\n"
            f"Name: {event.product_name}\n"
            f"Description: {event.product_description}\n"
            f"Price: {event.product_price:.2f}\n"
            f"Stock: {event.product_stock}"
        )
