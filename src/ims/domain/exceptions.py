"""Domain-level exceptions.

All errors raised by the core derive from DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.

Two kinds reach callers:

* ``InvalidArgumentError`` — a primitive value is malformed (bad UUID,
  negative price, empty name, invalid email address ...).
* ``DomainError`` — a business rule was violated (not found, duplicate
  name ...).
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException, ValueError):
    """A raw value does not satisfy the rules of its value object."""


class DomainError(DomainException):
    """A business rule was violated."""


class EntityNotFoundError(DomainError):
    """A requested entity does not exist."""


class VariantNotFoundError(EntityNotFoundError):
    """The product exists but has no variant with the requested ID."""


class DuplicateProductNameError(DomainError):
    """Another product already uses the requested name."""


class EmailDeliveryError(RuntimeError):
    """A mail provider failed to deliver a message.

    Always chained (``raise ... from``) to the provider's own error.
    """

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"Error sending email via {provider}: {message}")
        self.provider = provider
