"""Value Objects for the product catalog.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from ims.domain.exceptions import InvalidArgumentError

MAX_NAME_LENGTH = 255
MAX_EMAIL_LENGTH = 254


def _require_uuid(value: object, label: str) -> None:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"Invalid UUID for {label}: {value!r}")
    try:
        uuid.UUID(value)
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid UUID for {label}: {value!r}") from exc


# --- Identifiers --------------------------------------------------------------


@dataclass(frozen=True)
class ProductId:
    value: str

    def __post_init__(self) -> None:
        _require_uuid(self.value, "ProductId")

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def random() -> ProductId:
        return ProductId(str(uuid.uuid4()))


@dataclass(frozen=True)
class VariantId:
    value: str

    def __post_init__(self) -> None:
        _require_uuid(self.value, "VariantId")

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def random() -> VariantId:
        return VariantId(str(uuid.uuid4()))


# --- Descriptive values -------------------------------------------------------


@dataclass(frozen=True)
class ProductName:
    """A product (or variant) name.

    Surrounding whitespace is stripped; what remains must be non-empty
    and at most 255 characters long.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidArgumentError("Product name must be a string")
        name = self.value.strip()
        if not name:
            raise InvalidArgumentError("Product name cannot be empty")
        if len(name) > MAX_NAME_LENGTH:
            raise InvalidArgumentError(
                f"Product name cannot exceed {MAX_NAME_LENGTH} characters"
            )
        # frozen dataclass: bypass __setattr__ to store the normalised value
        object.__setattr__(self, "value", name)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProductDescription:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidArgumentError("Product description cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Price:
    """A non-negative price.

    Kept as a float because prices travel as plain JSON numbers
    end to end; there is no currency arithmetic in this domain.
    """

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise InvalidArgumentError(
                f"Price must be a number, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise InvalidArgumentError(f"Price cannot be negative, got {self.value}")
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return f"{self.value:.2f}"


# --- Notification values ------------------------------------------------------

_FORBIDDEN_EMAIL_CHARS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


@dataclass(frozen=True)
class EmailAddress:
    """A structurally valid email address.

    Exactly one ``@``, non-empty local and domain parts, a dotted domain,
    no whitespace, no consecutive dots and none of the forbidden
    punctuation characters.
    """

    value: str

    def __post_init__(self) -> None:
        email = self.value
        if not isinstance(email, str) or not self._is_valid(email):
            raise InvalidArgumentError(f"Invalid email address: {email}")

    @staticmethod
    def _is_valid(email: str) -> bool:
        if not email or len(email) > MAX_EMAIL_LENGTH:
            return False
        if any(ch.isspace() for ch in email):
            return False
        if email.count("@") != 1:
            return False

        local_part, domain_part = email.split("@", 1)
        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            return False
        if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            return False
        if "." not in domain_part:
            return False
        if ".." in local_part or ".." in domain_part:
            return False
        for label in domain_part.split("."):
            if not label or label.startswith("-") or label.endswith("-"):
                return False
        return not any(ch in email for ch in _FORBIDDEN_EMAIL_CHARS)

    def __str__(self) -> str:
        return self.value
